"""Commands that change the stored releases: add, edit, delete."""

from __future__ import annotations

import typer

from rt.cli.commands._helpers import exit_with_code, report_storage, resolve_type
from rt.cli.context import CLIContext, build_context
from rt.core.errors import ErrorCode
from rt.core.result import Err
from rt.output.console import Style
from rt.output.errors import print_validation_error
from rt.tracker.model import ReleaseForm, ReleaseRecord
from rt.tracker.service import Tracker


def _describe(record: ReleaseRecord) -> str:
    when = record.date.isoformat()
    return f"#{record.id} {record.name} ({record.product}, {when}, {record.type})"


def _finish(tracker: Tracker, ctx: CLIContext) -> None:
    report_storage(tracker, ctx)
    if tracker.last_storage_error is not None:
        exit_with_code(int(ErrorCode.IO_ERROR))


def add(
    name: str = typer.Argument(..., help="Release name (unique within the year)"),
    product: str = typer.Option(..., "--product", "-p", help="Product / app"),
    on: str = typer.Option(..., "--date", "-d", help="Release date (YYYY-MM-DD)"),
    type_: str = typer.Option(..., "--type", "-t", help="Release type id or name"),
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
) -> None:
    """Record a new release."""
    ctx = build_context()
    tracker = ctx.open_tracker(year)

    form = ReleaseForm(name=name, product=product, date=on, type=resolve_type(type_))
    result = tracker.add(form)
    if isinstance(result, Err):
        print_validation_error(result.error, ctx.console)
        exit_with_code(int(ErrorCode.USER_ERROR))

    ctx.console.success(f"added {_describe(result.value)}")
    _finish(tracker, ctx)


def edit(
    record_id: int = typer.Argument(..., help="Release id"),
    name: str | None = typer.Option(None, "--name", "-n", help="New release name"),
    product: str | None = typer.Option(None, "--product", "-p", help="New product / app"),
    on: str | None = typer.Option(None, "--date", "-d", help="New release date (YYYY-MM-DD)"),
    type_: str | None = typer.Option(None, "--type", "-t", help="New release type"),
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
) -> None:
    """Update a release; options left out keep their current value."""
    ctx = build_context()
    tracker = ctx.open_tracker(year)

    current = tracker.get(record_id)
    if current is None:
        ctx.console.warning(f"no release #{record_id} in {tracker.year}; nothing to update")
        return

    form = ReleaseForm(
        name=name if name is not None else current.name,
        product=product if product is not None else current.product,
        date=on if on is not None else current.date.isoformat(),
        type=resolve_type(type_) if type_ is not None else current.type,
    )
    result = tracker.update(record_id, form)
    if isinstance(result, Err):
        print_validation_error(result.error, ctx.console)
        exit_with_code(int(ErrorCode.USER_ERROR))

    if result.value is not None:
        ctx.console.success(f"updated {_describe(result.value)}")
    _finish(tracker, ctx)


def delete(
    record_id: int = typer.Argument(..., help="Release id"),
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
    yes: bool = typer.Option(False, "--yes", help="Do not ask for confirmation"),
) -> None:
    """Delete a release (asks first)."""
    ctx = build_context()
    tracker = ctx.open_tracker(year, assume_yes=yes)

    target = tracker.get(record_id)
    if target is None:
        ctx.console.print(f"no release #{record_id} in {tracker.year}", Style.DIM)
        return

    if tracker.delete(record_id):
        ctx.console.success(f"deleted {_describe(target)}")
        _finish(tracker, ctx)
    else:
        ctx.console.print("cancelled", Style.DIM)
