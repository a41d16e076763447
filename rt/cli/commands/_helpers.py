"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from rt.core.errors import ErrorCode
from rt.output.console import Style
from rt.output.errors import print_storage_warning
from rt.tracker.filters import ViewFilter
from rt.tracker.taxonomy import RELEASE_TYPES, month_index

if TYPE_CHECKING:
    from rt.cli.context import CLIContext
    from rt.tracker.service import Tracker


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def resolve_type(value: str) -> str:
    """Map a type id or display name (any case) to its id.

    Unknown values are returned stripped, for the validator to reject.
    """
    s = value.strip()
    lowered = s.lower()
    for rt in RELEASE_TYPES:
        if lowered in (rt.id, rt.name.lower()):
            return rt.id
    return s


def parse_month_option(value: str | None, ctx: CLIContext) -> int | None:
    """Parse --month (1-12 or a month name) into a 0-based index."""
    if value is None:
        return None
    index = month_index(value)
    if index is None:
        ctx.console.error(f"unknown month: {value}")
        ctx.console.print("hint: use 1-12 or a month name", Style.DIM)
        exit_with_code(int(ErrorCode.USER_ERROR))
    return index


def build_filter(
    ctx: CLIContext,
    *,
    product: str | None,
    types: list[str] | None,
    month: str | None,
) -> ViewFilter:
    view_filter = ViewFilter(product=(product or "").strip())
    for t in types or []:
        type_id = resolve_type(t)
        if type_id not in {rt.id for rt in RELEASE_TYPES}:
            ctx.console.error(f"unknown release type: {t}")
            ctx.console.print("hint: run `rt types` to list release types", Style.DIM)
            exit_with_code(int(ErrorCode.USER_ERROR))
        if type_id not in view_filter.types:
            view_filter = view_filter.toggle_type(type_id)
    return view_filter.with_month(parse_month_option(month, ctx))


def report_storage(tracker: Tracker, ctx: CLIContext) -> None:
    """Warn about recovered or unwritten data for the active year."""
    if tracker.recovered_corrupt_data:
        ctx.console.warning(f"stored releases for {tracker.year} were unreadable and were reset")
    if tracker.last_storage_error is not None:
        print_storage_warning(tracker.last_storage_error, ctx.console)
