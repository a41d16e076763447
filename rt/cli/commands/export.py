from __future__ import annotations

from pathlib import Path

import typer

from rt.cli.commands._helpers import exit_with_code, report_storage
from rt.cli.context import build_context
from rt.core.errors import ErrorCode
from rt.core.result import Err
from rt.output.errors import print_delivery_error
from rt.tracker.filters import ViewFilter


def export(
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
    product: str | None = typer.Option(None, "--product", "-p", help="Product text filter"),
    out: Path | None = typer.Option(None, "--out", "-o", help="Output directory"),
) -> None:
    """Write the year's releases to <prefix>_<year>.csv."""
    ctx = build_context()
    tracker = ctx.open_tracker(year, export_dir=out)
    report_storage(tracker, ctx)

    product_text = (product or "").strip()
    result = tracker.deliver_export(product_text)
    if isinstance(result, Err):
        print_delivery_error(result.error, ctx.console)
        exit_with_code(int(ErrorCode.IO_ERROR))

    count = len(tracker.view(ViewFilter(product=product_text)).base)
    ctx.console.success(f"{result.value.filename} ({count} releases)")
