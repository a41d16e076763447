"""Read-only commands: release list, executive summary, product matrix."""

from __future__ import annotations

import typer

from rt.cli.commands._helpers import build_filter, report_storage
from rt.cli.context import CLIContext, build_context
from rt.output.console import Style
from rt.tracker.aggregate import MonthSummary
from rt.tracker.model import ReleaseRecord
from rt.tracker.service import TrackerView
from rt.tracker.taxonomy import MONTHS, release_type


def _type_name(type_id: str) -> str:
    rt = release_type(type_id)
    return rt.name if rt is not None else type_id


def _record_rows(records: tuple[ReleaseRecord, ...]) -> list[list[str]]:
    return [
        [str(r.id), r.name, r.product, r.date.isoformat(), _type_name(r.type)] for r in records
    ]


def _describe_filter(view: TrackerView) -> str:
    parts = [str(view.year)]
    if view.filter.product:
        parts.append(f"product~{view.filter.product!r}")
    if view.filter.types:
        parts.append("types=" + ",".join(sorted(view.filter.types)))
    if view.filter.month is not None:
        parts.append(MONTHS[view.filter.month])
    return " ".join(parts)


def _print_legend(ctx: CLIContext, view: TrackerView) -> None:
    legend = view.legend
    ctx.console.header(f"Release Type Legend - Total: {legend.total}")
    for entry in legend.entries:
        selected = entry.type.id in view.filter.types
        marker = "*" if selected else " "
        ctx.console.print(f"{marker} {entry.type.name} ({entry.count})")


def _print_month_summary(ctx: CLIContext, summary: MonthSummary, year: int) -> None:
    ctx.console.header(f"Executive Summary - {summary.month_name} {year}")
    ctx.console.print(f"Total Releases: {summary.total}", Style.BOLD)
    for share in summary.by_type:
        ctx.console.print(f"  {share.type.name}: {share.count} ({share.percent}%)")
    if summary.rollup:
        rollup = ", ".join(f"{b.bucket} {b.count} ({b.percent}%)" for b in summary.rollup)
        ctx.console.print(f"  {rollup}", Style.DIM)


def list_releases(
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
    product: str | None = typer.Option(None, "--product", "-p", help="Product text filter"),
    types: list[str] | None = typer.Option(None, "--type", "-t", help="Release type (repeat)"),
    month: str | None = typer.Option(None, "--month", "-m", help="Month (1-12 or name)"),
) -> None:
    """List releases; by month when no month is selected."""
    ctx = build_context()
    tracker = ctx.open_tracker(year)
    report_storage(tracker, ctx)

    view = tracker.view(build_filter(ctx, product=product, types=types, month=month))
    ctx.console.print(_describe_filter(view), Style.DIM)
    _print_legend(ctx, view)

    headers = ["Id", "Name", "Product", "Date", "Type"]
    if view.filter.month is not None:
        ctx.console.newline()
        ctx.console.table(headers, _record_rows(view.refined), title=MONTHS[view.filter.month])
        return

    for index, bucket in enumerate(view.calendar):
        if not bucket:
            ctx.console.print(f"{MONTHS[index]}: -", Style.DIM)
            continue
        ctx.console.newline()
        ctx.console.table(headers, _record_rows(bucket), title=MONTHS[index])


def summary(
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
    product: str | None = typer.Option(None, "--product", "-p", help="Product text filter"),
    types: list[str] | None = typer.Option(None, "--type", "-t", help="Release type (repeat)"),
    month: str | None = typer.Option(None, "--month", "-m", help="Month (1-12 or name)"),
) -> None:
    """Executive summary: monthly totals, type mix, rollup, top products."""
    ctx = build_context()
    tracker = ctx.open_tracker(year)
    report_storage(tracker, ctx)

    view = tracker.view(build_filter(ctx, product=product, types=types, month=month))
    ctx.console.print(_describe_filter(view), Style.DIM)

    ctx.console.header(f"Year {view.year}")
    ctx.console.print(f"Total Releases: {view.legend.total}", Style.BOLD)
    ctx.console.print(f"Average per month: {view.average_per_month:.1f}")
    if view.top_type is not None:
        ctx.console.print(f"Top release type: {view.top_type.type.name} ({view.top_type.count})")

    selected = view.selected_month
    if selected is not None:
        _print_month_summary(ctx, selected, view.year)
    else:
        rows = [
            [
                m.month_name,
                str(m.total),
                ", ".join(f"{s.type.name} {s.percent}%" for s in m.by_type) or "-",
                ", ".join(f"{b.bucket} {b.percent}%" for b in m.rollup) or "-",
            ]
            for m in view.months
        ]
        ctx.console.newline()
        ctx.console.table(["Month", "Total", "Types", "Run/Change/Improve/Exit"], rows)

    title = "Product-wise Breakdown"
    if selected is not None:
        title = f"{title} - {selected.month_name}"
    ctx.console.newline()
    ctx.console.table(
        ["Product", "Releases"],
        [[p.product, str(p.count)] for p in view.top_products],
        title=title,
    )


def matrix(
    year: int | None = typer.Option(None, "--year", "-y", help="Scope year (default: current)"),
    product: str | None = typer.Option(None, "--product", "-p", help="Product text filter"),
) -> None:
    """Releases per product per month for the whole year."""
    ctx = build_context()
    tracker = ctx.open_tracker(year)
    report_storage(tracker, ctx)

    view = tracker.view(build_filter(ctx, product=product, types=None, month=None))
    headers = ["Product", *(m[:3] for m in MONTHS), "Total"]
    rows = [
        [row.product, *(str(c) if c else "." for c in row.counts), str(row.total)]
        for row in view.matrix
    ]
    ctx.console.table(headers, rows, title=f"Product-wise Monthly {view.year}")
