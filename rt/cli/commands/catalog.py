"""Reference commands: release types and selectable years."""

from __future__ import annotations

from rt.cli.context import build_context
from rt.tracker.model import year_choices
from rt.tracker.storage import FileKeyValueStore, storage_key
from rt.tracker.taxonomy import RELEASE_TYPES, bucket_for_type


def types() -> None:
    """List release types with their colors and rollup bucket."""
    ctx = build_context()
    rows = [
        [rt.id, rt.name, rt.color, bucket_for_type(rt.id) or "-"] for rt in RELEASE_TYPES
    ]
    ctx.console.table(["Id", "Name", "Color", "Bucket"], rows, title="Release Types")


def years() -> None:
    """List selectable years and whether each has stored releases."""
    ctx = build_context()
    backend = FileKeyValueStore(ctx.data_dir)
    rows: list[list[str]] = []
    for year in year_choices(ctx.today.year):
        stored = backend.path_for(storage_key(year)).exists()
        marker = "current" if year == ctx.today.year else ""
        rows.append([str(year), "yes" if stored else "no", marker])
    ctx.console.table(["Year", "Stored", ""], rows, title="Years")
