from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass

from rt.core.config import DEFAULT_EXPORT_PREFIX
from rt.tracker.model import ReleaseRecord
from rt.tracker.taxonomy import MONTHS, release_type

CSV_MEDIA_TYPE = "text/csv"

EXPORT_HEADER = ("Release Name", "Product", "Date", "Year", "Month", "Release Type")


@dataclass(frozen=True, slots=True)
class ExportFile:
    content: bytes
    filename: str
    media_type: str = CSV_MEDIA_TYPE


def export_filename(year: int, prefix: str = DEFAULT_EXPORT_PREFIX) -> str:
    return f"{prefix}_{year}.csv"


def _row(record: ReleaseRecord) -> tuple[str, ...]:
    rt = release_type(record.type)
    return (
        record.name,
        record.product,
        record.date.isoformat(),
        str(record.year),
        MONTHS[record.month],
        rt.name if rt is not None else record.type,
    )


def render_csv(records: Sequence[ReleaseRecord]) -> str:
    """Header plus one row per record; every field quoted, quotes doubled."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for record in records:
        writer.writerow(_row(record))
    return buf.getvalue()


def build_export(
    records: Sequence[ReleaseRecord], *, year: int, prefix: str = DEFAULT_EXPORT_PREFIX
) -> ExportFile:
    return ExportFile(
        content=render_csv(records).encode("utf-8"),
        filename=export_filename(year, prefix),
    )
