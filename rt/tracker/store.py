"""In-memory release collection for one scope year.

Each mutation swaps in a new tuple rather than editing in place, so views
derived from an earlier `records` snapshot never change underneath a caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from rt.tracker.model import ReleaseRecord, ValidRelease


class YearStore:
    def __init__(self, year: int, records: Iterable[ReleaseRecord] = ()) -> None:
        self._year = year
        self._records: tuple[ReleaseRecord, ...] = tuple(records)

    @property
    def year(self) -> int:
        return self._year

    @property
    def records(self) -> tuple[ReleaseRecord, ...]:
        return self._records

    def get(self, record_id: int) -> ReleaseRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def create(self, record_id: int, release: ValidRelease) -> ReleaseRecord:
        record = ReleaseRecord(
            id=record_id,
            name=release.name,
            product=release.product,
            date=release.date,
            type=release.type,
        )
        self._records = (*self._records, record)
        return record

    def update(self, record_id: int, release: ValidRelease) -> ReleaseRecord | None:
        """Replace every field but the id. Returns None if the id is absent."""
        current = self.get(record_id)
        if current is None:
            return None
        updated = replace(
            current,
            name=release.name,
            product=release.product,
            date=release.date,
            type=release.type,
        )
        self._records = tuple(updated if r.id == record_id else r for r in self._records)
        return updated

    def delete(self, record_id: int) -> bool:
        """Remove a record. Deleting an absent id is a no-op returning False."""
        kept = tuple(r for r in self._records if r.id != record_id)
        removed = len(kept) != len(self._records)
        self._records = kept
        return removed

    def replace_all(self, records: Iterable[ReleaseRecord]) -> None:
        self._records = tuple(records)
