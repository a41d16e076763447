"""The tracker session: one active scope year and everything derived from it.

`Tracker` owns the `YearStore` for the selected year. Every accepted
mutation goes validator -> store -> repository (write-through); views and
summaries are rebuilt from the store on each `view()` call. Confirmation
before delete and delivery of exports go through injected capabilities so
tests can substitute fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from rt.core.config import DEFAULT_EXPORT_PREFIX, DEFAULT_TOP_N
from rt.core.result import Err, Ok, Result
from rt.tracker.aggregate import (
    Legend,
    LegendEntry,
    MonthSummary,
    ProductCount,
    ProductRow,
    average_per_month,
    calendar_buckets,
    legend_counts,
    monthly_summaries,
    product_matrix,
    top_products,
    top_type,
)
from rt.tracker.errors import DeliveryError, StorageError, ValidationError
from rt.tracker.export import ExportFile, build_export
from rt.tracker.filters import ViewFilter, base_view, refined_view
from rt.tracker.ids import IdGenerator
from rt.tracker.model import ReleaseForm, ReleaseRecord
from rt.tracker.storage import ReleaseRepository
from rt.tracker.store import YearStore
from rt.tracker.validator import validate_release

__all__ = [
    "Confirmer",
    "DELETE_PROMPT",
    "FileSink",
    "Tracker",
    "TrackerView",
    "build_view",
]

DELETE_PROMPT = "Delete this release?"


class Confirmer(Protocol):
    def confirm(self, message: str) -> bool: ...


class FileSink(Protocol):
    def deliver(self, content: bytes, filename: str, media_type: str) -> None:
        """Hand a generated file to the user.

        Raises:
            OSError: the file could not be delivered.
        """
        ...


@dataclass(frozen=True, slots=True)
class TrackerView:
    year: int
    filter: ViewFilter
    base: tuple[ReleaseRecord, ...]
    refined: tuple[ReleaseRecord, ...]
    legend: Legend
    calendar: tuple[tuple[ReleaseRecord, ...], ...]
    months: tuple[MonthSummary, ...]
    matrix: tuple[ProductRow, ...]
    top_products: tuple[ProductCount, ...]
    average_per_month: float
    top_type: LegendEntry | None

    @property
    def selected_month(self) -> MonthSummary | None:
        """Executive summary for the month filter, if one is set."""
        if self.filter.month is None:
            return None
        return self.months[self.filter.month]


def build_view(
    records: Sequence[ReleaseRecord],
    *,
    year: int,
    view_filter: ViewFilter = ViewFilter(),
    top_n: int = DEFAULT_TOP_N,
) -> TrackerView:
    base = base_view(records, year=year, product=view_filter.product)
    refined = refined_view(base, types=view_filter.types, month=view_filter.month)
    months = monthly_summaries(base)

    return TrackerView(
        year=year,
        filter=view_filter,
        base=tuple(base),
        refined=tuple(refined),
        legend=legend_counts(base),
        calendar=calendar_buckets(refined),
        months=months,
        matrix=product_matrix(base),
        top_products=top_products(refined, order_source=base, n=top_n),
        average_per_month=average_per_month(base),
        top_type=top_type(base),
    )


class Tracker:
    def __init__(
        self,
        repository: ReleaseRepository,
        *,
        year: int,
        confirmer: Confirmer,
        sink: FileSink,
        ids: IdGenerator | None = None,
        export_prefix: str = DEFAULT_EXPORT_PREFIX,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        self._repository = repository
        self._confirmer = confirmer
        self._sink = sink
        self._ids = ids or IdGenerator()
        self._export_prefix = export_prefix
        self._top_n = top_n
        self.last_storage_error: StorageError | None = None
        self.recovered_corrupt_data = False
        self._unreadable = False
        self._store = self._open(year)

    @property
    def year(self) -> int:
        return self._store.year

    @property
    def records(self) -> tuple[ReleaseRecord, ...]:
        return self._store.records

    def get(self, record_id: int) -> ReleaseRecord | None:
        return self._store.get(record_id)

    def _open(self, year: int) -> YearStore:
        outcome = self._repository.load(year)
        self.recovered_corrupt_data = outcome.recovered
        self._unreadable = outcome.read_error is not None
        load_error = outcome.read_error or outcome.heal_error
        if load_error is not None:
            self.last_storage_error = load_error
        self._ids.observe([r.id for r in outcome.records])
        return YearStore(year, outcome.records)

    def _persist(self) -> None:
        if self._unreadable:
            # Keep whatever is stored; it was never loaded.
            return
        result = self._repository.save(self._store.year, self._store.records)
        self.last_storage_error = result.error if isinstance(result, Err) else None

    def switch_year(self, year: int) -> None:
        """Save the current year, then swap in the collection for `year`."""
        self._persist()
        self._store = self._open(year)

    def add(self, form: ReleaseForm) -> Result[ReleaseRecord, ValidationError]:
        checked = validate_release(form, scope_year=self.year, existing=self._store.records)
        if isinstance(checked, Err):
            return checked

        record = self._store.create(self._ids.next_id(), checked.value)
        self._persist()
        return Ok(record)

    def update(
        self, record_id: int, form: ReleaseForm
    ) -> Result[ReleaseRecord | None, ValidationError]:
        """Replace a record's fields. Ok(None) when the id is not in the store."""
        if record_id not in self._store:
            return Ok(None)

        checked = validate_release(
            form,
            scope_year=self.year,
            existing=self._store.records,
            editing_id=record_id,
        )
        if isinstance(checked, Err):
            return checked

        record = self._store.update(record_id, checked.value)
        self._persist()
        return Ok(record)

    def delete(self, record_id: int) -> bool:
        """Delete after confirmation. False if declined or the id is absent."""
        if record_id not in self._store:
            return False
        if not self._confirmer.confirm(DELETE_PROMPT):
            return False

        self._store.delete(record_id)
        self._persist()
        return True

    def view(self, view_filter: ViewFilter = ViewFilter()) -> TrackerView:
        return build_view(
            self._store.records, year=self.year, view_filter=view_filter, top_n=self._top_n
        )

    def export(self, product: str = "") -> ExportFile:
        """CSV of the base view (year + product text)."""
        base = base_view(self._store.records, year=self.year, product=product)
        return build_export(base, year=self.year, prefix=self._export_prefix)

    def deliver_export(self, product: str = "") -> Result[ExportFile, DeliveryError]:
        export = self.export(product)
        try:
            self._sink.deliver(export.content, export.filename, export.media_type)
        except OSError as e:
            return Err(DeliveryError(filename=export.filename, message=str(e)))
        return Ok(export)
