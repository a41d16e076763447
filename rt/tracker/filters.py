"""Base and refined views over a release collection.

The base view narrows by scope year and product text only; legend counts,
monthly summaries and the product matrix read from it so they always cover
the whole year. The refined view narrows the base view further by the
selected types and month and drives list, calendar and drill-down output.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from rt.tracker.model import ReleaseRecord


@dataclass(frozen=True, slots=True)
class ViewFilter:
    product: str = ""
    types: frozenset[str] = frozenset()
    month: int | None = None  # 0-based

    def toggle_type(self, type_id: str) -> ViewFilter:
        if type_id in self.types:
            return replace(self, types=self.types - {type_id})
        return replace(self, types=self.types | {type_id})

    def clear_types(self) -> ViewFilter:
        return replace(self, types=frozenset())

    def with_month(self, month: int | None) -> ViewFilter:
        if month is not None and not 0 <= month <= 11:
            raise ValueError(f"month index out of range: {month}")
        return replace(self, month=month)

    def clear_month(self) -> ViewFilter:
        return replace(self, month=None)

    def with_product(self, product: str) -> ViewFilter:
        return replace(self, product=product)

    def clear_product(self) -> ViewFilter:
        return replace(self, product="")


def base_view(
    records: Iterable[ReleaseRecord], *, year: int, product: str = ""
) -> list[ReleaseRecord]:
    needle = product.casefold()
    return [
        r
        for r in records
        if r.year == year and (not needle or needle in r.product.casefold())
    ]


def refined_view(
    base: Sequence[ReleaseRecord],
    *,
    types: frozenset[str] = frozenset(),
    month: int | None = None,
) -> list[ReleaseRecord]:
    return [
        r
        for r in base
        if (not types or r.type in types) and (month is None or r.month == month)
    ]
