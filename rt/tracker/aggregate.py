"""Summary view-models computed from base and refined views.

All functions are pure and recompute from the records they are given.
Percentages round half up (2.5 -> 3), as spreadsheets and dashboards do,
rather than Python's round-half-to-even.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from rt.tracker.model import ReleaseRecord
from rt.tracker.taxonomy import MONTHS, RELEASE_TYPES, ROLLUP_BUCKETS, ReleaseType, RollupBucket

__all__ = [
    "BucketShare",
    "Legend",
    "LegendEntry",
    "MonthSummary",
    "ProductCount",
    "ProductRow",
    "TypeShare",
    "average_per_month",
    "calendar_buckets",
    "legend_counts",
    "month_summary",
    "monthly_summaries",
    "percent",
    "product_matrix",
    "rollup",
    "top_products",
    "top_type",
]


def percent(count: int, total: int) -> int:
    """Share of total as a whole percentage; 0 when total is 0."""
    if total <= 0:
        return 0
    value = Decimal(count * 100) / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True, slots=True)
class LegendEntry:
    type: ReleaseType
    count: int


@dataclass(frozen=True, slots=True)
class Legend:
    entries: tuple[LegendEntry, ...]
    total: int

    def count_for(self, type_id: str) -> int:
        for entry in self.entries:
            if entry.type.id == type_id:
                return entry.count
        return 0


def legend_counts(base: Sequence[ReleaseRecord]) -> Legend:
    """Per-type counts over the base view, in taxonomy order (zeros included)."""
    counts = Counter(r.type for r in base)
    entries = tuple(LegendEntry(type=rt, count=counts.get(rt.id, 0)) for rt in RELEASE_TYPES)
    return Legend(entries=entries, total=len(base))


@dataclass(frozen=True, slots=True)
class TypeShare:
    type: ReleaseType
    count: int
    percent: int


@dataclass(frozen=True, slots=True)
class BucketShare:
    bucket: RollupBucket
    count: int
    percent: int


@dataclass(frozen=True, slots=True)
class MonthSummary:
    month: int  # 0-based
    total: int
    # Only types/buckets with a non-zero count, in declaration order.
    by_type: tuple[TypeShare, ...]
    rollup: tuple[BucketShare, ...]

    @property
    def month_name(self) -> str:
        return MONTHS[self.month]


def rollup(records: Sequence[ReleaseRecord], total: int) -> tuple[BucketShare, ...]:
    """Run/Change/Improve/Exit counts, as shares of `total`.

    Records whose type belongs to no bucket (planned) count toward `total`
    only, so bucket percentages need not add up to 100.
    """
    counts = Counter(r.type for r in records)
    shares: list[BucketShare] = []
    for bucket, members in ROLLUP_BUCKETS:
        count = sum(counts.get(type_id, 0) for type_id in members)
        if count:
            shares.append(BucketShare(bucket=bucket, count=count, percent=percent(count, total)))
    return tuple(shares)


def month_summary(base: Sequence[ReleaseRecord], month: int) -> MonthSummary:
    in_month = [r for r in base if r.month == month]
    total = len(in_month)
    counts = Counter(r.type for r in in_month)
    by_type = tuple(
        TypeShare(type=rt, count=counts[rt.id], percent=percent(counts[rt.id], total))
        for rt in RELEASE_TYPES
        if counts.get(rt.id)
    )
    return MonthSummary(month=month, total=total, by_type=by_type, rollup=rollup(in_month, total))


def monthly_summaries(base: Sequence[ReleaseRecord]) -> tuple[MonthSummary, ...]:
    """One summary per calendar month, zero-total months included."""
    return tuple(month_summary(base, month) for month in range(12))


@dataclass(frozen=True, slots=True)
class ProductRow:
    product: str
    counts: tuple[int, ...]  # 12 entries, January first

    @property
    def total(self) -> int:
        return sum(self.counts)


def product_matrix(base: Sequence[ReleaseRecord]) -> tuple[ProductRow, ...]:
    """Releases per product per month, rows in order of first appearance."""
    rows: dict[str, list[int]] = {}
    for r in base:
        counts = rows.setdefault(r.product, [0] * 12)
        counts[r.month] += 1
    return tuple(ProductRow(product=p, counts=tuple(c)) for p, c in rows.items())


@dataclass(frozen=True, slots=True)
class ProductCount:
    product: str
    count: int


def top_products(
    records: Sequence[ReleaseRecord],
    *,
    order_source: Sequence[ReleaseRecord] | None = None,
    n: int = 5,
) -> tuple[ProductCount, ...]:
    """Products ranked by release count, highest first.

    Equal counts keep the order in which products first appear in
    `order_source` (the base view), falling back to `records` itself.
    """
    first_seen: dict[str, int] = {}
    for r in order_source if order_source is not None else records:
        first_seen.setdefault(r.product, len(first_seen))

    counts: dict[str, int] = {}
    for r in records:
        counts[r.product] = counts.get(r.product, 0) + 1

    unseen = len(first_seen)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], first_seen.get(item[0], unseen)))
    return tuple(ProductCount(product=p, count=c) for p, c in ranked[:n])


def average_per_month(base: Sequence[ReleaseRecord]) -> float:
    """Year total over 12, rounded half up to one decimal."""
    value = Decimal(len(base)) / Decimal(12)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def top_type(base: Sequence[ReleaseRecord]) -> LegendEntry | None:
    """Most frequent type; the first declared type wins ties. None if empty."""
    if not base:
        return None
    best: LegendEntry | None = None
    for entry in legend_counts(base).entries:
        if best is None or entry.count > best.count:
            best = entry
    return best


def calendar_buckets(refined: Sequence[ReleaseRecord]) -> tuple[tuple[ReleaseRecord, ...], ...]:
    """Refined records grouped by month: always 12 buckets."""
    buckets: list[list[ReleaseRecord]] = [[] for _ in range(12)]
    for r in refined:
        buckets[r.month].append(r)
    return tuple(tuple(b) for b in buckets)
