"""Fixed release-type taxonomy and calendar.

Static data only: eight release types with display colors, the 12-month
calendar, and the Run/Change/Improve/Exit grouping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = [
    "MONTHS",
    "RELEASE_TYPES",
    "RELEASE_TYPE_IDS",
    "ROLLUP_BUCKETS",
    "ReleaseType",
    "RollupBucket",
    "bucket_for_type",
    "month_index",
    "month_name",
    "release_type",
]


@dataclass(frozen=True, slots=True)
class ReleaseType:
    id: str
    name: str
    color: str  # hex background used by renderers


# Declaration order matters: it breaks ties for the top type.
RELEASE_TYPES: tuple[ReleaseType, ...] = (
    ReleaseType("new-feature", "New Feature", "#DBEAFE"),
    ReleaseType("enhancement", "Enhancement", "#E0E7FF"),
    ReleaseType("bug-fix", "Bug Fix", "#FEE2E2"),
    ReleaseType("dap-migration", "DAP Migration", "#F3E8FF"),
    ReleaseType("retirement", "Retirement", "#E5E7EB"),
    ReleaseType("platform-req", "Platform Requirement", "#CCFBF1"),
    ReleaseType("technical-debt", "Technical Debt", "#FEF9C3"),
    ReleaseType("planned", "Planned", "#DCFCE7"),
)

RELEASE_TYPE_IDS: frozenset[str] = frozenset(rt.id for rt in RELEASE_TYPES)

_BY_ID = {rt.id: rt for rt in RELEASE_TYPES}

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

RollupBucket = Literal["Run", "Change", "Improve", "Exit"]

# "planned" belongs to no bucket: planned work stays out of the rollup.
ROLLUP_BUCKETS: tuple[tuple[RollupBucket, frozenset[str]], ...] = (
    ("Run", frozenset({"bug-fix", "platform-req"})),
    ("Change", frozenset({"new-feature", "enhancement"})),
    ("Improve", frozenset({"technical-debt", "dap-migration"})),
    ("Exit", frozenset({"retirement"})),
)


def release_type(type_id: str) -> ReleaseType | None:
    return _BY_ID.get(type_id)


def bucket_for_type(type_id: str) -> RollupBucket | None:
    for bucket, members in ROLLUP_BUCKETS:
        if type_id in members:
            return bucket
    return None


def month_name(index: int) -> str:
    """Name of a 0-based month index."""
    return MONTHS[index]


def month_index(value: str) -> int | None:
    """Parse a month given as a name, a 3-letter prefix, or 1-12.

    Returns the 0-based index, or None when the value is not a month.
    """
    s = value.strip()
    if not s:
        return None
    if s.isdigit():
        n = int(s)
        return n - 1 if 1 <= n <= 12 else None
    lowered = s.lower()
    for i, name in enumerate(MONTHS):
        if lowered == name.lower() or (len(lowered) >= 3 and name.lower().startswith(lowered)):
            return i
    return None
