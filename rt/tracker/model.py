from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ReleaseRecord:
    """A tracked release event."""

    id: int
    name: str
    product: str
    date: date
    type: str  # taxonomy id

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        """0-based month index."""
        return self.date.month - 1


@dataclass(frozen=True, slots=True)
class ReleaseForm:
    """Raw user input for an add or update, before validation."""

    name: str = ""
    product: str = ""
    date: str = ""  # ISO yyyy-mm-dd
    type: str = ""


@dataclass(frozen=True, slots=True)
class ValidRelease:
    """A form that passed validation: trimmed text and a parsed date."""

    name: str
    product: str
    date: date
    type: str


def year_choices(current: int) -> tuple[int, ...]:
    """Scope years offered to the user: last year through two years ahead."""
    return (current - 1, current, current + 1, current + 2)
