"""Result type for explicit error handling.

Engine operations that can be rejected (validation, storage writes) return a
`Result` instead of raising, so callers always decide what a failure means:

    match tracker.add(form):
        case Ok(record):
            console.success(f"added {record.name}")
        case Err(error):
            print_validation_error(error, console)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying `value`."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying `error`."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
