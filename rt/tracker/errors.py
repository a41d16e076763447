from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

FormField = Literal["name", "product", "date", "type"]


@dataclass(frozen=True, slots=True)
class MissingField:
    field: FormField


@dataclass(frozen=True, slots=True)
class YearMismatch:
    expected: int
    actual: int


@dataclass(frozen=True, slots=True)
class DuplicateName:
    name: str


ValidationError = MissingField | YearMismatch | DuplicateName


@dataclass(frozen=True, slots=True)
class StorageError:
    """A stored value that could not be read, or a write that did not land."""

    key: str
    message: str
    path: Path | None = None
    operation: Literal["read", "write"] = "write"


@dataclass(frozen=True, slots=True)
class DeliveryError:
    """An export that could not be handed to the user."""

    filename: str
    message: str
