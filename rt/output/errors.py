"""Error presentation utilities.

Centralized wording for rejected writes and storage problems.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rt.output.console import Style
from rt.tracker.errors import (
    DeliveryError,
    DuplicateName,
    MissingField,
    StorageError,
    ValidationError,
    YearMismatch,
)

if TYPE_CHECKING:
    from rt.output.console import ConsoleProtocol

__all__ = [
    "print_delivery_error",
    "print_storage_warning",
    "print_validation_error",
]

_FIELD_LABELS = {
    "name": "Release name",
    "product": "Product",
    "date": "Release date",
    "type": "Release type",
}


def print_validation_error(error: ValidationError, console: ConsoleProtocol) -> None:
    match error:
        case MissingField(field=field):
            console.error(f"{_FIELD_LABELS[field]} is required")
            if field == "date":
                console.print("hint: use YYYY-MM-DD", Style.DIM)
            elif field == "type":
                console.print("hint: run `rt types` to list release types", Style.DIM)
        case YearMismatch(expected=expected, actual=actual):
            console.error(f"Release date is in {actual}, but the selected year is {expected}")
            console.print(f"hint: pass --year {actual} to record it there", Style.DIM)
        case DuplicateName(name=name):
            console.error(f"A release named '{name}' already exists in this year")


def print_storage_warning(error: StorageError, console: ConsoleProtocol) -> None:
    if error.operation == "read":
        console.warning(f"stored releases left untouched: {error.message}")
    else:
        console.warning(f"changes kept in memory only: {error.message}")
    if error.path is not None:
        console.print(f"hint: check permissions on {error.path.parent}", Style.DIM)


def print_delivery_error(error: DeliveryError, console: ConsoleProtocol) -> None:
    console.error(f"could not write {error.filename}: {error.message}")
