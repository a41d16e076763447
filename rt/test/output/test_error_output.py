from __future__ import annotations

from pathlib import Path

from rt.output.console import MockConsole
from rt.output.errors import (
    print_delivery_error,
    print_storage_warning,
    print_validation_error,
)
from rt.tracker.errors import (
    DeliveryError,
    DuplicateName,
    MissingField,
    StorageError,
    YearMismatch,
)


def test_missing_field_message() -> None:
    console = MockConsole()
    print_validation_error(MissingField("date"), console)

    assert console.messages[0] == "error: Release date is required"
    assert "YYYY-MM-DD" in console.messages[1]


def test_year_mismatch_message() -> None:
    console = MockConsole()
    print_validation_error(YearMismatch(expected=2024, actual=2025), console)

    assert "2025" in console.messages[0]
    assert "--year 2025" in console.messages[1]


def test_duplicate_name_message() -> None:
    console = MockConsole()
    print_validation_error(DuplicateName("Alpha"), console)

    assert console.messages == ["error: A release named 'Alpha' already exists in this year"]


def test_storage_warning_with_path(tmp_path: Path) -> None:
    console = MockConsole()
    error = StorageError(key="k", message="failed", path=tmp_path / "k.json")
    print_storage_warning(error, console)

    assert console.has_warning()
    assert str(tmp_path) in console.messages[1]


def test_delivery_error() -> None:
    console = MockConsole()
    print_delivery_error(DeliveryError(filename="a.csv", message="denied"), console)

    assert console.messages == ["error: could not write a.csv: denied"]


def test_storage_warning_distinguishes_reads_from_writes() -> None:
    console = MockConsole()
    print_storage_warning(StorageError(key="k", message="failed to write k"), console)
    print_storage_warning(
        StorageError(key="k", message="failed to read k", operation="read"), console
    )

    assert console.messages == [
        "warning: changes kept in memory only: failed to write k",
        "warning: stored releases left untouched: failed to read k",
    ]
