"""Validation of release forms before they reach the store."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from rt.core.result import Err, Ok, Result
from rt.tracker.errors import DuplicateName, MissingField, ValidationError, YearMismatch
from rt.tracker.model import ReleaseForm, ReleaseRecord, ValidRelease
from rt.tracker.taxonomy import RELEASE_TYPE_IDS


def normalize_name(name: str) -> str:
    """Key used for name uniqueness: trimmed and case-folded."""
    return name.strip().casefold()


def parse_date(value: str) -> date | None:
    s = value.strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def validate_release(
    form: ReleaseForm,
    *,
    scope_year: int,
    existing: Iterable[ReleaseRecord],
    editing_id: int | None = None,
) -> Result[ValidRelease, ValidationError]:
    """Check a form against the record invariants.

    Checks run in a fixed order and the first failure wins: required fields
    (name, product, date, type), then the scope year, then name uniqueness
    among the `existing` records dated in `scope_year` (ignoring the record
    being edited).
    """
    name = form.name.strip()
    if not name:
        return Err(MissingField("name"))

    product = form.product.strip()
    if not product:
        return Err(MissingField("product"))

    parsed = parse_date(form.date)
    if parsed is None:
        return Err(MissingField("date"))

    type_id = form.type.strip()
    if type_id not in RELEASE_TYPE_IDS:
        return Err(MissingField("type"))

    if parsed.year != scope_year:
        return Err(YearMismatch(expected=scope_year, actual=parsed.year))

    key = normalize_name(name)
    for record in existing:
        if editing_id is not None and record.id == editing_id:
            continue
        if record.year != scope_year:
            continue
        if normalize_name(record.name) == key:
            return Err(DuplicateName(name))

    return Ok(ValidRelease(name=name, product=product, date=parsed, type=type_id))
