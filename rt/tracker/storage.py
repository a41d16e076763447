"""Persistence of per-year release collections.

Each scope year lives under its own key, `releaseTracker:<year>`, holding a
UTF-8 JSON array of records:

    [{"id": 1710057600000, "name": "Alpha", "product": "CRM",
      "date": "2024-03-10", "type": "bug-fix"}]

An absent key reads as an empty collection. So does a value that is not a
well-formed record list (bad JSON, a missing field, a type id outside the
taxonomy, or an id used twice); in that case the key is overwritten with
`[]` so the corruption does not survive the next read. A key that exists but
cannot be read is reported and left untouched.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Protocol

from rt.core.result import Err, Ok, Result
from rt.core.structured import as_obj_list, as_str_dict, get_int, get_raw_str
from rt.platform.files import atomic_write_bytes
from rt.tracker.errors import StorageError
from rt.tracker.model import ReleaseRecord
from rt.tracker.taxonomy import RELEASE_TYPE_IDS

__all__ = [
    "FileKeyValueStore",
    "KeyValueStore",
    "LoadOutcome",
    "MemoryKeyValueStore",
    "ReleaseRepository",
    "decode_records",
    "encode_records",
    "storage_key",
]

KEY_PREFIX = "releaseTracker"

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def storage_key(year: int) -> str:
    return f"{KEY_PREFIX}:{year}"


class KeyValueStore(Protocol):
    def get(self, key: str) -> bytes | None:
        """Return the value under key, or None if there is none.

        Raises:
            OSError: the value exists but could not be read.
        """
        ...

    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            OSError: the value could not be written.
        """
        ...


class MemoryKeyValueStore:
    """Dict-backed store, for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = value


class FileKeyValueStore:
    """One file per key under a directory.

    Characters that are not safe in file names (":" among them) become "_",
    so `releaseTracker:2024` is stored as `releaseTracker_2024.json`.
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def path_for(self, key: str) -> Path:
        return self.root / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> bytes | None:
        try:
            return self.path_for(key).read_bytes()
        except FileNotFoundError:
            return None

    def set(self, key: str, value: bytes) -> None:
        atomic_write_bytes(self.path_for(key), value)


def encode_records(records: Sequence[ReleaseRecord]) -> bytes:
    payload = [
        {
            "id": r.id,
            "name": r.name,
            "product": r.product,
            "date": r.date.isoformat(),
            "type": r.type,
        }
        for r in records
    ]
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def _decode_record(item: object) -> ReleaseRecord | None:
    d = as_str_dict(item)
    if d is None:
        return None

    record_id = get_int(d, "id")
    name = get_raw_str(d, "name")
    product = get_raw_str(d, "product")
    raw_date = get_raw_str(d, "date")
    type_id = get_raw_str(d, "type")
    if record_id is None or name is None or product is None or raw_date is None:
        return None
    if type_id is None or type_id not in RELEASE_TYPE_IDS:
        return None

    try:
        parsed = date.fromisoformat(raw_date)
    except ValueError:
        return None

    return ReleaseRecord(id=record_id, name=name, product=product, date=parsed, type=type_id)


def decode_records(raw: bytes) -> list[ReleaseRecord] | None:
    """Parse a stored value. Returns None if any part of it is malformed."""
    try:
        obj: object = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None

    items = as_obj_list(obj)
    if items is None:
        return None

    records: list[ReleaseRecord] = []
    seen: set[int] = set()
    for item in items:
        record = _decode_record(item)
        if record is None or record.id in seen:
            return None
        seen.add(record.id)
        records.append(record)
    return records


@dataclass(frozen=True, slots=True)
class LoadOutcome:
    records: list[ReleaseRecord]
    # True when the stored value was unreadable and has been reset to [].
    recovered: bool = False
    heal_error: StorageError | None = None
    read_error: StorageError | None = None


class ReleaseRepository:
    """Maps scope years onto a key-value store."""

    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    def _path_for(self, key: str) -> Path | None:
        if isinstance(self.backend, FileKeyValueStore):
            return self.backend.path_for(key)
        return None

    def load(self, year: int) -> LoadOutcome:
        key = storage_key(year)
        try:
            raw = self.backend.get(key)
        except OSError as e:
            error = StorageError(
                key=key,
                message=f"failed to read {key}: {e}",
                path=self._path_for(key),
                operation="read",
            )
            return LoadOutcome(records=[], read_error=error)
        if raw is None:
            return LoadOutcome(records=[])

        records = decode_records(raw)
        if records is not None:
            return LoadOutcome(records=records)

        healed = self.save(year, [])
        heal_error = healed.error if isinstance(healed, Err) else None
        return LoadOutcome(records=[], recovered=True, heal_error=heal_error)

    def save(self, year: int, records: Sequence[ReleaseRecord]) -> Result[None, StorageError]:
        key = storage_key(year)
        try:
            self.backend.set(key, encode_records(records))
        except OSError as e:
            message = f"failed to write {key}: {e}"
            return Err(StorageError(key=key, message=message, path=self._path_for(key)))
        return Ok(None)
