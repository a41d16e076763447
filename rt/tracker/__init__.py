"""Release record engine: validation, storage, views, summaries, export."""

from .errors import (
    DeliveryError,
    DuplicateName,
    MissingField,
    StorageError,
    ValidationError,
    YearMismatch,
)
from .filters import ViewFilter
from .model import ReleaseForm, ReleaseRecord, year_choices
from .service import Confirmer, FileSink, Tracker, TrackerView, build_view
from .storage import FileKeyValueStore, MemoryKeyValueStore, ReleaseRepository

__all__ = [
    "Confirmer",
    "DeliveryError",
    "DuplicateName",
    "FileKeyValueStore",
    "FileSink",
    "MemoryKeyValueStore",
    "MissingField",
    "ReleaseForm",
    "ReleaseRecord",
    "ReleaseRepository",
    "StorageError",
    "Tracker",
    "TrackerView",
    "ValidationError",
    "ViewFilter",
    "YearMismatch",
    "build_view",
    "year_choices",
]
