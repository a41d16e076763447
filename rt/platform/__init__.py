"""Platform helpers (user directories, file writes)."""

from .files import atomic_write_bytes
from .paths import data_dir_override, home, user_config_dir, user_data_dir

__all__ = [
    "atomic_write_bytes",
    "data_dir_override",
    "home",
    "user_config_dir",
    "user_data_dir",
]
