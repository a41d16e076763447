"""Typed configuration loading and access.

The tracker reads an optional `config.toml`:

    [storage]
    dir = "~/tracker-data"

    [export]
    prefix = "IBP_Release_Tracker"
    dir = "exports"

    [summary]
    top_n = 5

Every key is optional; missing or malformed values fall back to defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "ExportConfig",
    "StorageConfig",
    "SummaryConfig",
    "load_config",
    "DEFAULT_EXPORT_PREFIX",
    "DEFAULT_TOP_N",
]

DEFAULT_EXPORT_PREFIX = "IBP_Release_Tracker"
DEFAULT_EXPORT_DIR = "."
DEFAULT_TOP_N = 5


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Where the durable key-value store lives.

    None means the platform default (see `rt.platform.paths.user_data_dir`).
    """

    dir: str | None = None


@dataclass(frozen=True, slots=True)
class ExportConfig:
    prefix: str = DEFAULT_EXPORT_PREFIX
    dir: str = DEFAULT_EXPORT_DIR


@dataclass(frozen=True, slots=True)
class SummaryConfig:
    top_n: int = DEFAULT_TOP_N


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        storage: StrDict = get_table(data, "storage") or {}
        export: StrDict = get_table(data, "export") or {}
        summary: StrDict = get_table(data, "summary") or {}

        top_n = get_int(summary, "top_n")
        if top_n is None or top_n < 1:
            top_n = DEFAULT_TOP_N

        return cls(
            storage=StorageConfig(dir=get_str(storage, "dir")),
            export=ExportConfig(
                prefix=get_str(export, "prefix") or DEFAULT_EXPORT_PREFIX,
                dir=get_str(export, "dir") or DEFAULT_EXPORT_DIR,
            ),
            summary=SummaryConfig(top_n=top_n),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
