from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import typer

from rt.core.config import Config, load_config
from rt.core.errors import ErrorCode
from rt.core.result import Err
from rt.output.console import ConsoleProtocol, RichConsole
from rt.platform.files import atomic_write_bytes
from rt.platform.paths import data_dir_override, user_config_dir, user_data_dir
from rt.tracker.service import Tracker
from rt.tracker.storage import FileKeyValueStore, ReleaseRepository

CONFIG_ENV_VAR = "RT_CONFIG"


class PromptConfirmer:
    """Asks on the terminal unless --yes was given."""

    def __init__(self, assume_yes: bool = False) -> None:
        self.assume_yes = assume_yes

    def confirm(self, message: str) -> bool:
        if self.assume_yes:
            return True
        return typer.confirm(message, default=False)


@dataclass
class DirectorySink:
    """Writes delivered files into a directory."""

    directory: Path
    written: list[Path] = field(default_factory=list)

    def deliver(self, content: bytes, filename: str, media_type: str) -> None:
        path = self.directory / filename
        atomic_write_bytes(path, content)
        self.written.append(path)


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    data_dir: Path
    today: date

    def open_tracker(
        self,
        year: int | None,
        *,
        assume_yes: bool = False,
        export_dir: Path | None = None,
    ) -> Tracker:
        out_dir = export_dir if export_dir is not None else Path(self.config.export.dir)
        return Tracker(
            ReleaseRepository(FileKeyValueStore(self.data_dir)),
            year=year if year is not None else self.today.year,
            confirmer=PromptConfirmer(assume_yes),
            sink=DirectorySink(out_dir.expanduser()),
            export_prefix=self.config.export.prefix,
            top_n=self.config.summary.top_n,
        )


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return user_config_dir() / "config.toml"


def build_context() -> CLIContext:
    console = RichConsole()
    path = config_path()

    config = Config()
    if path.exists():
        config_result = load_config(path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value

    data_dir = data_dir_override()
    if data_dir is None and config.storage.dir is not None:
        data_dir = Path(config.storage.dir).expanduser()
    if data_dir is None:
        data_dir = user_data_dir()

    return CLIContext(config=config, console=console, data_dir=data_dir, today=date.today())
