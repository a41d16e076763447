from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from rt.cli.context import CLIContext
from rt.core.config import Config, ExportConfig
from rt.output.console import MockConsole


def make_ctx(tmp_path: Path) -> CLIContext:
    return CLIContext(
        config=Config(export=ExportConfig(dir=str(tmp_path / "exports"))),
        console=MockConsole(),
        data_dir=tmp_path / "data",
        today=date(2024, 6, 1),
    )


def patch_context(monkeypatch: pytest.MonkeyPatch, ctx: CLIContext, *modules: object) -> None:
    for module in modules:
        monkeypatch.setattr(module, "build_context", lambda: ctx)


def console_of(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console
