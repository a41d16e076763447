from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from rt import __version__
from rt.cli.app import app


def test_version() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_types_lists_taxonomy(tmp_path: Path) -> None:
    env = {"RT_HOME": str(tmp_path), "RT_CONFIG": str(tmp_path / "none.toml")}
    with patch.dict(os.environ, env):
        result = CliRunner().invoke(app, ["types"])

    assert result.exit_code == 0
    assert "Platform Requirement" in result.output


def test_add_then_export_end_to_end(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text(f'[export]\ndir = "{(tmp_path / "out").as_posix()}"\n', encoding="utf-8")
    runner = CliRunner()

    with patch.dict(os.environ, {"RT_CONFIG": str(config)}):
        added = runner.invoke(
            app,
            [
                "--data-dir",
                str(tmp_path / "data"),
                "add",
                "Alpha",
                "--product",
                "CRM",
                "--date",
                "2024-03-10",
                "--type",
                "bug-fix",
                "--year",
                "2024",
            ],
        )
        exported = runner.invoke(
            app, ["--data-dir", str(tmp_path / "data"), "export", "--year", "2024"]
        )

    assert added.exit_code == 0, added.output
    assert exported.exit_code == 0, exported.output
    csv_text = (tmp_path / "out" / "IBP_Release_Tracker_2024.csv").read_text(encoding="utf-8")
    assert '"Alpha","CRM","2024-03-10","2024","March","Bug Fix"' in csv_text


def test_invalid_config_is_an_env_error(tmp_path: Path) -> None:
    config = tmp_path / "config.toml"
    config.write_text("[[[", encoding="utf-8")

    with patch.dict(os.environ, {"RT_CONFIG": str(config), "RT_HOME": str(tmp_path)}):
        result = CliRunner().invoke(app, ["types"])

    assert result.exit_code == 2
