from __future__ import annotations

from pathlib import Path

import pytest

from rt.test.cli._support import console_of, make_ctx, patch_context
from rt.tracker.model import ReleaseForm


def test_types_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import rt.cli.commands.catalog as catalog_cmd

    ctx = make_ctx(tmp_path)
    patch_context(monkeypatch, ctx, catalog_cmd)

    catalog_cmd.types()

    console = console_of(ctx)
    assert console.find("planned | Planned | #DCFCE7 | -")
    assert console.find("retirement | Retirement | #E5E7EB | Exit")


def test_years_marks_stored_and_current(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import rt.cli.commands.catalog as catalog_cmd

    ctx = make_ctx(tmp_path)
    patch_context(monkeypatch, ctx, catalog_cmd)
    ctx.open_tracker(2025).add(
        ReleaseForm(name="Next", product="CRM", date="2025-01-10", type="planned")
    )

    catalog_cmd.years()

    console = console_of(ctx)
    assert console.find("2023 | no | ")
    assert console.find("2024 | no | current")
    assert console.find("2025 | yes | ")
    assert console.find("2026 | no | ")
