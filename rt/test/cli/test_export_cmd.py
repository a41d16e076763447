from __future__ import annotations

from pathlib import Path

import pytest
import typer

from rt.core.errors import ErrorCode
from rt.test.cli._support import console_of, make_ctx, patch_context
from rt.tracker.model import ReleaseForm


def test_export_writes_csv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import rt.cli.commands.export as export_cmd

    ctx = make_ctx(tmp_path)
    patch_context(monkeypatch, ctx, export_cmd)
    tracker = ctx.open_tracker(2024)
    tracker.add(ReleaseForm(name="Alpha", product="CRM", date="2024-03-10", type="bug-fix"))
    tracker.add(ReleaseForm(name="Beta", product="ERP", date="2024-05-01", type="enhancement"))

    export_cmd.export(year=None, product=None, out=None)

    path = tmp_path / "exports" / "IBP_Release_Tracker_2024.csv"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[2] == '"Beta","ERP","2024-05-01","2024","May","Enhancement"'
    assert console_of(ctx).find("IBP_Release_Tracker_2024.csv (2 releases)")


def test_export_to_out_dir_with_product(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import rt.cli.commands.export as export_cmd

    ctx = make_ctx(tmp_path)
    patch_context(monkeypatch, ctx, export_cmd)
    tracker = ctx.open_tracker(2024)
    tracker.add(ReleaseForm(name="Alpha", product="CRM", date="2024-03-10", type="bug-fix"))
    tracker.add(ReleaseForm(name="Beta", product="ERP", date="2024-05-01", type="enhancement"))

    export_cmd.export(year=2024, product="crm", out=tmp_path / "elsewhere")

    text = (tmp_path / "elsewhere" / "IBP_Release_Tracker_2024.csv").read_text(encoding="utf-8")
    assert len(text.splitlines()) == 2


def test_export_failure_exits_with_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import rt.cli.commands.export as export_cmd

    ctx = make_ctx(tmp_path)
    patch_context(monkeypatch, ctx, export_cmd)
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")

    with pytest.raises(typer.Exit) as exc:
        export_cmd.export(year=None, product=None, out=blocker)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert console_of(ctx).has_error()
