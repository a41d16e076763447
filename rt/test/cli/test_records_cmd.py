from __future__ import annotations

from pathlib import Path

import pytest
import typer

from rt.cli.context import CLIContext
from rt.core.errors import ErrorCode
from rt.test.cli._support import console_of, make_ctx, patch_context


@pytest.fixture
def ctx(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CLIContext:
    import rt.cli.commands.records as records_cmd

    context = make_ctx(tmp_path)
    patch_context(monkeypatch, context, records_cmd)
    return context


def _add(
    name: str, on: str = "2024-03-10", type_: str = "bug-fix", year: int | None = None
) -> None:
    from rt.cli.commands.records import add

    add(name=name, product="CRM", on=on, type_=type_, year=year)


def _stored_names(ctx: CLIContext) -> list[str]:
    return [r.name for r in ctx.open_tracker(2024).records]


def test_add_persists_release(ctx: CLIContext) -> None:
    _add("Alpha")

    assert _stored_names(ctx) == ["Alpha"]
    assert console_of(ctx).has_success()
    assert (ctx.data_dir / "releaseTracker_2024.json").exists()


def test_add_accepts_type_display_name(ctx: CLIContext) -> None:
    _add("Alpha", type_="Platform Requirement")

    assert ctx.open_tracker(2024).records[0].type == "platform-req"


def test_add_duplicate_exits_with_user_error(ctx: CLIContext) -> None:
    _add("Alpha")

    with pytest.raises(typer.Exit) as exc:
        _add("alpha", on="2024-05-01")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert console_of(ctx).find("already exists")
    assert _stored_names(ctx) == ["Alpha"]


def test_add_other_year_exits_with_user_error(ctx: CLIContext) -> None:
    with pytest.raises(typer.Exit) as exc:
        _add("Alpha", on="2025-01-01")

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert _stored_names(ctx) == []


def test_add_with_explicit_year(ctx: CLIContext) -> None:
    _add("Next", on="2025-02-01", year=2025)

    assert [r.name for r in ctx.open_tracker(2025).records] == ["Next"]
    assert _stored_names(ctx) == []


def test_edit_keeps_unspecified_fields(ctx: CLIContext) -> None:
    from rt.cli.commands.records import edit

    _add("Alpha")
    record = ctx.open_tracker(2024).records[0]

    edit(record_id=record.id, name=None, product="ERP", on=None, type_=None, year=None)

    updated = ctx.open_tracker(2024).records[0]
    assert updated.id == record.id
    assert updated.name == "Alpha"
    assert updated.product == "ERP"
    assert updated.date == record.date


def test_edit_unknown_id_warns(ctx: CLIContext) -> None:
    from rt.cli.commands.records import edit

    edit(record_id=7, name="X", product=None, on=None, type_=None, year=None)

    assert console_of(ctx).has_warning()


def test_delete_with_yes(ctx: CLIContext) -> None:
    from rt.cli.commands.records import delete

    _add("Alpha")
    record = ctx.open_tracker(2024).records[0]

    delete(record_id=record.id, year=None, yes=True)

    assert _stored_names(ctx) == []


def test_delete_declined_at_prompt(ctx: CLIContext, monkeypatch: pytest.MonkeyPatch) -> None:
    import rt.cli.context as context_mod
    from rt.cli.commands.records import delete

    _add("Alpha")
    record = ctx.open_tracker(2024).records[0]
    monkeypatch.setattr(context_mod.typer, "confirm", lambda *_a, **_k: False)

    delete(record_id=record.id, year=None, yes=False)

    assert _stored_names(ctx) == ["Alpha"]
    assert console_of(ctx).find("cancelled")


def test_delete_unknown_id_is_quiet(ctx: CLIContext) -> None:
    from rt.cli.commands.records import delete

    delete(record_id=123, year=None, yes=True)

    assert not console_of(ctx).has_error()


def test_add_to_unreadable_year_exits_with_io_error(ctx: CLIContext) -> None:
    blocked = ctx.data_dir / "releaseTracker_2024.json"
    blocked.mkdir(parents=True)

    with pytest.raises(typer.Exit) as exc:
        _add("Alpha")

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert console_of(ctx).find("stored releases left untouched")
    assert blocked.is_dir()
