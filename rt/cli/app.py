from __future__ import annotations

import os
from pathlib import Path

import typer

from rt import __version__
from rt.cli.commands.catalog import types, years
from rt.cli.commands.export import export
from rt.cli.commands.records import add, delete, edit
from rt.cli.commands.views import list_releases, matrix, summary
from rt.cli.context import CONFIG_ENV_VAR
from rt.core.errors import ErrorCode
from rt.platform.paths import HOME_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(types)
app.command()(years)
app.command()(add)
app.command()(edit)
app.command()(delete)
app.command("list")(list_releases)
app.command()(summary)
app.command()(matrix)
app.command()(export)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        help="Directory holding stored releases (overrides RT_HOME and config)",
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml"),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if data_dir is not None:
        try:
            root = data_dir.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --data-dir: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if root.exists() and not root.is_dir():
            typer.echo(f"error: --data-dir '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

        os.environ[HOME_ENV_VAR] = str(root)

    if config is not None:
        os.environ[CONFIG_ENV_VAR] = str(config.expanduser())


def main() -> None:
    app()
