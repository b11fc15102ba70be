from __future__ import annotations

import importlib
import sys
from importlib import metadata
from typing import Optional

import typer

from .config import CreditsConfig, load_config
from .errors import ConfigError
from .util.console import error
from .util.log import setup_logging

# Create the top-level Typer app
app = typer.Typer(
    name="repo-credits",
    help="Roll the credits for a git repository: matrix reveal or classic scroll.",
    add_completion=False,
    no_args_is_help=False,
)


def _register_command(module_name: str, name: str) -> None:
    """
    Import a commands module that exposes a `main` function and attach
    it as the `name` subcommand.
    """
    mod = importlib.import_module(module_name)
    app.command(name, help=(mod.main.__doc__ or "").strip().splitlines()[0])(mod.main)


_register_command("repo_credits.commands.play", "play")
_register_command("repo_credits.commands.info", "info")
_register_command("repo_credits.commands.cards", "cards")


def _version_string() -> str:
    try:
        return metadata.version("repo-credits")
    except metadata.PackageNotFoundError:  # pragma: no cover
        return "0.0.0"


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Debug logging on stderr.",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write debug logs to this file (the only log output visible during playback).",
        show_default=False,
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show repo-credits version and exit.",
        is_eager=True,
    ),
) -> None:
    """
    Loads configuration once per process and exposes it to subcommands via ctx.obj.
    With no subcommand the presentation plays with the configured defaults.
    """
    if version:
        typer.echo(f"repo-credits {_version_string()}")
        raise typer.Exit(code=0)

    setup_logging(verbose=verbose, log_file=log_file)

    try:
        cfg: CreditsConfig = load_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)

    ctx.obj = cfg

    if ctx.invoked_subcommand is None:
        from .commands.play import play

        play(cfg)


def main() -> None:
    app()


if __name__ == "__main__":
    # When run as a module: python -m repo_credits
    sys.exit(main())
