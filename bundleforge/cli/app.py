"""Main Typer application: imports and registers all CLI commands.

Entry point: ``bundleforge`` (configured via pyproject.toml scripts).

Commands: build, check, render.
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from bundleforge.cli.commands.build import build_cmd
from bundleforge.cli.commands.check import check_cmd
from bundleforge.cli.commands.render import render_cmd
from bundleforge.config import config

app = typer.Typer(
    name="bundleforge",
    help="Bundleforge: fingerprint-cached CSS and JavaScript bundling.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="build", help="Build a bundle, or reuse it if unchanged.")(build_cmd)
app.command(name="check", help="Show whether a bundle is stale.")(check_cmd)
app.command(name="render", help="Print HTML tags including the assets.")(render_cmd)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
