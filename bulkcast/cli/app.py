"""Main Typer application — imports and registers all CLI commands.

Entry point: ``bulkcast`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import typer

from bulkcast.cli.commands.run import run_cmd
from bulkcast.cli.commands.settings_cmd import settings_cmd

app = typer.Typer(
    name="bulkcast",
    help="Bulkcast: batch commands into bulks and publish them to sinks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="run", help="Batch stdin commands into bulks.")(run_cmd)
app.command(name="settings", help="Show the effective configuration.")(settings_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
