"""``bulkcast settings`` — show the effective configuration."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bulkcast.config import BulkcastSettings

console = Console()
err_console = Console(stderr=True)


def settings_cmd() -> None:
    """Print the settings resolved from defaults, .env and BULKCAST_* variables."""
    try:
        settings = BulkcastSettings()
    except ValidationError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    table = Table(title="Bulkcast Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Environment Variable", style="dim")

    for name, value in settings.model_dump(mode="json").items():
        table.add_row(name, str(value), f"BULKCAST_{name.upper()}")

    console.print(table)
