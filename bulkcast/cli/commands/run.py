"""``bulkcast run`` — batch commands read from stdin.

Each input line is one command.  Completed bulks go to the console and,
unless disabled, to one log file per bulk.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bulkcast.config import BulkcastSettings
from bulkcast.core.errors import BulkError
from bulkcast.core.handler import BulkHandler, OpenBlockPolicy
from bulkcast.core.observer import SubjectObserver
from bulkcast.reader import feed_lines
from bulkcast.sinks import ConsoleSink, FileSink

err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def run_cmd(
    size: int = typer.Argument(
        None,
        min=1,
        help="Bulk size N. Defaults to BULKCAST_BULK_SIZE.",
        show_default=False,
    ),
    output_dir: Path = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for bulk log files. Defaults to BULKCAST_OUTPUT_DIR.",
    ),
    no_file: bool = typer.Option(
        False,
        "--no-file",
        help="Do not write bulk log files.",
    ),
    no_console: bool = typer.Option(
        False,
        "--no-console",
        help="Do not print bulks to stdout.",
    ),
    flush_open_block: bool = typer.Option(
        False,
        "--flush-open-block",
        help="Deliver an unterminated { block at end of input instead of dropping it.",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level. Defaults to BULKCAST_LOG_LEVEL.",
    ),
) -> None:
    """Read commands from stdin, one per line, and publish them in bulks."""
    try:
        settings = BulkcastSettings()
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        # pydantic.ValidationError and unknown logging levels are both ValueErrors.
        _exit_with_error(exc)

    policy = OpenBlockPolicy.FLUSH if flush_open_block else settings.open_block_policy
    handler = BulkHandler(open_block_policy=policy)

    # The handler holds weak references; keep the sinks alive for the run.
    sinks: list[SubjectObserver] = []
    if settings.console_output and not no_console:
        sinks.append(ConsoleSink())
    if settings.file_output and not no_file:
        sinks.append(FileSink(output_dir or settings.output_dir))
    for sink in sinks:
        sink.subscribe(handler)

    try:
        handler.set_size(size or settings.bulk_size)
        feed_lines(handler, sys.stdin)
    except BulkError as exc:
        _exit_with_error(exc)


def _exit_with_error(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
    raise typer.Exit(code=1) from exc
