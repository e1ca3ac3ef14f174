"""Bulkcast CLI — Typer-based command-line interface.

Provides the ``bulkcast`` command: ``run`` batches stdin into bulks and
``settings`` shows the effective configuration.

All diagnostics use Rich for formatted terminal display.
"""
