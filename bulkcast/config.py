"""Runtime configuration — env-driven.

Centralized settings using pydantic-settings.  Reads from a ``.env`` file
and ``BULKCAST_*`` environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bulkcast.core.handler import OpenBlockPolicy


class BulkcastSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BULKCAST_BULK_SIZE=5
        export BULKCAST_OUTPUT_DIR=/var/log/bulks
        export BULKCAST_OPEN_BLOCK_POLICY=flush
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BULKCAST_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Batching
    bulk_size: int = Field(default=3, ge=1)
    open_block_policy: OpenBlockPolicy = OpenBlockPolicy.DISCARD

    # Sinks
    console_output: bool = True
    file_output: bool = True
    output_dir: Path = Path(".")

    # Observability
    log_level: str = "WARNING"

