"""Command and Batch models — frozen Pydantic v2 values.

A ``Command`` is a single line of input text capped at
``MAX_COMMAND_LENGTH`` characters.  A ``Batch`` ("bulk") is the ordered
group of commands delivered to every sink in one notification.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_COMMAND_LENGTH = 50

BULK_PREFIX = "bulk: "
BULK_SEPARATOR = ", "


class Command(BaseModel):
    """A single command accepted by the handler.

    Any text is valid, including the empty string, as long as it does not
    exceed ``MAX_COMMAND_LENGTH`` characters.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(max_length=MAX_COMMAND_LENGTH)

    def __str__(self) -> str:
        return self.text


class Batch(BaseModel):
    """An ordered, immutable group of commands flushed together."""

    model_config = ConfigDict(frozen=True)

    commands: tuple[Command, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    @property
    def texts(self) -> list[str]:
        """Return the raw command strings in order."""
        return [command.text for command in self.commands]

    def render(self) -> str:
        """Return the canonical ``"bulk: c1, c2, ..."`` representation."""
        return BULK_PREFIX + BULK_SEPARATOR.join(self.texts)
