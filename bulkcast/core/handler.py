"""Bulk handler — the command accumulation state machine.

Commands are pushed in one at a time.  The handler decides per command
whether to buffer it, flush the current batch, or reject it:

- Outside a block, a batch is flushed as soon as it holds N commands.
- ``"{"`` opens a dynamic block.  Commands buffered before the block are
  flushed as their own batch, then everything up to the matching ``"}"``
  is delivered as one batch regardless of N.  Blocks nest; only the
  outermost ``"}"`` flushes.
- ``stop()`` flushes a partial static batch.  An unterminated block is
  handled according to ``OpenBlockPolicy``.

The handler is itself the ``Subject`` that sinks subscribe to.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import ValidationError as PydanticValidationError

from bulkcast.core.errors import StateError, ValidationError
from bulkcast.core.subject import Subject
from bulkcast.models.bulk import MAX_COMMAND_LENGTH, Batch, Command

logger = logging.getLogger(__name__)

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"


class HandlerState(str, Enum):
    """Coarse state of a ``BulkHandler``."""

    UNINITIALIZED = "uninitialized"
    ACCUMULATING = "accumulating"
    IN_BLOCK = "in_block"


class OpenBlockPolicy(str, Enum):
    """What ``stop()`` does with the contents of an unterminated block."""

    DISCARD = "discard"
    FLUSH = "flush"


class BulkHandler(Subject):
    """Accumulates commands into bulks and notifies subscribers.

    Parameters
    ----------
    size:
        Static bulk size N.  May be left unset and configured later with
        ``set_size``; commands are rejected until it is set.
    open_block_policy:
        How ``stop()`` treats an open dynamic block.
    """

    def __init__(
        self,
        size: int | None = None,
        *,
        open_block_policy: OpenBlockPolicy = OpenBlockPolicy.DISCARD,
    ) -> None:
        super().__init__()
        self._size: int | None = None
        self._depth = 0
        self._pending: list[Command] = []
        self._open_block_policy = OpenBlockPolicy(open_block_policy)
        if size is not None:
            self.set_size(size)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int | None:
        return self._size

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def pending(self) -> tuple[Command, ...]:
        """Commands buffered since the last flush."""
        return tuple(self._pending)

    @property
    def open_block_policy(self) -> OpenBlockPolicy:
        return self._open_block_policy

    @property
    def state(self) -> HandlerState:
        if self._size is None:
            return HandlerState.UNINITIALIZED
        if self._depth > 0:
            return HandlerState.IN_BLOCK
        return HandlerState.ACCUMULATING

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_size(self, n: int) -> None:
        """Set the static bulk size N.

        Raises
        ------
        ValidationError
            If *n* is less than 1.
        StateError
            If a static batch is partially filled.
        """
        if n < 1:
            raise ValidationError(f"Bulk size must be positive, got {n}")
        if self._depth == 0 and self._pending:
            raise StateError(
                f"Cannot change bulk size while {len(self._pending)} of "
                f"{self._size} commands are pending"
            )
        self._size = n
        logger.debug("Bulk size set to %d", n)

    def add_command(self, text: str) -> None:
        """Push one command into the handler.

        May deliver a batch to every subscriber before returning.

        Raises
        ------
        ValidationError
            If *text* is longer than ``MAX_COMMAND_LENGTH``.
        StateError
            If the bulk size has not been set.
        """
        command = _make_command(text)
        if self._size is None:
            raise StateError("Bulk size must be set before adding commands")

        if text == BLOCK_OPEN:
            self._open_block()
        elif text == BLOCK_CLOSE:
            self._close_block()
        else:
            self._append(command)

    def stop(self) -> None:
        """Finish the session.

        A partial static batch is flushed.  An unterminated block is
        discarded or flushed according to the open block policy.  The
        handler ends idle: depth 0, nothing pending.
        """
        depth, self._depth = self._depth, 0
        if depth and self._open_block_policy is OpenBlockPolicy.DISCARD:
            logger.debug(
                "Discarding %d command(s) of unterminated block (depth %d)",
                len(self._pending),
                depth,
            )
            self._pending.clear()
            return
        self._flush()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _open_block(self) -> None:
        if self._depth == 0:
            self._flush()
        self._depth += 1

    def _close_block(self) -> None:
        if self._depth == 0:
            logger.debug("Ignoring unmatched %r", BLOCK_CLOSE)
            return
        self._depth -= 1
        if self._depth == 0:
            self._flush()

    def _append(self, command: Command) -> None:
        self._pending.append(command)
        if self._depth == 0 and len(self._pending) >= self._size:
            self._flush()

    def _flush(self) -> None:
        if not self._pending:
            return
        batch = Batch(commands=tuple(self._pending))
        # Taken before delivery so observers that push commands start a new bulk.
        self._pending = []
        logger.debug("Flushing %s", batch.render())
        self.notify(batch)


def _make_command(text: str) -> Command:
    try:
        return Command(text=text)
    except PydanticValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise ValidationError(
            f"Rejected command (limit {MAX_COMMAND_LENGTH} characters): {reason}"
        ) from exc
