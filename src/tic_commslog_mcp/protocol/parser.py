"""Event parser: rebuilds TIC events from the log entry stream.

Two independent pieces of state observe every entry:

- the SB assembler collects SB -> TIC bytes and flushes them as one UART
  message when the next TIC -> SB entry arrives;
- the transfer state machine follows TIC -> SB entries. In ``IDLE`` an
  entry is a command byte; ``UART_BEGIN`` (0x2C) is followed by a length
  byte and that many data bytes, which form one UART message.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator

from ..models.entries import Direction, LogEntry
from ..models.events import Event, UartEvent
from .commands import Command, dispatch_command

logger = logging.getLogger(__name__)


class TransferState(Enum):
    """States of the TIC -> SB transfer machine."""

    IDLE = "idle"
    EXPECTING_LENGTH = "length"
    RECEIVING_DATA = "data"


def _decode_text(data: bytearray) -> str:
    # One character per byte
    return data.decode("latin-1")


class EventParser:
    """Incremental event parser.

    Feed entries one at a time; each call returns the events that entry
    completed (zero, one, or two when an SB message is flushed ahead of a
    command).
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._last_direction = Direction.OUTBOUND
        self._sb_buffer = bytearray()
        self._state = TransferState.IDLE
        self._remaining = 0
        self._tic_buffer = bytearray()

    @property
    def state(self) -> TransferState:
        return self._state

    def feed(self, entry: LogEntry) -> list[Event]:
        events: list[Event] = []

        # SB -> TIC UART
        if entry.direction is Direction.INBOUND:
            self._sb_buffer.append(entry.value)
        elif self._last_direction is Direction.INBOUND:
            events.append(UartEvent(Direction.INBOUND, _decode_text(self._sb_buffer)))
            self._sb_buffer.clear()
        self._last_direction = entry.direction

        if entry.direction is not Direction.OUTBOUND:
            return events

        # TIC -> SB UART transfer
        if self._state is TransferState.EXPECTING_LENGTH:
            self._remaining = entry.value
            self._state = TransferState.RECEIVING_DATA
            logger.debug("TIC transfer of %d bytes", entry.value)
            if self._remaining == 0:
                events.append(self._finish_transfer())
            return events

        if self._state is TransferState.RECEIVING_DATA:
            self._tic_buffer.append(entry.value)
            self._remaining -= 1
            if self._remaining == 0:
                events.append(self._finish_transfer())
            return events

        # TIC -> SB commands
        if entry.value == Command.UART_BEGIN:
            self._state = TransferState.EXPECTING_LENGTH
        else:
            events.append(dispatch_command(entry.value))
        return events

    def close(self) -> None:
        """Finish the stream, discarding incomplete messages."""
        if self._sb_buffer:
            logger.warning(
                "Discarding %d unflushed SB->TIC bytes at end of input",
                len(self._sb_buffer),
            )
        if self._state is not TransferState.IDLE:
            logger.warning(
                "Discarding unfinished TIC->SB transfer (%s, %d bytes missing)",
                self._state.value,
                self._remaining,
            )
        self._reset()

    def _finish_transfer(self) -> UartEvent:
        event = UartEvent(Direction.OUTBOUND, _decode_text(self._tic_buffer))
        self._tic_buffer.clear()
        self._remaining = 0
        self._state = TransferState.IDLE
        return event


def iter_events(entries: Iterable[LogEntry]) -> Iterator[Event]:
    """Lazily decode events from log entries, in order."""
    parser = EventParser()
    for entry in entries:
        yield from parser.feed(entry)
    parser.close()


def parse_events(entries: Iterable[LogEntry]) -> list[Event]:
    """Decode all events from a sequence of log entries."""
    events = list(iter_events(entries))
    logger.debug("Parsed %d events", len(events))
    return events
