"""Record tokenizer for raw TIC comms-log captures.

The capture is a run of comma-delimited text records with no line
structure of its own. Each record looks like::

    +---------+---------+-----------+------------------+---------+
    | field 0 | field 1 | direction |      value       | trailer |
    | ignored | ignored |  'O'/...  | 4-char window    | 2 chars |
    +---------+---------+-----------+------------------+---------+

- direction: first character of field 2; ``O`` is TIC -> SB, anything
  else SB -> TIC
- value: the first four characters of field 3, parsed as an integer
  (decimal, or with a ``0x``/``0o``/``0b`` prefix)
- trailer: after the fourth comma one character is skipped and the next
  one closes the record

Bytes map one-to-one onto characters (Latin-1).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..models.entries import Direction, LogEntry

logger = logging.getLogger(__name__)

DELIMITER = ","
OUTBOUND_CODE = "O"
DIRECTION_FIELD = 2
VALUE_FIELD = 3
VALUE_WIDTH = 4
RECORD_DELIMITERS = 4
FIELD_COUNT = 5

_VALUE_PATTERN = re.compile(
    r"\s*(?:"
    r"0[xX](?P<hex>[0-9A-Fa-f]+)"
    r"|0[oO](?P<oct>[0-7]+)"
    r"|0[bB](?P<bin>[01]+)"
    r"|(?P<dec>[0-9]+)"
    r")\s*"
)
_GROUP_BASES = {"hex": 16, "oct": 8, "bin": 2, "dec": 10}


class ParseError(ValueError):
    """Raised when a capture record cannot be decoded."""


def parse_value(text: str, record: int | None = None) -> int:
    """Parse the value window of a record into a byte value.

    Args:
        text: The captured characters of field 3.
        record: Record index, used in the error message.

    Raises:
        ParseError: If the text is not a number or is outside 0-255.
    """
    where = f"record {record}: " if record is not None else ""
    match = _VALUE_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(f"{where}value {text!r} is not a number")

    group = match.lastgroup
    value = int(match.group(group), _GROUP_BASES[group])
    if not 0 <= value <= 255:
        raise ParseError(f"{where}value {value} is outside 0-255")
    return value


@dataclass
class _RecordState:
    """Accumulators for the record currently being read."""

    delimiters: int = 0
    since_delimiter: int = 0
    field: str = ""
    outbound: bool = False
    value_text: str | None = None

    @property
    def started(self) -> bool:
        return self.delimiters > 0 or self.since_delimiter > 0


class Tokenizer:
    """Incremental record tokenizer.

    Chunk boundaries passed to :meth:`feed` do not affect the result::

        tok = Tokenizer()
        entries = tok.feed(first_chunk)
        entries += tok.feed(second_chunk)
        tok.close()
    """

    def __init__(self) -> None:
        self._state = _RecordState()
        self._records = 0

    @property
    def records(self) -> int:
        """Number of records emitted so far."""
        return self._records

    @property
    def pending(self) -> bool:
        """True while a partially read record is buffered."""
        return self._state.started

    def feed(self, data: bytes) -> list[LogEntry]:
        """Consume a chunk of capture bytes.

        Returns:
            The entries completed within this chunk, in input order.

        Raises:
            ParseError: If a completed record has an unusable value field.
        """
        entries: list[LogEntry] = []
        for byte in data:
            entry = self._step(chr(byte))
            if entry is not None:
                entries.append(entry)
        return entries

    def close(self) -> None:
        """Finish the capture, dropping any partial trailing record."""
        state = self._state
        if state.started:
            logger.warning(
                "Dropping partial record %d at end of input "
                "(%d of %d fields started)",
                self._records,
                min(state.delimiters + 1, FIELD_COUNT),
                FIELD_COUNT,
            )
        self._state = _RecordState()

    def _step(self, char: str) -> LogEntry | None:
        state = self._state

        if state.delimiters == RECORD_DELIMITERS:
            if state.since_delimiter == 0:
                state.since_delimiter += 1
                return None
            return self._emit()

        if char == DELIMITER:
            state.delimiters += 1
            state.since_delimiter = 0
            state.field = ""
            return None

        state.field += char
        if state.delimiters == DIRECTION_FIELD and state.since_delimiter == 0:
            state.outbound = state.field == OUTBOUND_CODE
        if (
            state.delimiters == VALUE_FIELD
            and state.since_delimiter == VALUE_WIDTH - 1
        ):
            state.value_text = state.field
        state.since_delimiter += 1
        return None

    def _emit(self) -> LogEntry:
        state = self._state
        index = self._records
        self._state = _RecordState()
        self._records += 1

        if state.value_text is None:
            raise ParseError(
                f"record {index}: value field is shorter than "
                f"{VALUE_WIDTH} characters"
            )
        direction = Direction.OUTBOUND if state.outbound else Direction.INBOUND
        entry = LogEntry(direction, parse_value(state.value_text, index))
        logger.debug("record %d: %r", index, entry)
        return entry


def tokenize(data: bytes) -> list[LogEntry]:
    """Split a raw capture into log entries.

    A partial record at the end of ``data`` is dropped with a warning.

    Raises:
        ParseError: If a record's value field is malformed.
    """
    tokenizer = Tokenizer()
    entries = tokenizer.feed(data)
    tokenizer.close()
    logger.debug("Tokenized %d bytes into %d entries", len(data), len(entries))
    return entries
