"""Log entry model shared by the tokenizer and the event parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """Transmission direction of a log entry."""

    OUTBOUND = "out"  # TIC -> SB
    INBOUND = "in"  # SB -> TIC

    @property
    def arrow(self) -> str:
        return "TIC->SB" if self is Direction.OUTBOUND else "SB->TIC"


@dataclass(frozen=True)
class LogEntry:
    """One decoded capture record: a single byte sent in ``direction``."""

    direction: Direction
    value: int

    def __repr__(self) -> str:
        return f"LogEntry({self.direction.name}, 0x{self.value:02X})"

    def to_dict(self) -> dict:
        return {"direction": self.direction.value, "value": self.value}
