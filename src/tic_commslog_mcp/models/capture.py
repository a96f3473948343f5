"""Capture file loading and decoded event export.

Capture files hold the raw comma-delimited log bytes. Decoded events are
exported as a JSON document::

    {"format": "tic-events", "version": 1, "events": [{"type": ...}, ...]}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from ..protocol.parser import parse_events
from ..protocol.tokenizer import tokenize
from .entries import LogEntry
from .events import Event, event_from_dict

logger = logging.getLogger(__name__)

EXPORT_FORMAT = "tic-events"
EXPORT_VERSION = 1


@dataclass
class DecodedCapture:
    """A capture file with its entries and events."""

    path: Path
    entries: list[LogEntry] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "entry_count": len(self.entries),
            "event_count": len(self.events),
            "events": [e.to_dict() for e in self.events],
        }


def load_capture(path: str | Path) -> bytes:
    """Read the raw bytes of a capture file.

    Raises:
        FileNotFoundError: If the path does not exist.
        ValueError: If the path is a directory.
    """
    path = Path(path)
    if path.is_dir():
        raise ValueError(f"Capture path is a directory: {path}")
    data = path.read_bytes()
    logger.debug("Loaded %d bytes from %s", len(data), path)
    return data


def decode_capture(path: str | Path) -> DecodedCapture:
    """Load, tokenize, and parse a capture file.

    Raises:
        FileNotFoundError: If the path does not exist.
        ParseError: If a record is malformed.
    """
    path = Path(path)
    entries = tokenize(load_capture(path))
    events = parse_events(entries)
    logger.info(
        "Decoded %s: %d entries, %d events", path, len(entries), len(events)
    )
    return DecodedCapture(path=path, entries=entries, events=events)


def export_events(events: Iterable[Event], path: str | Path) -> Path:
    """Write events to a JSON export file.

    Returns:
        The path written to.
    """
    path = Path(path)
    doc = {
        "format": EXPORT_FORMAT,
        "version": EXPORT_VERSION,
        "events": [e.to_dict() for e in events],
    }
    path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    return path


def import_events(path: str | Path) -> list[Event]:
    """Read events back from a JSON export file.

    Raises:
        ValueError: If the file is not an event export or holds an
            unknown event type.
    """
    path = Path(path)
    doc = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(doc, dict) or doc.get("format") != EXPORT_FORMAT:
        raise ValueError(f"{path} is not a {EXPORT_FORMAT} export")
    if doc.get("version") != EXPORT_VERSION:
        raise ValueError(
            f"Unsupported export version {doc.get('version')!r} in {path}"
        )
    return [event_from_dict(item) for item in doc.get("events", [])]
