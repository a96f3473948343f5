"""Format decoded entries and events as readable text.

A capture can hold tens of thousands of records. These helpers turn the
decoded output into short, numbered listings and summaries that a person
or an LLM can scan quickly.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .models.entries import Direction, LogEntry
from .models.events import (
    ButtonEvent,
    Event,
    PowerEvent,
    UartEvent,
    UnknownEvent,
)


def _truncate(lines: list[str], max_lines: int, noun: str) -> str:
    total = len(lines)
    if total <= max_lines:
        return f"{total} {noun}:\n\n" + "\n".join(lines)
    return (
        f"{total} {noun} (showing first {max_lines}):\n\n"
        + "\n".join(lines[:max_lines])
        + f"\n\n... ({total - max_lines} more lines truncated)"
    )


def describe_event(event: Event) -> str:
    """One-line description of a single event."""
    if isinstance(event, UartEvent):
        return f"UART {event.direction.arrow} {event.value!r}"
    if isinstance(event, PowerEvent):
        return f"POWER {'on' if event.value else 'off'}"
    if isinstance(event, ButtonEvent):
        action = "pressed" if event.value else "released"
        return f"BUTTON {event.which.value} {action}"
    if isinstance(event, UnknownEvent):
        return f"UNKNOWN 0x{event.value:02X}"
    return event.type.upper()


def format_entries(entries: Sequence[LogEntry], max_lines: int = 200) -> str:
    """List log entries, one per line."""
    if not entries:
        return "No entries decoded. Check that the file is a TIC comms log."
    lines = [
        f"#{i} {entry.direction.arrow} 0x{entry.value:02X}"
        for i, entry in enumerate(entries)
    ]
    return _truncate(lines, max_lines, "entries")


def format_events(events: Sequence[Event], max_lines: int = 200) -> str:
    """List decoded events, one per line."""
    if not events:
        return "No events decoded."
    lines = [f"#{i} {describe_event(event)}" for i, event in enumerate(events)]
    return _truncate(lines, max_lines, "events")


def summarize_events(events: Sequence[Event]) -> str:
    """Count events by type, with UART messages split by direction."""
    if not events:
        return "No events decoded."

    counts = Counter(event.type for event in events)
    uart_out = sum(
        1
        for e in events
        if isinstance(e, UartEvent) and e.direction is Direction.OUTBOUND
    )
    uart_in = counts["uart"] - uart_out

    lines = [f"Total events: {len(events)}"]
    for tag, count in sorted(counts.items()):
        lines.append(f"  {tag}: {count}")
    if counts["uart"]:
        lines.append(f"UART messages: {uart_in} SB->TIC, {uart_out} TIC->SB")

    unknown = sorted({e.value for e in events if isinstance(e, UnknownEvent)})
    if unknown:
        lines.append(
            "Unknown command bytes: " + ", ".join(f"0x{v:02X}" for v in unknown)
        )
    return "\n".join(lines)
