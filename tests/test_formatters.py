"""Tests for text formatting of entries and events."""

from tic_commslog_mcp.formatters import (
    describe_event,
    format_entries,
    format_events,
    summarize_events,
)
from tic_commslog_mcp.models.entries import Direction, LogEntry
from tic_commslog_mcp.models.events import (
    Button,
    ButtonEvent,
    PowerEvent,
    PwmEvent,
    RegulatorAdcEvent,
    UartEvent,
    UnknownEvent,
)


def test_describe_events():
    """Each event kind has a one-line description."""
    assert describe_event(UartEvent(Direction.INBOUND, "Hi")) == "UART SB->TIC 'Hi'"
    assert describe_event(UartEvent(Direction.OUTBOUND, "OK")) == "UART TIC->SB 'OK'"
    assert describe_event(PowerEvent(True)) == "POWER on"
    assert describe_event(PowerEvent(False)) == "POWER off"
    assert describe_event(ButtonEvent(Button.LEFT, True)) == "BUTTON left pressed"
    assert describe_event(ButtonEvent(Button.RIGHT, False)) == "BUTTON right released"
    assert describe_event(UnknownEvent(0x42)) == "UNKNOWN 0x42"
    assert describe_event(RegulatorAdcEvent()) == "REGULATOR-ADC"


def test_format_entries():
    """Entries are numbered with direction and hex value."""
    text = format_entries(
        [LogEntry(Direction.OUTBOUND, 0x2C), LogEntry(Direction.INBOUND, 7)]
    )
    assert text.startswith("2 entries:")
    assert "#0 TIC->SB 0x2C" in text
    assert "#1 SB->TIC 0x07" in text


def test_format_entries_empty():
    """An empty entry list gets a hint instead of a listing."""
    assert format_entries([]).startswith("No entries decoded")


def test_format_events_truncates():
    """Long listings are cut at max_lines with a trailing count."""
    events = [PwmEvent()] * 10
    text = format_events(events, max_lines=3)
    assert "10 events (showing first 3)" in text
    assert "#2 PWM" in text
    assert "#3 PWM" not in text
    assert "7 more lines truncated" in text


def test_format_events_empty():
    """No events gives a fixed message."""
    assert format_events([]) == "No events decoded."


def test_summarize_events():
    """The summary counts event types and UART directions."""
    events = [
        UartEvent(Direction.INBOUND, "A"),
        UartEvent(Direction.INBOUND, "B"),
        UartEvent(Direction.OUTBOUND, "C"),
        PowerEvent(True),
        UnknownEvent(0x40),
        UnknownEvent(0x03),
        UnknownEvent(0x40),
    ]
    text = summarize_events(events)
    assert "Total events: 7" in text
    assert "  uart: 3" in text
    assert "  power: 1" in text
    assert "UART messages: 2 SB->TIC, 1 TIC->SB" in text
    assert "Unknown command bytes: 0x03, 0x40" in text


def test_summarize_without_uart():
    """The UART line is left out when there are no UART messages."""
    text = summarize_events([PowerEvent(False)])
    assert "UART messages" not in text
