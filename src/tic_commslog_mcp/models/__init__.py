"""Data models for log entries, decoded events, and capture files."""

from .entries import Direction, LogEntry
from .events import (
    Event,
    Button,
    UnknownEvent,
    UartEvent,
    PowerEvent,
    ButtonEvent,
    AdcEvent,
    PwmEvent,
    RegulatorAdcEvent,
    event_from_dict,
)
