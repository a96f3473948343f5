"""Decoded TIC events.

Every event is a frozen dataclass with a ``type`` tag and a JSON-ready
``to_dict()``. ``Event`` is the union of all variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .entries import Direction


class Button(str, Enum):
    """Front-panel buttons reported by the TIC."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class UnknownEvent:
    """Outbound command byte with no known meaning."""

    type: ClassVar[str] = "unknown"

    value: int

    def to_dict(self) -> dict:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class UartEvent:
    """A complete UART message sent in ``direction``."""

    type: ClassVar[str] = "uart"

    direction: Direction
    value: str

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "direction": self.direction.value,
            "value": self.value,
        }


@dataclass(frozen=True)
class PowerEvent:
    type: ClassVar[str] = "power"

    value: bool

    def to_dict(self) -> dict:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class ButtonEvent:
    """Button press (``value=True``) or release."""

    type: ClassVar[str] = "button"

    which: Button
    value: bool

    def to_dict(self) -> dict:
        return {"type": self.type, "which": self.which.value, "value": self.value}


@dataclass(frozen=True)
class AdcEvent:
    """An ADC reading was taken."""

    type: ClassVar[str] = "adc"

    def to_dict(self) -> dict:
        return {"type": self.type}


@dataclass(frozen=True)
class PwmEvent:
    """A PWM trigger occurred."""

    type: ClassVar[str] = "pwm"

    def to_dict(self) -> dict:
        return {"type": self.type}


@dataclass(frozen=True)
class RegulatorAdcEvent:
    """A regulator ADC reading was taken."""

    type: ClassVar[str] = "regulator-adc"

    def to_dict(self) -> dict:
        return {"type": self.type}


Event = Union[
    UnknownEvent,
    UartEvent,
    PowerEvent,
    ButtonEvent,
    AdcEvent,
    PwmEvent,
    RegulatorAdcEvent,
]

EVENT_CLASSES: dict[str, type] = {
    cls.type: cls
    for cls in (
        UnknownEvent,
        UartEvent,
        PowerEvent,
        ButtonEvent,
        AdcEvent,
        PwmEvent,
        RegulatorAdcEvent,
    )
}


def event_from_dict(data: dict) -> Event:
    """Rebuild an event from its ``to_dict()`` form.

    Raises:
        ValueError: If the type tag or a field value is unknown.
    """
    tag = data.get("type")
    cls = EVENT_CLASSES.get(tag)
    if cls is None:
        raise ValueError(f"Unknown event type {tag!r}")

    if cls is UnknownEvent:
        return UnknownEvent(value=int(data["value"]))
    if cls is UartEvent:
        return UartEvent(
            direction=Direction(data["direction"]), value=str(data["value"])
        )
    if cls is PowerEvent:
        return PowerEvent(value=bool(data["value"]))
    if cls is ButtonEvent:
        return ButtonEvent(which=Button(data["which"]), value=bool(data["value"]))
    return cls()
