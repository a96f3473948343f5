"""TIC command byte constants and the command -> event dispatch table.

Command bytes are only meaningful on TIC -> SB entries while no UART
transfer is in progress.
"""

from __future__ import annotations

from enum import IntEnum

from ..models.events import (
    AdcEvent,
    Button,
    ButtonEvent,
    Event,
    PowerEvent,
    PwmEvent,
    RegulatorAdcEvent,
    UnknownEvent,
)


class Command(IntEnum):
    """Command bytes sent by the TIC."""

    POWER_ON = 0x01
    POWER_OFF = 0x02
    LEFT_PRESSED = 0x05
    LEFT_RELEASED = 0x06
    MIDDLE_PRESSED = 0x07
    MIDDLE_RELEASED = 0x08
    RIGHT_PRESSED = 0x09
    RIGHT_RELEASED = 0x0A
    REGULATOR_ADC = 0x18
    ADC = 0x28
    PWM = 0x2B
    UART_BEGIN = 0x2C  # followed by a length byte and that many data bytes


# Events are immutable, so one instance per command is shared
COMMAND_EVENTS: dict[Command, Event] = {
    Command.POWER_ON: PowerEvent(True),
    Command.POWER_OFF: PowerEvent(False),
    Command.LEFT_PRESSED: ButtonEvent(Button.LEFT, True),
    Command.LEFT_RELEASED: ButtonEvent(Button.LEFT, False),
    Command.MIDDLE_PRESSED: ButtonEvent(Button.MIDDLE, True),
    Command.MIDDLE_RELEASED: ButtonEvent(Button.MIDDLE, False),
    Command.RIGHT_PRESSED: ButtonEvent(Button.RIGHT, True),
    Command.RIGHT_RELEASED: ButtonEvent(Button.RIGHT, False),
    Command.REGULATOR_ADC: RegulatorAdcEvent(),
    Command.ADC: AdcEvent(),
    Command.PWM: PwmEvent(),
}


def describe_command(value: int) -> Command | None:
    """Return the known command for a byte value, or None."""
    try:
        return Command(value)
    except ValueError:
        return None


def dispatch_command(value: int) -> Event:
    """Map an idle-state command byte to its event.

    Raises:
        ValueError: For ``UART_BEGIN``, which starts a transfer instead of
            producing an event.
    """
    command = describe_command(value)
    if command is None:
        return UnknownEvent(value)
    if command is Command.UART_BEGIN:
        raise ValueError("UART_BEGIN does not map to an event")
    return COMMAND_EVENTS[command]
