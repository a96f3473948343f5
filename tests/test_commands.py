"""Tests for TIC command constants and dispatch."""

import pytest

from tic_commslog_mcp.models.events import (
    Button,
    ButtonEvent,
    PowerEvent,
    UnknownEvent,
)
from tic_commslog_mcp.protocol.commands import (
    COMMAND_EVENTS,
    Command,
    describe_command,
    dispatch_command,
)


def test_command_enum_values():
    """Verify key command bytes."""
    assert Command.POWER_ON == 0x01
    assert Command.POWER_OFF == 0x02
    assert Command.LEFT_PRESSED == 0x05
    assert Command.RIGHT_RELEASED == 0x0A
    assert Command.REGULATOR_ADC == 0x18
    assert Command.ADC == 0x28
    assert Command.PWM == 0x2B
    assert Command.UART_BEGIN == 0x2C


def test_every_command_but_uart_begin_has_an_event():
    """The dispatch table covers every command except UART_BEGIN."""
    assert set(COMMAND_EVENTS) == set(Command) - {Command.UART_BEGIN}


def test_describe_known_command():
    """Known bytes resolve to their Command."""
    assert describe_command(0x07) is Command.MIDDLE_PRESSED


def test_describe_unknown_command():
    """Unknown bytes resolve to None."""
    assert describe_command(0x03) is None
    assert describe_command(0xFF) is None


def test_dispatch_known_commands():
    """Known bytes dispatch to their events."""
    assert dispatch_command(0x02) == PowerEvent(False)
    assert dispatch_command(0x08) == ButtonEvent(Button.MIDDLE, False)


def test_dispatch_unknown_command():
    """Unknown bytes dispatch to UnknownEvent carrying the byte."""
    assert dispatch_command(0x99) == UnknownEvent(0x99)


def test_dispatch_uart_begin_raises():
    """UART_BEGIN is not an event and must be handled by the parser."""
    with pytest.raises(ValueError):
        dispatch_command(Command.UART_BEGIN)
