"""MCP server entry point for the TIC comms-log decoder.

Exposes tools, resources, and prompts via the Model Context Protocol
using the official Python MCP SDK with stdio transport.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from . import config
from .formatters import format_events, summarize_events
from .models.capture import decode_capture as _decode_capture_file
from .models.capture import export_events, load_capture
from .protocol.commands import COMMAND_EVENTS, Command, describe_command
from .protocol.tokenizer import tokenize

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "tic-commslog",
    instructions="Decode SB <-> TIC communication log captures into events",
)

# ParseError is a ValueError; OSError covers missing and unwritable paths
_EXPECTED_ERRORS = (OSError, ValueError)


def _clamp_limit(limit: int | None) -> int:
    if limit is None or limit <= 0:
        return config.MAX_RESULTS
    return min(limit, config.MAX_RESULTS)


def _error(e: Exception) -> dict[str, str]:
    logger.info("Request failed: %s", e)
    return {"error": str(e)}


# ─── DECODING TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def decode_capture(path: str, limit: int | None = None) -> dict[str, Any]:
    """Decode a TIC comms-log capture into events.

    Args:
        path: Path to the raw capture file.
        limit: Maximum number of events to return (default: server cap).
    """
    try:
        decoded = _decode_capture_file(path)
    except _EXPECTED_ERRORS as e:
        return _error(e)

    limit = _clamp_limit(limit)
    return {
        "path": str(decoded.path),
        "entry_count": len(decoded.entries),
        "event_count": len(decoded.events),
        "truncated": len(decoded.events) > limit,
        "events": [e.to_dict() for e in decoded.events[:limit]],
    }


@mcp.tool()
def tokenize_capture(path: str, limit: int | None = None) -> dict[str, Any]:
    """Split a capture into raw direction/value entries without decoding events.

    Useful when the decoded events look wrong and the underlying bytes
    need checking.

    Args:
        path: Path to the raw capture file.
        limit: Maximum number of entries to return (default: server cap).
    """
    try:
        entries = tokenize(load_capture(path))
    except _EXPECTED_ERRORS as e:
        return _error(e)

    limit = _clamp_limit(limit)
    return {
        "path": path,
        "entry_count": len(entries),
        "truncated": len(entries) > limit,
        "entries": [e.to_dict() for e in entries[:limit]],
    }


@mcp.tool()
def summarize_capture(path: str) -> str:
    """Summarize a capture: event counts followed by a numbered event listing.

    Args:
        path: Path to the raw capture file.
    """
    try:
        decoded = _decode_capture_file(path)
    except _EXPECTED_ERRORS as e:
        return f"Error: {e}"

    return (
        summarize_events(decoded.events)
        + "\n\n"
        + format_events(decoded.events, max_lines=config.SUMMARY_LINES)
    )


@mcp.tool()
def describe_command_byte(value: int) -> dict[str, Any]:
    """Look up what a TIC -> SB command byte means.

    Args:
        value: Command byte (0-255).
    """
    if not 0 <= value <= 255:
        return {"error": "Command byte must be 0-255"}

    command = describe_command(value)
    if command is None:
        return {"value": value, "known": False}
    if command is Command.UART_BEGIN:
        return {
            "value": value,
            "known": True,
            "command": command.name,
            "description": "Starts a UART transfer: a length byte follows, "
            "then that many data bytes",
        }
    return {
        "value": value,
        "known": True,
        "command": command.name,
        "event": COMMAND_EVENTS[command].to_dict(),
    }


# ─── EXPORT TOOLS ────────────────────────────────────────────────────

@mcp.tool()
def export_capture_events(path: str, output_path: str) -> dict[str, Any]:
    """Decode a capture and write its events to a JSON file.

    Args:
        path: Path to the raw capture file.
        output_path: Destination for the JSON export.
    """
    try:
        decoded = _decode_capture_file(path)
        written = export_events(decoded.events, output_path)
    except _EXPECTED_ERRORS as e:
        return _error(e)

    logger.info("Exported %d events to %s", len(decoded.events), written)
    return {
        "exported": True,
        "path": str(written),
        "event_count": len(decoded.events),
    }


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("tic://protocol/commands")
def resource_commands() -> str:
    """The TIC command byte table."""
    table = {
        f"0x{command.value:02X}": {
            "name": command.name,
            "event": COMMAND_EVENTS[command].to_dict()
            if command in COMMAND_EVENTS
            else None,
        }
        for command in Command
    }
    return json.dumps({"commands": table})


# ─── MCP PROMPTS ─────────────────────────────────────────────────────

@mcp.prompt()
def investigate_capture(path: str, question: str) -> str:
    """Guide the AI through analysing a TIC comms-log capture.

    Args:
        path: Path to the capture file.
        question: What the user wants to find out.
    """
    return f"""Analyse the TIC comms-log capture at {path}.
Question: {question}

Steps:
- Start with summarize_capture to see event counts and the event listing
- Use decode_capture for structured events (UART text, power, buttons)
- If events look wrong, use tokenize_capture to inspect the raw entries
- Look up unexpected command bytes with describe_command_byte

SB->TIC UART messages are commands from the host; TIC->SB UART messages
are the peripheral's replies."""


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=config.LOG_LEVEL)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
