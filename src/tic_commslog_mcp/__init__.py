"""Decoder for captured SB <-> TIC communication logs, served over MCP."""

__version__ = "0.1.0"
