"""Runtime settings, overridable through environment variables."""

from __future__ import annotations

import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


LOG_LEVEL = os.environ.get("TIC_COMMSLOG_LOG_LEVEL", "INFO").upper()

# Cap on list sizes returned by the server tools
MAX_RESULTS = _env_int("TIC_COMMSLOG_MAX_RESULTS", 500)

# Cap on lines in formatted text output
SUMMARY_LINES = _env_int("TIC_COMMSLOG_SUMMARY_LINES", 200)
