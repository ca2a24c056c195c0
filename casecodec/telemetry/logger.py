"""Structured session logging utilities.

Responsibilities:
- Emit concise, deterministic per-session log lines through `loguru`.
- Keep log payloads free of input text; only counts and identifiers are logged.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in sorted key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class SessionLogger:
    """Emit deterministic log lines for codec sessions."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route `loguru` output to `sink` (stderr by default) at `level`."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = f"[codec] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_session_start(self, kind: str, input_bytes: int) -> None:
        """Emit a session-start event."""

        self._emit("DEBUG", "start", "session", kind=kind, input_bytes=input_bytes)

    def log_session_complete(self, kind: str, units: int, markers: int) -> None:
        """Emit a session-complete event with emission counts."""

        self._emit("INFO", "complete", "session", kind=kind, units=units, markers=markers)

    def log_failure(self, stage: str, error_type: str) -> None:
        """Emit a failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
