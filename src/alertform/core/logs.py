"""Builders for the structured LogEntry records the editor emits."""

import time

from alertform.core.models import LogEntry

Attribute = str | int | float | bool


def log(level: str, message: str, **attributes: Attribute) -> LogEntry:
    """Stamp ``message`` with the current time at ``level``.

    Keyword arguments become the entry's attributes, e.g.
    ``log("WARN", "parse failed", source="cpu >")``.
    """
    return LogEntry(time.time(), level, message, attributes)


def warn(message: str, **attributes: Attribute) -> LogEntry:
    """Shorthand for ``log("WARN", ...)``; the editor's parse warnings use it."""
    return log("WARN", message, **attributes)
