"""Python logging adapter for editor log entries.

This adapter bridges LogSinkPort to the standard library logging module,
so editor warnings show up wherever the host application sends its logs.
"""

import logging

from alertform.core.models import LogEntry

# Logger.makeRecord raises KeyError for extra keys that name a LogRecord
# attribute or are "message" / "asctime".
_RESERVED_EXTRA_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class LoggerSink:
    """LogSinkPort implementation that writes entries to a logging.Logger.

    Example:
        ```python
        from alertform import ExpressionEditor, LoggerSink

        editor = ExpressionEditor(parser, log_sink=LoggerSink())
        ```
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the sink.

        Args:
            logger: Target logger. Defaults to the "alertform" logger.
        """
        self._logger = logger or logging.getLogger("alertform")

    def write(self, entry: LogEntry) -> None:
        """Log ``entry`` with its attributes passed as extra fields.

        Unknown level names are logged at INFO. Attributes whose names
        clash with standard LogRecord attributes are dropped.
        """
        level = _LEVELS.get(entry.level.upper(), logging.INFO)
        extra = {
            key: value
            for key, value in entry.attributes.items()
            if key not in _RESERVED_EXTRA_KEYS
        }
        self._logger.log(level, entry.message, extra=extra)
