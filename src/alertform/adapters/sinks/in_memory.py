"""In-memory sink adapter for log entries."""

from collections.abc import Iterable

from alertform.core.models import LogEntry


class InMemoryLogSink:
    """In-memory implementation of LogSinkPort.

    Keeps log entries in a list. Suitable for testing and for UIs that
    poll for notifications to display.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def write(self, entry: LogEntry) -> None:
        """Write a log entry to the sink."""
        self._entries.append(entry)

    def read(self, since: float = 0, level: str | None = None) -> Iterable[LogEntry]:
        """Read log entries since the given timestamp.

        Returns entries with timestamp > since, ordered by timestamp ascending,
        optionally restricted to one level.
        """
        filtered = [
            e
            for e in self._entries
            if e.timestamp > since and (level is None or e.level == level)
        ]
        return sorted(filtered, key=lambda e: e.timestamp)

    def clear(self) -> None:
        self._entries.clear()
