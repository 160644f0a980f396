"""Log sink adapters implementing LogSinkPort."""

from alertform.adapters.logging import LoggerSink
from alertform.adapters.sinks.in_memory import InMemoryLogSink

__all__ = [
    "InMemoryLogSink",
    "LoggerSink",
]
