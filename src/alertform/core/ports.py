"""Port interfaces for the editor's collaborators.

These protocols define the contracts that adapters must implement.
The core depends only on these interfaces, not concrete implementations.
"""

from typing import Protocol, runtime_checkable

from alertform.core.models import LogEntry
from alertform.core.promql import Expression


class ExpressionParseError(ValueError):
    """Raised by an expression parser when the source is not valid PromQL."""


@runtime_checkable
class ExpressionParserPort(Protocol):
    """Port for turning PromQL source text into an expression tree.

    Implementations wrap a real query-language parser and translate its
    output into the node types of ``alertform.core.promql``.
    """

    def parse(self, source: str) -> Expression:
        """Parse ``source`` into an expression tree.

        Raises:
            ExpressionParseError: If ``source`` is malformed.
        """
        ...


@runtime_checkable
class LogSinkPort(Protocol):
    """Port for delivering log entries produced by the editor.

    Examples: InMemoryLogSink, LoggerSink.
    """

    def write(self, entry: LogEntry) -> None:
        """Deliver a log entry."""
        ...
