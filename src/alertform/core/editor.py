"""Editing session for an alert rule's expression.

An expression is shown either in the simple threshold editor or as raw
PromQL in the advanced editor. Which one is used is decided once, when the
expression is loaded:

    UNPARSED --load("")-------------> UNPARSED              (simple, default)
    UNPARSED --load(src), error-----> PARSE_FAILED          (advanced, warns)
    UNPARSED --load(src), no match--> PARSED_NOT_THRESHOLD  (advanced)
    UNPARSED --load(src), match-----> PARSED_THRESHOLD      (simple)

Later edits work on the threshold record or on the raw text and never
parse the expression again.
"""

from dataclasses import replace
from enum import Enum

from alertform.core.config import EditorConfig
from alertform.core.logs import warn
from alertform.core.models import LogEntry, ThresholdExpression
from alertform.core.ports import (
    ExpressionParseError,
    ExpressionParserPort,
    LogSinkPort,
)
from alertform.core.threshold import (
    DEFAULT_THRESHOLD,
    extract_threshold,
    threshold_to_promql,
)


class ParseState(Enum):
    """Outcome of loading an expression."""

    UNPARSED = "unparsed"
    PARSE_FAILED = "parse_failed"
    PARSED_NOT_THRESHOLD = "parsed_not_threshold"
    PARSED_THRESHOLD = "parsed_threshold"


class EditorMode(Enum):
    """Which expression editor is shown."""

    SIMPLE = "simple"
    ADVANCED = "advanced"


class ExpressionEditor:
    """State of one expression editing session.

    Example:
        ```python
        editor = ExpressionEditor(parser)
        editor.load(rule.expr)
        if (warning := editor.take_warning()) is not None:
            notify(warning.message)
        if editor.mode is EditorMode.SIMPLE:
            show_threshold_form(editor.threshold)
        ```
    """

    def __init__(
        self,
        parser: ExpressionParserPort,
        config: EditorConfig | None = None,
        log_sink: LogSinkPort | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            parser: Parser used to load expressions.
            config: Editor options (default: EditorConfig()).
            log_sink: Optional destination for warnings. Warnings are also
                queued for take_warning() regardless of this setting.
        """
        if not isinstance(parser, ExpressionParserPort):
            raise TypeError("parser must implement ExpressionParserPort")
        self._parser = parser
        self._config = config or EditorConfig()
        self._log_sink = log_sink
        self._state = ParseState.UNPARSED
        self._mode = (
            EditorMode.SIMPLE
            if self._config.threshold_editor_enabled
            else EditorMode.ADVANCED
        )
        self._threshold: ThresholdExpression | None = DEFAULT_THRESHOLD
        self._expression = ""
        self._source: str | None = None
        self._pending_warning: LogEntry | None = None

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def state(self) -> ParseState:
        return self._state

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def advanced(self) -> bool:
        return self._mode is EditorMode.ADVANCED

    @property
    def threshold(self) -> ThresholdExpression | None:
        """Threshold shown in the simple editor, or None if there is none."""
        return self._threshold

    @property
    def expression(self) -> str:
        """Current expression text."""
        return self._expression

    def load(self, source: str | None) -> ParseState:
        """Load an expression value, deciding the editor mode.

        Loading the value that is already loaded does nothing, so the
        expression is parsed and any warning raised at most once per value.

        Args:
            source: PromQL source, or None/"" for a new rule.

        Returns:
            The resulting ParseState.
        """
        source = source or ""
        if source == self._source:
            return self._state
        self._source = source
        self._expression = source

        if not source:
            self._state = ParseState.UNPARSED
            self._mode = EditorMode.SIMPLE
            self._threshold = DEFAULT_THRESHOLD
            return self._state

        try:
            parsed = self._parser.parse(source)
        except ExpressionParseError as e:
            self._state = ParseState.PARSE_FAILED
            self._mode = EditorMode.ADVANCED
            self._threshold = None
            self._emit_warning(
                warn(self._config.parse_error_message, source=source, error=str(e))
            )
            return self._state

        threshold = extract_threshold(parsed, self._config.reserved_label)
        if threshold is None:
            self._state = ParseState.PARSED_NOT_THRESHOLD
            self._mode = EditorMode.ADVANCED
        else:
            self._state = ParseState.PARSED_THRESHOLD
            self._mode = EditorMode.SIMPLE
        self._threshold = threshold
        return self._state

    def set_threshold(self, threshold: ThresholdExpression) -> str:
        """Apply an edit from the simple editor.

        The configured reserved label is dropped from the filters before the
        threshold is stored and rendered.

        Args:
            threshold: The edited threshold condition.

        Returns:
            The expression text rendered from ``threshold``.
        """
        threshold = replace(
            threshold,
            filters=threshold.filters.without(self._config.reserved_label),
        )
        self._threshold = threshold
        self._expression = threshold_to_promql(threshold)
        return self._expression

    def set_expression(self, expression: str) -> None:
        """Apply an edit from the advanced editor. The text is not parsed."""
        self._expression = expression

    def set_mode(self, mode: EditorMode) -> None:
        """Switch editors.

        Switching to the simple editor without a threshold seeds it with
        DEFAULT_THRESHOLD.
        """
        if mode is EditorMode.SIMPLE and self._threshold is None:
            self._threshold = DEFAULT_THRESHOLD
        self._mode = mode

    def toggle_mode(self) -> EditorMode:
        """Switch to the other editor and return the new mode."""
        if self._mode is EditorMode.ADVANCED:
            self.set_mode(EditorMode.SIMPLE)
        else:
            self.set_mode(EditorMode.ADVANCED)
        return self._mode

    def take_warning(self) -> LogEntry | None:
        """Return the pending warning, clearing it. None if there is none."""
        warning, self._pending_warning = self._pending_warning, None
        return warning

    def _emit_warning(self, entry: LogEntry) -> None:
        self._pending_warning = entry
        if self._log_sink is not None:
            self._log_sink.write(entry)
