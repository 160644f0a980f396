"""alertform - conversions behind a Prometheus alert rule editor.

Parses rule durations into editable fields, extracts simple threshold
conditions from PromQL expression trees, and tracks which expression
editor a rule should be shown in.
"""

from alertform.adapters.sinks import InMemoryLogSink, LoggerSink
from alertform.core.config import EditorConfig
from alertform.core.duration import (
    format_duration,
    most_significant_time,
    parse_time_string,
)
from alertform.core.editor import EditorMode, ExpressionEditor, ParseState
from alertform.core.models import (
    Duration,
    LogEntry,
    MostSignificantTime,
    ThresholdExpression,
    TimeUnit,
)
from alertform.core.ports import (
    ExpressionParseError,
    ExpressionParserPort,
    LogSinkPort,
)
from alertform.core.rule_form import (
    AlertConfig,
    RuleBaseFields,
    RuleForm,
    Severity,
    apply_base_fields,
    from_alert_config,
    to_alert_config,
    to_base_fields,
)
from alertform.core.threshold import (
    DEFAULT_THRESHOLD,
    extract_threshold,
    threshold_to_promql,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "AlertConfig",
    "Duration",
    "EditorConfig",
    "EditorMode",
    "ExpressionEditor",
    "ExpressionParseError",
    "ExpressionParserPort",
    "InMemoryLogSink",
    "LogEntry",
    "LogSinkPort",
    "LoggerSink",
    "MostSignificantTime",
    "ParseState",
    "RuleBaseFields",
    "RuleForm",
    "Severity",
    "ThresholdExpression",
    "TimeUnit",
    "apply_base_fields",
    "extract_threshold",
    "format_duration",
    "from_alert_config",
    "most_significant_time",
    "parse_time_string",
    "threshold_to_promql",
    "to_alert_config",
    "to_base_fields",
]
