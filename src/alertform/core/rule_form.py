"""Conversion between Prometheus alert rule configs and the rule form.

The form is a flat, easier to edit view of an AlertConfig. A rule is
converted to a RuleForm when editing starts and back to an AlertConfig
whenever the form changes.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from alertform.core.duration import (
    format_duration,
    most_significant_time,
    parse_time_string,
)
from alertform.core.models import TimeUnit


class Severity(str, Enum):
    """Severity levels an alert rule can be labelled with."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"


DEFAULT_SEVERITY = Severity.WARNING


@dataclass(frozen=True)
class AlertConfig:
    """A Prometheus alerting rule.

    Attributes:
        alert: Rule name.
        expr: PromQL expression.
        for_: How long the expression must hold before firing, e.g. "5m".
            Stored under the ``for`` key in rule files.
        labels: Labels attached to fired alerts.
        annotations: Informational annotations such as ``description``.
    """

    alert: str
    expr: str
    for_: str | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AlertConfig":
        """Build from a rule as it appears in a rule file or API payload."""
        return cls(
            alert=data.get("alert") or "",
            expr=data.get("expr") or "",
            for_=data.get("for"),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"alert": self.alert, "expr": self.expr}
        if self.for_ is not None:
            data["for"] = self.for_
        data["labels"] = dict(self.labels)
        data["annotations"] = dict(self.annotations)
        return data


@dataclass(frozen=True)
class RuleForm:
    """Editable state of the alert rule form."""

    rule_name: str = ""
    expression: str = ""
    severity: str = DEFAULT_SEVERITY.value
    description: str = ""
    time_number: int = 0
    time_unit: TimeUnit = TimeUnit.SECONDS
    labels: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RuleBaseFields:
    """Fields shared by every rule editor, whatever the rule type."""

    name: str = ""
    description: str = ""
    labels: dict[str, str] = field(default_factory=dict)


def from_alert_config(config: AlertConfig | None) -> RuleForm:
    """Build the form state for editing ``config``.

    Args:
        config: Rule being edited, or None for a new rule.

    Returns:
        RuleForm. The ``for`` duration keeps only its most significant
        unit, so ``"1h30m"`` is edited as 1 hour.
    """
    if config is None:
        return RuleForm()
    time = most_significant_time(parse_time_string(config.for_ or ""))
    return RuleForm(
        rule_name=config.alert or "",
        expression=config.expr or "",
        severity=config.labels.get("severity") or "",
        description=config.annotations.get("description") or "",
        time_number=time.magnitude,
        time_unit=time.unit,
        labels=dict(config.labels),
    )


def to_alert_config(form: RuleForm) -> AlertConfig:
    """Build the AlertConfig a form describes.

    The form's severity is written into the ``severity`` label.
    """
    return AlertConfig(
        alert=form.rule_name,
        expr=form.expression,
        for_=format_duration(form.time_number, form.time_unit),
        labels={**form.labels, "severity": form.severity},
        annotations={"description": form.description},
    )


def to_base_fields(
    name: str | None,
    description: str | None,
    config: AlertConfig | None,
) -> RuleBaseFields:
    """Map a rule to the generic fields shared by all rule editors."""
    return RuleBaseFields(
        name=name or "",
        description=description or "",
        labels=dict(config.labels) if config is not None else {},
    )


def apply_base_fields(form: RuleForm, fields: RuleBaseFields) -> RuleForm:
    """Return ``form`` updated with edits made to the shared fields."""
    return replace(
        form,
        rule_name=fields.name,
        description=fields.description,
        labels=dict(fields.labels),
    )
