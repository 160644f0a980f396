"""Mapping between expression trees and simple threshold conditions."""

from alertform.core.config import RESERVED_LABEL
from alertform.core.models import ThresholdExpression
from alertform.core.promql import (
    BinaryOperation,
    Comparator,
    Expression,
    InstantSelector,
    Labels,
    Scalar,
)

# Seed for a new rule and for the simple editor when nothing was extracted.
# It has no metric name, so it renders as "{} == 0", which a Prometheus
# server rejects until a metric name or label matcher is filled in.
DEFAULT_THRESHOLD = ThresholdExpression(
    metric_name="",
    comparator=Comparator.EQ,
    value=0,
    filters=Labels(),
)


def extract_threshold(
    expr: Expression,
    reserved_label: str = RESERVED_LABEL,
) -> ThresholdExpression | None:
    """Extract a threshold condition from ``metric{...} <comparator> <number>``.

    The selector's labels are copied with ``reserved_label`` removed; the
    expression itself is left unchanged.

    Args:
        expr: Parsed expression tree.
        reserved_label: Label name that must not appear in the filters.

    Returns:
        ThresholdExpression, or None if the expression has any other shape
        (including a binary operation whose operator is not a comparator).
    """
    match expr:
        case BinaryOperation(
            lh=InstantSelector(selector_name=name, labels=labels),
            rh=Scalar(value=value),
            operator=Comparator() as comparator,
        ):
            return ThresholdExpression(
                metric_name=name or "",
                comparator=comparator,
                value=value,
                filters=labels.without(reserved_label),
            )
        case _:
            return None


def threshold_to_expression(threshold: ThresholdExpression) -> BinaryOperation:
    """Build the expression tree a threshold condition stands for."""
    return BinaryOperation(
        lh=InstantSelector(
            selector_name=threshold.metric_name, labels=threshold.filters
        ),
        rh=Scalar(threshold.value),
        operator=threshold.comparator,
    )


def threshold_to_promql(threshold: ThresholdExpression) -> str:
    """Render a threshold condition as PromQL, e.g. ``cpu{job="a"} > 90``."""
    return threshold_to_expression(threshold).to_promql()
