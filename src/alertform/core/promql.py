"""Expression tree for the subset of PromQL alert rules are written in.

The node types here are what an ``ExpressionParserPort`` produces. The set is
closed: code that inspects an expression matches on these classes and
nothing else. Every node renders back to PromQL text via ``to_promql()``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum


class Comparator(str, Enum):
    """Relational binary operators."""

    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="


class ArithmeticOperator(str, Enum):
    """Arithmetic binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


class SetOperator(str, Enum):
    """Logical/set binary operators between instant vectors."""

    AND = "and"
    OR = "or"
    UNLESS = "unless"


BinaryOperator = Comparator | ArithmeticOperator | SetOperator


class MatchOperator(str, Enum):
    """Label matching operators inside a selector."""

    EQUAL = "="
    NOT_EQUAL = "!="
    REGEX = "=~"
    NOT_REGEX = "!~"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def format_number(value: float) -> str:
    """Render a number the way it is written in a PromQL expression.

    Integral values drop the trailing ``.0`` so ``90.0`` renders as ``90``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class Label:
    """A single label matcher such as ``job="node"``."""

    name: str
    value: str
    operator: MatchOperator = MatchOperator.EQUAL

    def to_promql(self) -> str:
        return f"{self.name}{self.operator.value}{_quote(self.value)}"


@dataclass(frozen=True)
class Labels:
    """Ordered, immutable collection of label matchers with unique names.

    Methods that change the collection return a new ``Labels`` and leave
    the original untouched, so a selector's labels can be handed out
    without risk of aliasing.
    """

    items: tuple[Label, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for label in self.items:
            if label.name in seen:
                raise ValueError(f"duplicate label name: {label.name!r}")
            seen.add(label.name)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, str]) -> Labels:
        """Build equality matchers from a name -> value mapping."""
        return cls(tuple(Label(name, value) for name, value in mapping.items()))

    @classmethod
    def of(cls, labels: Iterable[Label]) -> Labels:
        return cls(tuple(labels))

    def __iter__(self) -> Iterator[Label]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, name: object) -> bool:
        return any(label.name == name for label in self.items)

    def get(self, name: str) -> Label | None:
        """Return the matcher for ``name``, or None if absent."""
        for label in self.items:
            if label.name == name:
                return label
        return None

    def names(self) -> list[str]:
        return [label.name for label in self.items]

    def without(self, name: str) -> Labels:
        """Return a copy with the matcher named ``name`` removed."""
        return Labels(tuple(label for label in self.items if label.name != name))

    def with_label(self, label: Label) -> Labels:
        """Return a copy with ``label`` added, replacing one of the same name.

        A replaced matcher keeps its position; a new one is appended.
        """
        if label.name not in self:
            return Labels((*self.items, label))
        return Labels(
            tuple(label if item.name == label.name else item for item in self.items)
        )

    def to_dict(self) -> dict[str, str]:
        """Map label names to values, dropping the match operators."""
        return {label.name: label.value for label in self.items}

    def to_promql(self) -> str:
        """Render as ``{a="1",b!="2"}``; an empty collection renders as ``""``."""
        if not self.items:
            return ""
        return "{" + ",".join(label.to_promql() for label in self.items) + "}"


@dataclass(frozen=True)
class InstantSelector:
    """Selects the latest sample of each series matching a name and labels."""

    selector_name: str | None = None
    labels: Labels = field(default_factory=Labels)

    def to_promql(self) -> str:
        rendered = f"{self.selector_name or ''}{self.labels.to_promql()}"
        return rendered or "{}"


@dataclass(frozen=True)
class RangeSelector:
    """An instant selector over a time window, e.g. ``up[5m]``."""

    selector: InstantSelector
    range: str

    def to_promql(self) -> str:
        return f"{self.selector.to_promql()}[{self.range}]"


@dataclass(frozen=True)
class Scalar:
    """A bare numeric literal."""

    value: float

    def to_promql(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class BinaryOperation:
    """``lh <operator> rh``."""

    lh: Expression
    rh: Expression
    operator: BinaryOperator

    def to_promql(self) -> str:
        return f"{_operand(self.lh)} {self.operator.value} {_operand(self.rh)}"


@dataclass(frozen=True)
class Function:
    """A function call such as ``rate(x[5m])``."""

    name: str
    arguments: tuple[Expression, ...] = ()

    def to_promql(self) -> str:
        args = ", ".join(arg.to_promql() for arg in self.arguments)
        return f"{self.name}({args})"


@dataclass(frozen=True)
class AggregationClause:
    """The ``by (...)`` or ``without (...)`` part of an aggregation."""

    kind: str
    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in ("by", "without"):
            raise ValueError(
                f"aggregation clause must be 'by' or 'without', got {self.kind!r}"
            )

    def to_promql(self) -> str:
        return f"{self.kind} ({', '.join(self.labels)})"


@dataclass(frozen=True)
class AggregationOperation:
    """An aggregation such as ``sum by (job) (x)`` or ``topk(3, x)``."""

    name: str
    parameters: tuple[Expression, ...] = ()
    clause: AggregationClause | None = None

    def to_promql(self) -> str:
        params = ", ".join(param.to_promql() for param in self.parameters)
        if self.clause is None:
            return f"{self.name}({params})"
        return f"{self.name} {self.clause.to_promql()} ({params})"


Expression = (
    InstantSelector
    | RangeSelector
    | Scalar
    | BinaryOperation
    | Function
    | AggregationOperation
)


def _operand(expr: Expression) -> str:
    # Nested binary operations are always parenthesised.
    if isinstance(expr, BinaryOperation):
        return f"({expr.to_promql()})"
    return expr.to_promql()
