"""BDD step definitions for the expression editor lifecycle."""

from dataclasses import dataclass, field, replace

import pytest
from pytest_bdd import given, parsers, then, when

from alertform.adapters.sinks.in_memory import InMemoryLogSink
from alertform.core.config import EditorConfig
from alertform.core.editor import EditorMode, ExpressionEditor, ParseState
from alertform.core.models import LogEntry
from alertform.core.threshold import DEFAULT_THRESHOLD
from tests.fakes import FakeParser


@dataclass
class EditorScenarioContext:
    """Shared state between steps in an editor scenario."""

    parser: FakeParser = field(default_factory=FakeParser)
    log_sink: InMemoryLogSink = field(default_factory=InMemoryLogSink)
    editor: ExpressionEditor | None = None
    warnings: list[LogEntry] = field(default_factory=list)

    def require_editor(self) -> ExpressionEditor:
        assert self.editor is not None, "no editor created in this scenario"
        return self.editor


@pytest.fixture
def ctx() -> EditorScenarioContext:
    """Fresh scenario context for each test."""
    return EditorScenarioContext()


def _load(ctx: EditorScenarioContext, source: str) -> None:
    editor = ctx.require_editor()
    editor.load(source)
    warning = editor.take_warning()
    ctx.warnings = [warning] if warning is not None else []


# === Given ===
@given("a parser that knows the sample expressions")
def step_parser(ctx: EditorScenarioContext) -> None:
    ctx.parser = FakeParser()


@given("an expression editor")
def step_editor(ctx: EditorScenarioContext) -> None:
    ctx.editor = ExpressionEditor(ctx.parser, log_sink=ctx.log_sink)


@given("an expression editor with the threshold editor disabled")
def step_editor_disabled(ctx: EditorScenarioContext) -> None:
    ctx.editor = ExpressionEditor(
        ctx.parser,
        EditorConfig(threshold_editor_enabled=False),
        log_sink=ctx.log_sink,
    )


# === When ===
@when("an empty expression is loaded")
def step_load_empty(ctx: EditorScenarioContext) -> None:
    _load(ctx, "")


@when(parsers.parse('the expression "{source}" is loaded'))
def step_load(ctx: EditorScenarioContext, source: str) -> None:
    _load(ctx, source)


@when(parsers.parse("the threshold value is changed to {value:d}"))
def step_change_value(ctx: EditorScenarioContext, value: int) -> None:
    editor = ctx.require_editor()
    assert editor.threshold is not None
    editor.set_threshold(replace(editor.threshold, value=value))


# === Then ===
@then("the parser is not called")
def step_parser_not_called(ctx: EditorScenarioContext) -> None:
    assert ctx.parser.calls == []


@then(parsers.parse("the parser is called {count:d} time"))
def step_parser_called(ctx: EditorScenarioContext, count: int) -> None:
    assert len(ctx.parser.calls) == count


@then(parsers.parse('the parse state is "{state}"'))
def step_parse_state(ctx: EditorScenarioContext, state: str) -> None:
    assert ctx.require_editor().state is ParseState(state)


@then("the editor is in simple mode")
def step_simple_mode(ctx: EditorScenarioContext) -> None:
    assert ctx.require_editor().mode is EditorMode.SIMPLE


@then("the editor is in advanced mode")
def step_advanced_mode(ctx: EditorScenarioContext) -> None:
    assert ctx.require_editor().mode is EditorMode.ADVANCED


@then("the threshold is the zero-value default")
def step_default_threshold(ctx: EditorScenarioContext) -> None:
    assert ctx.require_editor().threshold == DEFAULT_THRESHOLD


@then("the threshold is:")
def step_threshold_table(
    ctx: EditorScenarioContext, datatable: list[list[str]]
) -> None:
    expected = dict(zip(datatable[0], datatable[1], strict=True))
    threshold = ctx.require_editor().threshold
    assert threshold is not None
    assert threshold.metric_name == expected["metric_name"]
    assert threshold.comparator.value == expected["comparator"]
    assert threshold.value == float(expected["value"])


@then(parsers.parse('the threshold filters are "{names}"'))
def step_threshold_filters(ctx: EditorScenarioContext, names: str) -> None:
    threshold = ctx.require_editor().threshold
    assert threshold is not None
    assert threshold.filters.names() == names.split(",")


@then("no warning is raised")
def step_no_warning(ctx: EditorScenarioContext) -> None:
    assert ctx.warnings == []


@then(parsers.parse("exactly {count:d} warning is raised"))
def step_warning_count(ctx: EditorScenarioContext, count: int) -> None:
    assert len(ctx.warnings) == count
    assert len(list(ctx.log_sink.read(level="WARN"))) == count


@then(parsers.parse('the expression is "{expression}"'))
def step_expression(ctx: EditorScenarioContext, expression: str) -> None:
    assert ctx.require_editor().expression == expression
