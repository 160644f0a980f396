"""Shared test fixtures for all test modules."""

import pytest

from alertform.adapters.sinks.in_memory import InMemoryLogSink
from tests.fakes import FakeParser


@pytest.fixture
def parser() -> FakeParser:
    """Provide a parser that knows the sample expressions."""
    return FakeParser()


@pytest.fixture
def log_sink() -> InMemoryLogSink:
    """Provide an empty in-memory log sink."""
    return InMemoryLogSink()
