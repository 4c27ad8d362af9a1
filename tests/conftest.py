"""Pytest configuration and fixtures for heexfmt tests."""

from collections.abc import Mapping
from typing import Any

import pytest

from heexfmt import Environment


class FakeExpressionFormatter:
    """Expression formatter returning canned output for known snippets.

    Unknown code comes back stripped, like PassthroughFormatter. Every call
    is recorded so tests can assert on what the renderer asked for.
    """

    def __init__(self, outputs: Mapping[str, str] | None = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def format(self, code: str, options: Mapping[str, Any]) -> str:
        self.calls.append((code, dict(options)))
        return self.outputs.get(code, code.strip())


@pytest.fixture
def env():
    """Create an Environment with default settings."""
    return Environment()


@pytest.fixture
def fake_formatter():
    return FakeExpressionFormatter()


@pytest.fixture
def env_with_formatter(fake_formatter):
    """Create an Environment whose expression formatter records its calls."""
    return Environment(expression_formatter=fake_formatter)


def assert_formatted(actual: str, expected: str) -> None:
    """Assert formatter output, showing both sides line by line on failure."""
    assert actual == expected, (
        "Formatter output mismatch:\n"
        f"--- actual ---\n{actual}"
        f"--- expected ---\n{expected}"
    )
