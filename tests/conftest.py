"""
Shared test fixtures and utilities for the treeshell test suite.
"""

import pytest

from treeshell.core.context import Context
from treeshell.parsing import parse_line


@pytest.fixture
def output():
    """Lines written to the session display, in order."""
    return []


@pytest.fixture
def context(output):
    """Fresh /home/myuser session whose display appends to `output`.

    Usage:
        def test_something(context, output):
            ...
            assert output == ["..."]
    """
    return Context.create(display=output.append)


@pytest.fixture
def run(context):
    """Parse a line and execute its commands against `context`."""

    def _run(line: str) -> None:
        for command in parse_line(line):
            command.execute(context)

    return _run


@pytest.fixture
def child_names(context):
    """Names of the children of a node (current directory by default)."""

    def _child_names(node=None) -> list[str]:
        node = context.current_dir if node is None else node
        return [child.name for child in context.store.children(node)]

    return _child_names
