"""pytest plugin for stacktrace-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from stacktrace_tree import Section, Stacktrace, parse_stacktrace
from stacktrace_tree.render import render_text

# (common, remainder, children); children use the same shape.
Shape = tuple[str, str, list[Any]]


def stacktrace_shape(stacktrace: Stacktrace) -> list[Shape]:
    """Convert a Stacktrace into nested ``(common, remainder, children)`` tuples.

    Built with an explicit stack so arbitrarily deep trees convert.
    """
    shape: list[Shape] = []
    stack: list[tuple[Section, list[Shape]]] = [
        (section, shape) for section in reversed(stacktrace.sections)
    ]
    while stack:
        section, siblings = stack.pop()
        children: list[Shape] = []
        siblings.append(
            (section.slice_common_with_previous_frames, section.slice_remainder, children)
        )
        stack.extend((child, children) for child in reversed(section.child_sections))
    return shape


@pytest.fixture(scope="session")
def assert_stacktrace_shape() -> Any:
    """Fixture that returns a callable section-tree shape asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to parse_stacktrace() which builds a fresh tree per call).

    Usage in tests::

        def test_nesting(assert_stacktrace_shape):
            assert_stacktrace_shape(
                "a::b::C.one\\na::b::C.two\\n",
                [("", "a::b::C.one", [("a::b::C", ".two", [])])],
            )

    Returns:
        A callable ``_assert(actual, expected) -> None`` where ``actual`` is
        raw text or a Stacktrace and ``expected`` is a list of
        ``(common, remainder, children)`` tuples.
    """

    def _assert(actual: str | Stacktrace, expected: list[Shape]) -> None:
        """Assert that a parsed stack trace has the expected section shape.

        Raises:
            AssertionError: When the shapes differ, with a message including
                both shapes and a text outline of the actual tree.
        """
        stacktrace = parse_stacktrace(actual) if isinstance(actual, str) else actual
        actual_shape = stacktrace_shape(stacktrace)
        if actual_shape != _normalize(expected):
            raise AssertionError(
                "Stack trace section shapes differ:\n"
                f"  actual:   {actual_shape}\n"
                f"  expected: {expected}\n"
                f"  outline:\n{render_text(stacktrace, indent='    ')}"
            )

    return _assert


def _normalize(expected: list[Any]) -> list[Shape]:
    """Copy ``expected`` into the list-of-lists shape, accepting tuple children."""
    normalized: list[Shape] = []
    stack: list[tuple[Any, list[Shape]]] = [
        (node, normalized) for node in reversed(expected)
    ]
    while stack:
        (common, remainder, children), siblings = stack.pop()
        copied: list[Shape] = []
        siblings.append((common, remainder, copied))
        stack.extend((child, copied) for child in reversed(list(children)))
    return normalized
