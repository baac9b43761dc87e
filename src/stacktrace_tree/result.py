"""ParseResult dataclass for parser output.

This module provides the rich result type returned by parse() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from stacktrace_tree.model.nodes import Line
from stacktrace_tree.model.sections import Stacktrace

__all__ = ["ParseResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Rich result of a parse() call.

    Attributes:
        stacktrace: The prefix-factored section tree.
        lines: One tokenized Line per input line, in input order.  Empty
            when the parser was configured with ``tokenize_lines=False``.
        line_count: Number of input lines.
        section_count: Number of sections in the tree (equals ``line_count``).
        computation_time_ms: Wall-clock duration of the parse in milliseconds.
    """

    stacktrace: Stacktrace
    lines: tuple[Line, ...]
    line_count: int
    section_count: int
    computation_time_ms: float
