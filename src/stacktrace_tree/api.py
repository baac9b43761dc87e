"""Public API functions for stacktrace-tree.

This module provides the user-facing functions: parse, parse_stacktrace,
parse_line and section_hash.  Each parse call creates a fresh
StacktraceParser to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from stacktrace_tree.config import ParseConfig
from stacktrace_tree.model.nodes import Line
from stacktrace_tree.model.sections import Section, Stacktrace
from stacktrace_tree.parser import StacktraceParser
from stacktrace_tree.result import ParseResult
from stacktrace_tree.tokenizer.groups import GroupTokenizer
from stacktrace_tree.tokenizer.line import tokenize_line

__all__ = ["parse", "parse_line", "parse_stacktrace", "section_hash"]


def parse(text: str, config: ParseConfig | None = None) -> ParseResult:
    """Parse stack-trace text and return a rich ParseResult.

    Creates a fresh ``StacktraceParser`` per call.  Use a long-lived
    ``StacktraceParser`` instead when re-parsing edited text, so unchanged
    lines are served from its cache.

    Args:
        text:   Raw multi-line stack-trace text.
        config: Parser options.  Defaults to ``ParseConfig()`` when None.

    Returns:
        A ``ParseResult`` with stacktrace, lines, line_count, section_count
        and computation_time_ms populated.
    """
    return StacktraceParser(config=config).parse(text)


def parse_stacktrace(text: str) -> Stacktrace:
    """Return the prefix-factored section tree for ``text``.

    Never fails for ``str`` input: empty text yields an empty Stacktrace.

    Args:
        text: Raw multi-line stack-trace text.

    Returns:
        The Stacktrace whose top-level sections cover every input line.
    """
    return parse(text, config=ParseConfig(tokenize_lines=False)).stacktrace


def parse_line(text: str, config: ParseConfig | None = None) -> Line:
    """Tokenize one frame line into nested Groups of Segments.

    Args:
        text:   A single line of text.
        config: Parser options; only ``bracket_mode`` applies.  Defaults to
                ``ParseConfig()`` (permissive) when None.

    Returns:
        The tokenized Line.

    Raises:
        TypeError: If ``text`` is not a ``str``.
        BracketMismatchError: Only in strict bracket mode.
    """
    if not isinstance(text, str):
        msg = f"text must be a str, got {type(text).__name__}"
        raise TypeError(msg)
    tokenizer = GroupTokenizer(config=config) if config is not None else None
    return tokenize_line(text, tokenizer)


def section_hash(section: Section) -> int:
    """Return the structural hash of ``section``'s subtree.

    Suitable as a key for incremental re-rendering: equal subtrees (same
    ids, slices and shape) hash equal.
    """
    return section.structural_hash()
