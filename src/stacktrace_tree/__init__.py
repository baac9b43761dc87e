"""stacktrace-tree - prefix-factored, tokenized stack traces."""

from __future__ import annotations

from stacktrace_tree.api import parse, parse_line, parse_stacktrace, section_hash
from stacktrace_tree.config import BracketMode, ParseConfig
from stacktrace_tree.errors import (
    BracketMismatchError,
    StacktraceError,
    StacktraceParseError,
)
from stacktrace_tree.model import (
    Group,
    GroupOrSegment,
    Line,
    RenderMode,
    Section,
    Segment,
    Stacktrace,
)
from stacktrace_tree.parser import StacktraceParser
from stacktrace_tree.result import ParseResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "BracketMismatchError",
    "BracketMode",
    "Group",
    "GroupOrSegment",
    "Line",
    "ParseConfig",
    "ParseResult",
    "RenderMode",
    "Section",
    "Segment",
    "Stacktrace",
    "StacktraceError",
    "StacktraceParseError",
    "StacktraceParser",
    "parse",
    "parse_line",
    "parse_stacktrace",
    "section_hash",
]
