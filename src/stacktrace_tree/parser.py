"""StacktraceParser: orchestrator that wires SectionTreeBuilder + GroupTokenizer.

This is the central wiring layer between the two parsing subsystems and the
public API.  It turns raw text into a rich ParseResult with the section tree,
the tokenized lines and timing data.

Architecture:
- parse() starts a wall-clock timer, splits the text into lines once, builds
  the section tree from the raw line strings and, when enabled, tokenizes
  each line through the LineCache.
- The section tree works on unparsed text; the tokenizer output is not fed
  into it.  ``tokenize_remainder()`` is the seam for composing the two
  (tokenizing a section's unique slice for per-identifier rendering).
- Tokenized lines are cached per parser instance (LRU), so re-parsing an
  edited trace only tokenizes the lines that changed.
"""

from __future__ import annotations

import logging
import time

from stacktrace_tree.cache import LineCache
from stacktrace_tree.config import ParseConfig
from stacktrace_tree.model.nodes import Line
from stacktrace_tree.model.sections import Section
from stacktrace_tree.result import ParseResult
from stacktrace_tree.sections.builder import SectionTreeBuilder, split_lines
from stacktrace_tree.tokenizer.groups import GroupTokenizer

logger = logging.getLogger(__name__)

__all__ = ["StacktraceParser"]


class StacktraceParser:
    """Orchestrator for stack-trace parsing.

    Wires ``SectionTreeBuilder``, ``GroupTokenizer`` and a ``LineCache``
    together into a single ``parse()`` call that returns a ``ParseResult``.

    Two separate ``StacktraceParser`` instances never share cache state:
    each instance maintains its own ``LineCache``.

    Example::

        from stacktrace_tree.parser import StacktraceParser

        parser = StacktraceParser()
        result = parser.parse("a::b::Class.method_one\\na::b::Class.method_two")
        print(result.section_count)   # 2
        print(result.stacktrace.sections[0].child_sections[0].slice_remainder)
        # ".method_two"
    """

    def __init__(
        self,
        config: ParseConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the parser.

        Args:
            config: Parser options.  Defaults to ``ParseConfig()``.
            max_cache_size: Maximum number of tokenized lines held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``ParseConfig`` (which governs parsing
                behaviour only).
        """
        self._config: ParseConfig = config if config is not None else ParseConfig()
        self._tokenizer = GroupTokenizer(config=self._config)
        self._cache = LineCache(self._tokenizer, max_size=max_cache_size)
        self._builder = SectionTreeBuilder()

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def cache(self) -> LineCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Parse stack-trace text into a ParseResult.

        Calling this twice with the same text always produces equal trees
        and lines.  (The cache is a performance detail that does not affect
        correctness.)

        Args:
            text: Raw, possibly multi-line, stack-trace text.

        Returns:
            A ``ParseResult`` with all five fields populated.

        Raises:
            TypeError: If ``text`` is not a ``str``.
            BracketMismatchError: Only when the config selects strict bracket
                mode and ``tokenize_lines`` is enabled.
        """
        if not isinstance(text, str):
            msg = f"text must be a str, got {type(text).__name__}"
            raise TypeError(msg)

        t0 = time.perf_counter()

        raw_lines = split_lines(text)
        stacktrace = self._builder.build_lines(raw_lines)
        lines = self._cache.get_many(raw_lines) if self._config.tokenize_lines else ()

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        section_count = sum(1 for _ in stacktrace.iter_sections())
        logger.debug(
            "Parsed %d lines into %d top-level sections (%d total) in %.3f ms",
            len(raw_lines),
            len(stacktrace.sections),
            section_count,
            elapsed_ms,
        )

        return ParseResult(
            stacktrace=stacktrace,
            lines=lines,
            line_count=len(raw_lines),
            section_count=section_count,
            computation_time_ms=elapsed_ms,
        )

    def tokenize(self, line: str) -> Line:
        """Tokenize a single line through this parser's cache."""
        return self._cache.get(line)

    def tokenize_remainder(self, section: Section) -> Line:
        """Tokenize the slice of ``section`` that is unique to its frame.

        The remainder usually starts with the separator that follows the
        shared prefix (``.method_two``); the tokenizer keeps it as an empty
        leading segment so ``render()`` still reproduces the slice.
        """
        return self._cache.get(section.slice_remainder)
