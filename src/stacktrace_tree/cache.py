"""LineCache: LRU-backed cache of tokenized lines.

A pasted stack trace is typically re-parsed on every edit, and most of its
lines do not change between edits.  LineCache memoizes ``tokenize_line`` by
line text so unchanged lines skip the tokenizer on later parses.  LRU
eviction occurs silently when ``max_size`` is exceeded; no error is raised.

Each ``LineCache`` instance maintains its own ``LRUCache``, there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from stacktrace_tree.cache import LineCache
    from stacktrace_tree.tokenizer import GroupTokenizer

    cache = LineCache(GroupTokenizer(), max_size=512)

    line = cache.get("std::io::Write::write_fmt")        # tokenized
    line_again = cache.get("std::io::Write::write_fmt")  # served from memory
"""

from __future__ import annotations

from cachetools import LRUCache

from stacktrace_tree.model.nodes import Line
from stacktrace_tree.tokenizer.groups import GroupTokenizer
from stacktrace_tree.tokenizer.line import tokenize_line

__all__ = ["LineCache"]


class LineCache:
    """LRU-backed memo of ``tokenize_line`` results keyed by line text.

    Args:
        tokenizer: The GroupTokenizer used for cache misses.  Its config is
            fixed for the cache's lifetime, so cached Lines stay valid.
        max_size:  Maximum number of Lines to hold in memory.  Defaults to
            512.  When exceeded, the least-recently-used entry is silently
            evicted.
    """

    def __init__(self, tokenizer: GroupTokenizer, max_size: int = 512) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._tokenizer = tokenizer
        self._cache: LRUCache[str, Line] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, text: str) -> Line:
        """Return the tokenized Line for ``text``, tokenizing on a miss.

        Errors raised by the tokenizer (strict bracket mode) propagate and
        nothing is cached for that text.
        """
        line = self._cache.get(text)
        if line is not None:
            self._hits += 1
            return line
        self._misses += 1
        line = tokenize_line(text, self._tokenizer)
        self._cache[text] = line
        return line

    def get_many(self, texts: list[str]) -> tuple[Line, ...]:
        """Return Lines for ``texts`` in input order."""
        return tuple(self.get(text) for text in texts)

    def clear(self) -> None:
        """Drop every cached line and reset the hit and miss counters."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
