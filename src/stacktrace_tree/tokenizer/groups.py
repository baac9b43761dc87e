"""GroupTokenizer: decomposes one frame line into nested Groups of Segments.

Scanning is a single left-to-right pass over the characters.  Bracket
nesting is kept on an explicit stack of scopes rather than the Python call
stack, so arbitrarily deep input cannot exhaust the interpreter's recursion
limit.

Character classes:
- Opening brackets ``<``, ``[``, ``{``, ``(`` start a nested scope.
- Closing brackets ``>``, ``]``, ``}``, ``)`` close the innermost scope.
  Only bracket *depth* is tracked; the closing character is recorded as seen.
- ``.`` and ``::`` link name segments into the same group (``a::b::C``).
  Adjacent separators form one run of up to two characters (``a..b``).
- A space ends the current group (``a::b C`` is two groups).
- Everything else, commas and lone colons included, is segment text.

Separators and spaces that follow a finished item are stored as that item's
trailing ``separator`` so the line can be rendered back verbatim.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field

from stacktrace_tree.config import BracketMode, ParseConfig
from stacktrace_tree.errors import BracketMismatchError
from stacktrace_tree.model.nodes import Group, GroupOrSegment, Segment

logger = logging.getLogger(__name__)

__all__ = ["BRACKET_PAIRS", "GroupTokenizer"]

BRACKET_PAIRS: dict[str, str] = {"<": ">", "[": "]", "{": "}", "(": ")"}
_CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())
_DOT = "."
_PATH_SEPARATOR = "::"
_SPACE = " "
# Longest separator run a single Segment carries (".." or "::").
_MAX_SEPARATOR_LEN = 2


@dataclass(slots=True)
class _Scope:
    """Mutable parse state for one bracket scope (or the whole line)."""

    bracket_open: str | None
    items: list[GroupOrSegment] = field(default_factory=list)
    # Segments already linked by a separator, waiting for the run to end.
    run: list[Segment] = field(default_factory=list)
    buffer: list[str] = field(default_factory=list)
    # True while the last item may still absorb trailing separators.
    trailing: bool = False

    @property
    def is_root(self) -> bool:
        return self.bracket_open is None

    def take_buffer(self) -> str:
        text = "".join(self.buffer)
        self.buffer.clear()
        return text

    def append_trailing(self, separator: str) -> None:
        last = self.items[-1]
        self.items[-1] = dataclasses.replace(
            last, separator=(last.separator or "") + separator
        )


class GroupTokenizer:
    """Parses line text into a tuple of top-level Groups.

    Permissive by default: every ``str`` input produces a result.  With
    ``ParseConfig(bracket_mode=BracketMode.STRICT)`` bracket problems raise
    ``BracketMismatchError`` instead of being repaired.

    Example::

        tokenizer = GroupTokenizer()
        groups = tokenizer.tokenize("my::lib::{{closure}}")
        # (Group(my::lib, separator="::"), Group({ Group({ closure }) }))
    """

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config: ParseConfig = config if config is not None else ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    @property
    def strict(self) -> bool:
        return self._config.bracket_mode == BracketMode.STRICT

    def tokenize(self, text: str) -> tuple[Group, ...]:
        """Tokenize ``text`` into its top-level Groups.

        Args:
            text: One line of text, normally with leading whitespace removed.

        Returns:
            The top-level groups in source order.  Empty for empty text.

        Raises:
            BracketMismatchError: Only in strict bracket mode.
        """
        root = _Scope(bracket_open=None)
        stack: list[_Scope] = [root]
        i = 0
        n = len(text)

        while i < n:
            c = text[i]
            scope = stack[-1]

            if c in BRACKET_PAIRS:
                self._close_run(scope)
                scope.trailing = False
                stack.append(_Scope(bracket_open=c))
                i += 1
                continue

            if c in _CLOSING_BRACKETS:
                if not scope.is_root:
                    expected = BRACKET_PAIRS[scope.bracket_open]  # type: ignore[index]
                    if c != expected:
                        if self.strict:
                            raise BracketMismatchError(i, expected, c)
                        logger.debug(
                            "Closing %r with %r at position %d",
                            scope.bracket_open,
                            c,
                            i,
                        )
                    stack.pop()
                    parent = stack[-1]
                    parent.items.append(self._finish_scope(scope, c))
                    parent.trailing = True
                    i += 1
                    continue
                if self.strict:
                    raise BracketMismatchError(i, None, c)
                # Unmatched closer at the top level is kept as segment text.
                logger.debug("Unmatched %r at position %d kept as text", c, i)

            elif c == _DOT or text.startswith(_PATH_SEPARATOR, i):
                separator = _DOT if c == _DOT else _PATH_SEPARATOR
                if scope.trailing:
                    scope.append_trailing(separator)
                elif self._extends_run(scope, separator):
                    last = scope.run[-1]
                    scope.run[-1] = Segment(last.text, f"{last.separator}{separator}")
                else:
                    scope.run.append(Segment(scope.take_buffer(), separator))
                i += len(separator)
                continue

            elif c == _SPACE:
                if not scope.trailing:
                    self._close_run(scope, force=True)
                scope.append_trailing(_SPACE)
                i += 1
                continue

            scope.trailing = False
            scope.buffer.append(c)
            i += 1

        while len(stack) > 1:
            scope = stack.pop()
            expected = BRACKET_PAIRS[scope.bracket_open]  # type: ignore[index]
            if self.strict:
                raise BracketMismatchError(n, expected, None)
            logger.debug("Unterminated %r closed at end of input", scope.bracket_open)
            stack[-1].items.append(self._finish_scope(scope, expected))

        self._close_run(root)
        # Root items are always Groups: runs are wrapped and bracket scopes
        # produce bracketed Groups.
        return tuple(item for item in root.items if isinstance(item, Group))

    # ------------------------------------------------------------------
    # Scope helpers
    # ------------------------------------------------------------------

    def _close_run(self, scope: _Scope, force: bool = False) -> None:
        """Turn the pending run of segments into an item of ``scope``.

        A run with a single component becomes a bare Segment inside a bracket
        scope and a one-segment Group at the top level.  A separator that
        ended the run (``my::lib::`` before ``{``) moves from the last segment
        to the item's trailing separator.

        Args:
            scope: The scope whose run is finished.
            force: Emit an empty-text item even when nothing was accumulated
                   (so a leading space is still preserved as a separator).
        """
        text = scope.take_buffer()
        segments = scope.run
        if not segments and not text and not force:
            return

        trailing: str | None = None
        if text or not segments:
            segments.append(Segment(text))
        else:
            last = segments[-1]
            trailing = last.separator
            segments[-1] = Segment(last.text)

        item: GroupOrSegment
        if len(segments) == 1 and not scope.is_root:
            item = Segment(segments[0].text, trailing)
        else:
            item = Group(tuple(segments), separator=trailing)

        scope.items.append(item)
        scope.run = []
        scope.trailing = True

    @staticmethod
    def _extends_run(scope: _Scope, separator: str) -> bool:
        """True when ``separator`` directly follows the run's last separator.

        Adjacent separators (``adder..AdderException``) form one run on the
        preceding segment as long as it stays within ``_MAX_SEPARATOR_LEN``.
        """
        if scope.buffer or not scope.run:
            return False
        previous = scope.run[-1].separator or ""
        return bool(previous) and len(previous + separator) <= _MAX_SEPARATOR_LEN

    def _finish_scope(self, scope: _Scope, bracket_close: str) -> Group:
        self._close_run(scope)
        value: tuple[GroupOrSegment, ...] = tuple(scope.items) or (Segment(""),)
        return Group(
            value,
            bracket_open=scope.bracket_open,
            bracket_close=bracket_close,
        )
