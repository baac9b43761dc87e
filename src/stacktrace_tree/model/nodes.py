"""Segment, Group and Line dataclasses for tokenized stack-trace lines.

Provides the value types produced by the GroupTokenizer when it decomposes a
single frame line into bracket-scoped groups of punctuation-delimited name
segments.

e.g. in ``my::lib::<impl tachys::view::RenderHtml for (A,)>::{{closure}}``
the top-level groups are:

* ``my::lib``
* ``<impl tachys::view::RenderHtml for (A,)>``
    - ``impl``
    - ``tachys::view::RenderHtml``
    - ``for``
    - ``(A,)``
        - ``A,``
* ``{{closure}}``
    - ``{closure}``
        - ``closure``
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Segment:
    """A segment of text that should be treated as a whole.

    Attributes:
        text:      The name component, e.g. ``my_package`` or ``RenderHtml``.
                   May be empty for a leading separator (``.method``) or when a
                   separator run outgrows two characters (``a...b``).
        separator: The punctuation that follows this token in source (``.``,
                   ``..``, ``::``, or a run of spaces), or None when nothing follows.
    """

    text: str
    separator: str | None = None

    def text_with_separator(self) -> str:
        """Return the segment text followed by its separator, if any."""
        return self.text + (self.separator or "")


@dataclass(frozen=True, slots=True)
class Group:
    """A group of segments, optionally wrapped in a bracket pair.

    Attributes:
        value:         The items between the brackets (or the whole group when
                       unbracketed).  Each item is a ``Segment`` or a nested
                       ``Group``.  Never empty.
        bracket_open:  Opening bracket character, or None.
        bracket_close: Closing bracket character, or None.  Set together with
                       ``bracket_open``.
        separator:     Punctuation/space between this group and the next one.
    """

    value: tuple[GroupOrSegment, ...]
    bracket_open: str | None = None
    bracket_close: str | None = None
    separator: str | None = None

    def __post_init__(self) -> None:
        if not self.value:
            msg = "Group.value must contain at least one item"
            raise ValueError(msg)
        if (self.bracket_open is None) != (self.bracket_close is None):
            msg = (
                "bracket_open and bracket_close must be set together, got "
                f"{self.bracket_open!r} and {self.bracket_close!r}"
            )
            raise ValueError(msg)

    @property
    def is_bracketed(self) -> bool:
        return self.bracket_open is not None

    def segments(self) -> Iterator[Segment]:
        """Yield every Segment in this group, depth first, in source order."""
        stack: list[GroupOrSegment] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, Segment):
                yield item
            else:
                stack.extend(reversed(item.value))

    def render(self) -> str:
        """Rebuild the source text of this group, including its separator."""
        parts: list[str] = []
        # Strings on the stack are closing text queued behind a group's value.
        stack: list[GroupOrSegment | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, Segment):
                parts.append(item.text_with_separator())
            else:
                parts.append(item.bracket_open or "")
                stack.append((item.bracket_close or "") + (item.separator or ""))
                stack.extend(reversed(item.value))
        return "".join(parts)


# A group may nest another group.
GroupOrSegment: TypeAlias = Segment | Group


@dataclass(frozen=True, slots=True)
class Line:
    """One tokenized line of a stack trace.

    Attributes:
        leading_whitespace: Whitespace preceding the first group.
        groups:             The groups of segments within this line.  e.g. in
                            ``my::lib::{{closure}}`` the groups are
                            ``my::lib`` and ``{{closure}}``.
    """

    leading_whitespace: str
    groups: tuple[Group, ...] = ()

    def __post_init__(self) -> None:
        if self.leading_whitespace and not self.leading_whitespace.isspace():
            msg = (
                "leading_whitespace must only contain whitespace, got "
                f"{self.leading_whitespace!r}"
            )
            raise ValueError(msg)

    def segments(self) -> Iterator[Segment]:
        for group in self.groups:
            yield from group.segments()

    def render(self) -> str:
        """Rebuild the line text.  Round-trips for bracket-balanced input."""
        return self.leading_whitespace + "".join(g.render() for g in self.groups)
