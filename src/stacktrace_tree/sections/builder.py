"""SectionTreeBuilder: factors stack-trace lines into a tree of Sections.

Each line is compared with the line consumed just before it.  The shared
prefix (word-snapped, see ``prefix.py``) becomes the section's faded slice.
A line nests under the open section when its shared prefix is strictly
longer than that section's; otherwise open sections are closed until one
with a shorter shared prefix (or the root) is found, and the line becomes
its child.

Open sections are held on an explicit stack, so thousands of ever-deepening
lines build without touching the interpreter's recursion limit.

Example::

    builder = SectionTreeBuilder()
    trace = builder.build("a::b::Class.method_one\\na::b::Class.method_two\\n")
    # Section(0, "", "a::b::Class.method_one")
    #   Section(1, "a::b::Class", ".method_two")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from stacktrace_tree.model.sections import Section, Stacktrace
from stacktrace_tree.sections.prefix import shared_prefix_len

__all__ = ["SectionTreeBuilder", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines on ``\\n``.

    A final line terminator does not produce a trailing empty line, and a
    single ``\\r`` before each ``\\n`` is dropped.  Nothing else is normalized.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(slots=True)
class _OpenSection:
    """A section whose children are still being collected.

    The root frame has ``common_len=None`` and accepts every line.
    """

    id: int
    common_len: int | None
    line: str = ""
    children: list[Section] = field(default_factory=list)

    def freeze(self) -> Section:
        assert self.common_len is not None, "the root frame is never frozen"
        return Section(
            id=self.id,
            slice_common_with_previous_frames=self.line[: self.common_len],
            slice_remainder=self.line[self.common_len :],
            child_sections=tuple(self.children),
        )


@dataclass
class SectionTreeBuilder:
    """Builds a Stacktrace from raw text by greedy single-pass prefix factoring.

    The builder is stateless between calls: ids restart at 0 for every
    ``build()`` and the same input always yields an equal tree.
    """

    def build(self, text: str) -> Stacktrace:
        """Split ``text`` into lines and build the section tree."""
        return self.build_lines(split_lines(text))

    def build_lines(self, lines: Iterable[str]) -> Stacktrace:
        """Build the section tree from already-split lines.

        Args:
            lines: Line strings in input order, without terminators.

        Returns:
            The Stacktrace; empty when ``lines`` is empty.
        """
        root = _OpenSection(id=-1, common_len=None)
        stack: list[_OpenSection] = [root]
        previous: str | None = None
        next_id = 0

        for line in lines:
            common_len = shared_prefix_len(previous, line)
            # Not longer than the open section's prefix: sibling of an ancestor.
            while len(stack) > 1 and common_len <= stack[-1].common_len:  # type: ignore[operator]
                self._close_top(stack)
            stack.append(_OpenSection(id=next_id, common_len=common_len, line=line))
            next_id += 1
            previous = line

        while len(stack) > 1:
            self._close_top(stack)

        return Stacktrace(sections=tuple(root.children))

    @staticmethod
    def _close_top(stack: list[_OpenSection]) -> None:
        section = stack.pop().freeze()
        stack[-1].children.append(section)
