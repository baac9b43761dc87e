"""Section and Stacktrace dataclasses for the prefix-factored trace tree.

A Section is one frame line split into the slice it shares with the previous
frame and the slice unique to it.  Sections nest: a frame whose shared prefix
is longer than its predecessor's becomes that predecessor's child.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Section:
    """A hierarchical group of frames that share leading text.

    Attributes:
        id:                                Creation-order id, unique within one
                                           Stacktrace.
        slice_common_with_previous_frames: Leading slice shared with the
                                           previous frame (rendered faded).
        slice_remainder:                   The rest of the line.
        child_sections:                    Sections nested under this one.
    """

    id: int
    slice_common_with_previous_frames: str
    slice_remainder: str
    child_sections: tuple[Section, ...] = ()

    def __post_init__(self) -> None:
        if self.id < 0:
            msg = f"Section.id must be >= 0, got {self.id}"
            raise ValueError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return _sections_equal(self, other)

    def __hash__(self) -> int:
        return self.structural_hash()

    @property
    def line(self) -> str:
        """The original line text (common slice + remainder)."""
        return self.slice_common_with_previous_frames + self.slice_remainder

    @property
    def is_leaf(self) -> bool:
        return not self.child_sections

    def iter_sections(self) -> Iterator[Section]:
        """Yield this section and all descendants in pre-order."""
        stack: list[Section] = [self]
        while stack:
            section = stack.pop()
            yield section
            stack.extend(reversed(section.child_sections))

    def structural_hash(self) -> int:
        """Hash of this subtree's ids, slices and shape.

        Computed bottom-up without recursion so arbitrarily deep subtrees
        can be keyed by a renderer.
        """
        hashes: dict[int, int] = {}
        stack: list[tuple[Section, bool]] = [(self, False)]
        while stack:
            section, children_done = stack.pop()
            if not children_done:
                stack.append((section, True))
                stack.extend((child, False) for child in section.child_sections)
                continue
            hashes[id(section)] = hash(
                (
                    section.id,
                    section.slice_common_with_previous_frames,
                    section.slice_remainder,
                    tuple(hashes[id(child)] for child in section.child_sections),
                )
            )
        return hashes[id(self)]


def _sections_equal(left: Section, right: Section) -> bool:
    """Compare two subtrees node by node with an explicit stack."""
    stack: list[tuple[Section, Section]] = [(left, right)]
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if (
            a.id != b.id
            or a.slice_common_with_previous_frames != b.slice_common_with_previous_frames
            or a.slice_remainder != b.slice_remainder
            or len(a.child_sections) != len(b.child_sections)
        ):
            return False
        stack.extend(zip(a.child_sections, b.child_sections))
    return True


@dataclass(frozen=True, slots=True, eq=False)
class Stacktrace:
    """A parsed stack trace: the ordered top-level Sections.

    Attributes:
        sections: Top-level sections in input order.
    """

    sections: tuple[Section, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stacktrace):
            return NotImplemented
        return len(self.sections) == len(other.sections) and all(
            _sections_equal(a, b) for a, b in zip(self.sections, other.sections)
        )

    def __hash__(self) -> int:
        return hash(tuple(section.structural_hash() for section in self.sections))

    def __len__(self) -> int:
        return len(self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def iter_sections(self) -> Iterator[Section]:
        """Yield every section in pre-order, which is input line order."""
        for section in self.sections:
            yield from section.iter_sections()

    def lines(self) -> list[str]:
        """Reconstruct the input lines from the tree."""
        return [section.line for section in self.iter_sections()]
