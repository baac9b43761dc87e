"""Rendering primitives for a Stacktrace.

The interactive renderer lives outside this package; it needs, per section,
the faded/visible spans, the depth, whether the section has children and a
stable key.  ``iter_rows`` supplies the first three in display order and
``Section.structural_hash()`` the key.  ``render_text`` is a plain-text
outline built on the same rows, handy for terminals and test output.
"""

from __future__ import annotations

from collections.abc import Collection, Iterator
from dataclasses import dataclass

from stacktrace_tree.model.render_mode import RenderMode
from stacktrace_tree.model.sections import Section, Stacktrace

__all__ = ["Row", "Span", "iter_rows", "render_text", "section_spans"]


@dataclass(frozen=True, slots=True)
class Span:
    """A run of section text and how to draw it."""

    text: str
    mode: RenderMode


@dataclass(frozen=True, slots=True)
class Row:
    """One displayed section.

    Attributes:
        depth:        Nesting depth, 0 for top-level sections.
        section:      The section drawn on this row.
        spans:        Its text split into render spans.
        has_children: True when the section has child sections.
        collapsed:    True when the section's children are hidden.
    """

    depth: int
    section: Section
    spans: tuple[Span, ...]
    has_children: bool
    collapsed: bool


def section_spans(section: Section) -> tuple[Span, ...]:
    """Split a section into a FADED common span and a VISIBLE remainder span.

    Empty slices are omitted, so a top-level section usually has only the
    visible span.
    """
    spans: list[Span] = []
    if section.slice_common_with_previous_frames:
        spans.append(Span(section.slice_common_with_previous_frames, RenderMode.FADED))
    if section.slice_remainder:
        spans.append(Span(section.slice_remainder, RenderMode.VISIBLE))
    return tuple(spans)


def iter_rows(
    stacktrace: Stacktrace,
    collapsed: Collection[int] = frozenset(),
) -> Iterator[Row]:
    """Yield display rows in pre-order.

    Args:
        stacktrace: The tree to display.
        collapsed:  Ids of sections whose children are hidden.

    Yields:
        One Row per visible section.
    """
    stack: list[tuple[Section, int]] = [
        (section, 0) for section in reversed(stacktrace.sections)
    ]
    while stack:
        section, depth = stack.pop()
        has_children = not section.is_leaf
        is_collapsed = has_children and section.id in collapsed
        yield Row(
            depth=depth,
            section=section,
            spans=section_spans(section),
            has_children=has_children,
            collapsed=is_collapsed,
        )
        if not is_collapsed:
            stack.extend(
                (child, depth + 1) for child in reversed(section.child_sections)
            )


def render_text(
    stacktrace: Stacktrace,
    collapsed: Collection[int] = frozenset(),
    indent: str = "  ",
    mask_common: bool = False,
) -> str:
    """Render the tree as an indented plain-text outline.

    Each row starts with ``+`` (collapsed), ``-`` (expanded) or a space
    (leaf), followed by the depth indentation and the section text.

    Args:
        stacktrace:  The tree to render.
        collapsed:   Ids of sections whose children are hidden.
        indent:      Indentation added per nesting level.
        mask_common: Replace the faded common slice with spaces so the
                     remainder stays aligned under the previous frame.
    """
    rendered: list[str] = []
    for row in iter_rows(stacktrace, collapsed=collapsed):
        if row.collapsed:
            marker = "+"
        elif row.has_children:
            marker = "-"
        else:
            marker = " "
        text = "".join(
            " " * len(span.text)
            if mask_common and span.mode == RenderMode.FADED
            else span.text
            for span in row.spans
            if span.mode != RenderMode.COLLAPSED
        )
        rendered.append(f"{marker} {indent * row.depth}{text}")
    return "\n".join(rendered)
