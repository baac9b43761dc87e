"""Sections subpackage: prefix factoring of lines into a Section tree.

Re-exports the public API for the sections module:
- SectionTreeBuilder: builds a Stacktrace from raw text or split lines
- split_lines: line splitting used by the builder
- common_prefix_len, snap_to_word_boundary, shared_prefix_len: prefix helpers
"""

from stacktrace_tree.sections.builder import SectionTreeBuilder, split_lines
from stacktrace_tree.sections.prefix import (
    common_prefix_len,
    is_word_char,
    shared_prefix_len,
    snap_to_word_boundary,
)

__all__ = [
    "SectionTreeBuilder",
    "common_prefix_len",
    "is_word_char",
    "shared_prefix_len",
    "snap_to_word_boundary",
    "split_lines",
]
