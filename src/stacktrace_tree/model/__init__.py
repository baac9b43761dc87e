"""Model subpackage: value types for tokenized lines and the section tree.

Re-exports the public API for the model module:
- Segment, Group, GroupOrSegment, Line: output of the line tokenizer
- Section, Stacktrace: output of the section-tree builder
- RenderMode: StrEnum describing how a renderer draws a span
"""

from stacktrace_tree.model.nodes import Group, GroupOrSegment, Line, Segment
from stacktrace_tree.model.render_mode import RenderMode
from stacktrace_tree.model.sections import Section, Stacktrace

__all__ = [
    "Group",
    "GroupOrSegment",
    "Line",
    "RenderMode",
    "Section",
    "Segment",
    "Stacktrace",
]
