"""RenderMode StrEnum: how a renderer should draw a span of frame text."""

from __future__ import annotations

from enum import StrEnum, auto


class RenderMode(StrEnum):
    """How to render a span of a frame line.

    StrEnum values are the lowercased member names:
    - VISIBLE   -> "visible"   : draw at full opacity
    - FADED     -> "faded"     : draw at faded opacity (text shared with the
                                 previous frame)
    - COLLAPSED -> "collapsed" : do not draw
    """

    VISIBLE = auto()
    FADED = auto()
    COLLAPSED = auto()
