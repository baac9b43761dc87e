"""Line tokenization: leading whitespace split plus GroupTokenizer."""

from __future__ import annotations

from stacktrace_tree.model.nodes import Line
from stacktrace_tree.tokenizer.groups import GroupTokenizer

__all__ = ["split_leading_whitespace", "tokenize_line"]

# Module-level tokenizer (stateless, safe to share across calls)
_default_tokenizer = GroupTokenizer()


def split_leading_whitespace(text: str) -> tuple[str, str]:
    """Split ``text`` into its leading whitespace and the rest.

    A whitespace-only string is returned whole as the leading part.
    """
    for index, char in enumerate(text):
        if not char.isspace():
            return text[:index], text[index:]
    return text, ""


def tokenize_line(text: str, tokenizer: GroupTokenizer | None = None) -> Line:
    """Tokenize one line of stack-trace text into a Line.

    Args:
        text:      A single line (no line terminator).
        tokenizer: Tokenizer to use.  Defaults to a permissive GroupTokenizer.

    Returns:
        A Line whose ``render()`` reproduces ``text`` when its brackets
        are balanced.
    """
    tokenizer = tokenizer if tokenizer is not None else _default_tokenizer
    leading_whitespace, remainder = split_leading_whitespace(text)
    return Line(
        leading_whitespace=leading_whitespace,
        groups=tokenizer.tokenize(remainder),
    )
