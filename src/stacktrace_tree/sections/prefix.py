"""Shared-prefix computation between consecutive frame lines.

The prefix a frame shares with its predecessor is the longest exact common
character prefix, snapped back to a word boundary so a factored prefix never
ends inside an identifier.  A word character is alphanumeric or ``_``.

Example::

    shared_prefix_len("a::b::Class.method_one", "a::b::Class.method_two")
    # 11  ->  "a::b::Class" | ".method_two"
"""

from __future__ import annotations

__all__ = [
    "common_prefix_len",
    "is_word_char",
    "shared_prefix_len",
    "snap_to_word_boundary",
]


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def common_prefix_len(a: str, b: str) -> int:
    """Return the length of the longest common prefix of ``a`` and ``b``.

    Comparison is exact and case-sensitive, with no normalization.
    """
    for index, (char_a, char_b) in enumerate(zip(a, b)):
        if char_a != char_b:
            return index
    return min(len(a), len(b))


def snap_to_word_boundary(text: str, length: int) -> int:
    """Snap a prefix length of ``text`` down to a word boundary.

    Scans back from ``text[length - 1]`` to the nearest non-word character,
    then further back to the end of the word preceding it.  The boundary is
    the index right after that word.

    Args:
        text:   The line the prefix belongs to.
        length: Length of the unsnapped common prefix (``<= len(text)``).

    Returns:
        The snapped length, or 0 when the prefix holds no complete word
        followed by a non-word character.
    """
    index = length - 1
    while index >= 0 and is_word_char(text[index]):
        index -= 1
    while index >= 0 and not is_word_char(text[index]):
        index -= 1
    return index + 1


def shared_prefix_len(previous: str | None, line: str) -> int:
    """Return how much of ``line`` is shared with ``previous``, word-snapped.

    Returns 0 when there is no previous line.
    """
    if previous is None:
        return 0
    return snap_to_word_boundary(line, common_prefix_len(previous, line))
