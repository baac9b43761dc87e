"""Tokenizer subpackage: one frame line to nested Groups of Segments.

Re-exports the public API for the tokenizer module:
- GroupTokenizer: bracket/separator-aware tokenizer for line text
- tokenize_line: split leading whitespace and tokenize the rest into a Line
- split_leading_whitespace: the whitespace split used by tokenize_line
"""

from stacktrace_tree.tokenizer.groups import BRACKET_PAIRS, GroupTokenizer
from stacktrace_tree.tokenizer.line import split_leading_whitespace, tokenize_line

__all__ = [
    "BRACKET_PAIRS",
    "GroupTokenizer",
    "split_leading_whitespace",
    "tokenize_line",
]
