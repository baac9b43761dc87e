"""ParseConfig and BracketMode for parser configuration.

ParseConfig is a frozen (immutable) dataclass holding the parser options.
BracketMode selects how the line tokenizer treats brackets that do not pair
up: repaired silently (permissive) or rejected (strict).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["BracketMode", "ParseConfig"]


class BracketMode(StrEnum):
    """How the tokenizer handles mismatched or unterminated brackets.

    - PERMISSIVE: A closing bracket closes the innermost open scope whatever
                  its type; stray closers are text; open scopes are closed at
                  end of input.  Never raises.
    - STRICT:     Raise BracketMismatchError on any of the above.
    """

    PERMISSIVE = auto()
    STRICT = auto()


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable configuration for StacktraceParser.

    Attributes:
        bracket_mode:   How the line tokenizer treats malformed brackets.
        tokenize_lines: When True, ``parse()`` also tokenizes every input line
            into a ``Line``.  When False only the section tree is built.
    """

    bracket_mode: BracketMode = BracketMode.PERMISSIVE
    tokenize_lines: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.bracket_mode, BracketMode):
            try:
                mode = BracketMode(self.bracket_mode)
            except ValueError:
                msg = (
                    "bracket_mode must be one of "
                    f"{[m.value for m in BracketMode]}, got {self.bracket_mode!r}"
                )
                raise ValueError(msg) from None
            object.__setattr__(self, "bracket_mode", mode)
        if not isinstance(self.tokenize_lines, bool):
            msg = f"tokenize_lines must be a bool, got {self.tokenize_lines!r}"
            raise ValueError(msg)
