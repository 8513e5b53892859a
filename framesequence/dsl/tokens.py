"""Token types for the frame sequence lexer.

Defines all token kinds and the Token dataclass used by the lexer and parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """All token types recognized by the frame sequence lexer."""

    # Literals
    DIGITS = auto()  # 0042

    # Punctuation
    MINUS = auto()  # -
    COMMA = auto()  # ,
    AT = auto()  # @

    # Symbols
    BINARY = auto()  # b

    # Special
    UNKNOWN = auto()  # any character outside the grammar
    EOF = auto()


# Single-character tokens
PUNCTUATION: dict[str, TokenKind] = {
    "-": TokenKind.MINUS,
    ",": TokenKind.COMMA,
    "@": TokenKind.AT,
    "b": TokenKind.BINARY,
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the lexer."""

    kind: TokenKind
    value: str
    position: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, @{self.position})"
