"""Hand-written lexer for frame sequence strings.

Splits the input into digit runs and single-character punctuation.
Characters the grammar does not know about become UNKNOWN tokens so the
parser can report them together with what it expected at that point.
"""

from __future__ import annotations

from framesequence.dsl.tokens import PUNCTUATION, Token, TokenKind


class Lexer:
    """Tokenize a frame sequence string.

    Usage:
        lexer = Lexer("10-20@2")
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Scan the entire source and return all tokens including EOF."""
        while not self._at_end():
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, "", self._pos))
        return self._tokens

    def _scan_token(self) -> None:
        ch = self._source[self._pos]

        if _is_digit(ch):
            self._scan_digits()
            return

        kind = PUNCTUATION.get(ch, TokenKind.UNKNOWN)
        self._tokens.append(Token(kind, ch, self._pos))
        self._pos += 1

    def _scan_digits(self) -> None:
        start = self._pos
        while not self._at_end() and _is_digit(self._source[self._pos]):
            self._pos += 1
        self._tokens.append(Token(TokenKind.DIGITS, self._source[start : self._pos], start))

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)


def _is_digit(ch: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return "0" <= ch <= "9"
