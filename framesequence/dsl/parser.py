"""Hand-written recursive descent parser for frame sequence strings.

Consumes the token list from the lexer and produces a FrameSequence AST.
The grammar, in full:

    FrameSequenceString  := FrameSequence EOI
    FrameSequence        := FrameSequencePart ("," FrameSequencePart)*
    FrameSequencePart    := FrameRange | Frame
    FrameRange           := Frame "-" Frame ("@" (PositiveNumber | BinarySequenceSymbol))?
    Frame                := "-"? Digit+
    PositiveNumber       := Digit+     (value > 0)
    BinarySequenceSymbol := "b"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NoReturn

from framesequence.core.types import FrameSequenceError, fits_frame
from framesequence.dsl.ast_nodes import (
    BinarySequenceSymbol,
    Frame,
    FrameRange,
    FrameSequence,
    FrameSequencePart,
    PositiveNumber,
    Step,
)
from framesequence.dsl.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


# Names used in the expected-token sets of syntax errors
FRAME = "Frame"
POSITIVE_NUMBER = "PositiveNumber"
BINARY_SEQUENCE_SYMBOL = "BinarySequenceSymbol"
RANGE_SEPARATOR = "-"
PART_SEPARATOR = ","
STEP_MARKER = "@"
EOI = "EOI"


class FrameSequenceSyntaxError(FrameSequenceError):
    """Raised when the input does not match the frame sequence grammar."""

    def __init__(self, source: str, position: int, expected: Iterable[str], found: str) -> None:
        self.source = source
        self.position = position
        self.expected = frozenset(expected)
        self.found = found
        found_text = repr(found) if found else "end of input"
        super().__init__(
            f"Syntax error at position {position}: "
            f"expected one of {', '.join(sorted(self.expected))}, found {found_text}"
        )


class NumericOverflowError(FrameSequenceError):
    """Raised when an integer literal does not fit a 64-bit frame number."""

    def __init__(self, literal: str, position: int) -> None:
        self.literal = literal
        self.position = position
        super().__init__(
            f"Integer literal {literal} at position {position} is out of the 64-bit frame range"
        )


class Parser:
    """Parse a frame sequence token stream into a FrameSequence AST.

    Usage:
        parser = Parser(tokens, source)
        tree = parser.parse()
    """

    def __init__(self, tokens: list[Token], source: str = "") -> None:
        self._tokens = tokens
        self._source = source
        self._pos = 0

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------

    def parse(self) -> FrameSequence:
        """Parse the full token stream; trailing input is an error."""
        parts = [self._parse_part()]
        while True:
            if self._check(TokenKind.COMMA):
                self._advance()
                parts.append(self._parse_part())
            elif self._check(TokenKind.EOF):
                break
            else:
                self._error(_follow_set(parts[-1]) | {PART_SEPARATOR, EOI})

        logger.debug("Parsed %d parts from %r", len(parts), self._source)
        return FrameSequence(parts=tuple(parts), source=self._source)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def _parse_part(self) -> FrameSequencePart:
        left = self._parse_frame()
        if not self._check(TokenKind.MINUS):
            return left

        self._advance()
        right = self._parse_frame()
        step: Step | None = None
        if self._check(TokenKind.AT):
            self._advance()
            step = self._parse_step()

        return FrameRange(left=left, right=right, step=step, position=left.position)

    def _parse_frame(self) -> Frame:
        start = self._current()
        negative = False
        if self._check(TokenKind.MINUS):
            negative = True
            self._advance()

        digits = self._consume(TokenKind.DIGITS, {FRAME})
        literal = f"-{digits.value}" if negative else digits.value
        return Frame(value=self._to_int(literal, start.position), position=start.position)

    def _parse_step(self) -> Step:
        token = self._current()
        if token.kind == TokenKind.BINARY:
            self._advance()
            return BinarySequenceSymbol(position=token.position)

        if token.kind == TokenKind.DIGITS:
            value = self._to_int(token.value, token.position)
            if value == 0:
                self._error({POSITIVE_NUMBER})
            self._advance()
            return PositiveNumber(value=value, position=token.position)

        self._error({POSITIVE_NUMBER, BINARY_SEQUENCE_SYMBOL})

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        if self._pos >= len(self._tokens):
            return Token(TokenKind.EOF, "", len(self._source))
        return self._tokens[self._pos]

    def _check(self, kind: TokenKind) -> bool:
        return self._current().kind == kind

    def _advance(self) -> Token:
        token = self._current()
        if token.kind != TokenKind.EOF:
            self._pos += 1
        return token

    def _consume(self, kind: TokenKind, expected: set[str]) -> Token:
        if self._check(kind):
            return self._advance()
        self._error(expected)

    def _error(self, expected: set[str]) -> NoReturn:
        token = self._current()
        raise FrameSequenceSyntaxError(self._source, token.position, expected, token.value)

    @staticmethod
    def _to_int(literal: str, position: int) -> int:
        # int() counts leading zeros against its digit limit; 2**63 has 19 digits
        digits = literal.lstrip("-").lstrip("0") or "0"
        if len(digits) > 19:
            raise NumericOverflowError(literal, position)
        value = -int(digits) if literal.startswith("-") else int(digits)
        if not fits_frame(value):
            raise NumericOverflowError(literal, position)
        return value


def _follow_set(part: FrameSequencePart) -> set[str]:
    """Tokens that could have continued the given part."""
    if isinstance(part, Frame):
        return {RANGE_SEPARATOR}
    if part.step is None:
        return {STEP_MARKER}
    return set()
