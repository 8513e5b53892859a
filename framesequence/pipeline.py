"""Top-level entry points: notation string in, frame numbers out.

    input string -> Lexer -> Parser -> FrameSequence
                 -> FrameSequenceInterpreter -> raw frames
                 -> remove_duplicates -> frames
"""

from __future__ import annotations

import logging

from framesequence.core.types import FrameSequenceResult
from framesequence.dsl.ast_nodes import FrameSequence
from framesequence.dsl.lexer import Lexer
from framesequence.dsl.parser import Parser
from framesequence.expander.dedup import remove_duplicates
from framesequence.expander.interpreter import FrameSequenceInterpreter

logger = logging.getLogger(__name__)


def parse_tree(source: str) -> FrameSequence:
    """Parse a frame sequence string into its AST without expanding it."""
    tokens = Lexer(source).tokenize()
    return Parser(tokens, source).parse()


def expand_frame_sequence(source: str, max_frames: int | None = None) -> FrameSequenceResult:
    """Parse and expand a frame sequence string, keeping expansion statistics."""
    tree = parse_tree(source)
    raw_frames = FrameSequenceInterpreter(max_frames=max_frames).expand(tree)
    frames = remove_duplicates(raw_frames)

    if len(frames) != len(raw_frames):
        logger.debug("Dropped %d duplicate frames", len(raw_frames) - len(frames))

    return FrameSequenceResult(source=source, frames=frames, raw_count=len(raw_frames))


def parse_frame_sequence(source: str) -> list[int]:
    """Parse a frame sequence string into a list of unique frame numbers.

    Examples:
        "1,2,3,5,8,13" -> [1, 2, 3, 5, 8, 13]
        "10-15"        -> [10, 11, 12, 13, 14, 15]
        "10-20@2"      -> [10, 12, 14, 16, 18, 20]
        "42-33@3"      -> [42, 39, 36, 33]
        "10-20@b"      -> [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]
        "80-70@4"      -> [80, 76, 72]

    Raises:
        FrameSequenceSyntaxError: the string does not match the grammar.
        NumericOverflowError: a literal does not fit a 64-bit integer.
        FrameLimitError: a configured max_frames bound would be exceeded.
    """
    return expand_frame_sequence(source).frames
