"""Frame sequence interpreter — walks the AST and expands it into frames.

Takes a FrameSequence (from the parser) and produces the raw, possibly
duplicated, frame list by concatenating the expansion of every part from
left to right.
"""

from __future__ import annotations

import logging

from framesequence.core.config import get_config
from framesequence.core.types import FrameSequenceError
from framesequence.dsl.ast_nodes import Frame, FrameRange, FrameSequence, FrameSequencePart
from framesequence.expander.strategies import expand_range, expansion_size

logger = logging.getLogger(__name__)


class FrameLimitError(FrameSequenceError):
    """Raised when an expansion would produce more frames than allowed."""

    def __init__(self, requested: int, limit: int) -> None:
        self.requested = requested
        self.limit = limit
        super().__init__(f"Sequence expands to {requested} frames, limit is {limit}")


class FrameSequenceInterpreter:
    """Expand FrameSequence AST nodes into frame numbers.

    Usage:
        interpreter = FrameSequenceInterpreter(max_frames=10_000)
        raw_frames = interpreter.expand(tree)

    When max_frames is omitted the configured default applies; the limit
    is checked before anything is expanded.
    """

    def __init__(self, max_frames: int | None = None) -> None:
        self._max_frames = max_frames if max_frames is not None else get_config().max_frames

    def expand(self, sequence: FrameSequence) -> list[int]:
        """Expand every part of the sequence, duplicates included."""
        if self._max_frames is not None:
            requested = count_frames(sequence)
            if requested > self._max_frames:
                raise FrameLimitError(requested, self._max_frames)

        frames: list[int] = []
        for part in sequence.parts:
            frames.extend(self.expand_part(part))

        logger.debug("Expanded %d parts into %d raw frames", len(sequence.parts), len(frames))
        return frames

    def expand_part(self, part: FrameSequencePart) -> list[int]:
        """Expand a single comma-separated part."""
        if isinstance(part, FrameRange):
            return expand_range(part)
        if isinstance(part, Frame):
            return [part.value]
        raise TypeError(f"Unknown sequence part: {part!r}")


def count_frames(sequence: FrameSequence) -> int:
    """Raw frame count of a sequence, duplicates included."""
    return sum(
        expansion_size(part) if isinstance(part, FrameRange) else 1 for part in sequence.parts
    )
