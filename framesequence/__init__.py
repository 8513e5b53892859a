"""framesequence — parse frame sequence strings into frame numbers.

Mainly useful for rendering and animation tools:

    >>> from framesequence import parse_frame_sequence
    >>> parse_frame_sequence("10-20@b")
    [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]
"""

from framesequence.core.types import FrameSequenceError, FrameSequenceResult
from framesequence.dsl.parser import FrameSequenceSyntaxError, NumericOverflowError
from framesequence.expander.interpreter import FrameLimitError
from framesequence.pipeline import expand_frame_sequence, parse_frame_sequence, parse_tree

__version__ = "0.1.0"

__all__ = [
    "FrameLimitError",
    "FrameSequenceError",
    "FrameSequenceResult",
    "FrameSequenceSyntaxError",
    "NumericOverflowError",
    "expand_frame_sequence",
    "parse_frame_sequence",
    "parse_tree",
]
