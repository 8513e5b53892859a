"""Frame sequence expander — turns a parsed AST into frame numbers.

Usage:
    from framesequence.expander import FrameSequenceInterpreter, remove_duplicates

    raw_frames = FrameSequenceInterpreter().expand(tree)
    frames = remove_duplicates(raw_frames)
"""

from framesequence.expander.dedup import remove_duplicates
from framesequence.expander.interpreter import (
    FrameLimitError,
    FrameSequenceInterpreter,
    count_frames,
)
from framesequence.expander.strategies import (
    binary_sequence,
    contiguous_range,
    expand_range,
    expansion_size,
    stepped_range,
)

__all__ = [
    "FrameLimitError",
    "FrameSequenceInterpreter",
    "binary_sequence",
    "contiguous_range",
    "count_frames",
    "expand_range",
    "expansion_size",
    "remove_duplicates",
    "stepped_range",
]
