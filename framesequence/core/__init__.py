"""framesequence core — shared types, errors, and configuration.

    from framesequence.core import FrameSequenceResult, get_config
"""

from framesequence.core.config import FrameSequenceConfig, get_config, set_config
from framesequence.core.types import (
    FRAME_MAX,
    FRAME_MIN,
    FrameSequenceError,
    FrameSequenceResult,
    ValidationError,
    fits_frame,
)

__all__ = [
    "FRAME_MAX",
    "FRAME_MIN",
    "FrameSequenceConfig",
    "FrameSequenceError",
    "FrameSequenceResult",
    "ValidationError",
    "fits_frame",
    "get_config",
    "set_config",
]
