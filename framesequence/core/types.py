"""Core data types for framesequence.

Shared values used by the grammar front end, the expander, and the CLI.
Result objects convert to JSON-ready dictionaries via to_dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Frame bounds
# ---------------------------------------------------------------------------

# Frames are signed 64-bit integers; literals outside this range are rejected.
FRAME_MIN = -(2**63)
FRAME_MAX = 2**63 - 1


def fits_frame(value: int) -> bool:
    """Return True if value is representable as a frame number."""
    return FRAME_MIN <= value <= FRAME_MAX


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class FrameSequenceError(Exception):
    """Base class for every error raised while turning notation into frames."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class FrameSequenceResult:
    """Outcome of expanding one frame sequence string."""

    source: str
    frames: list[int] = field(default_factory=list)
    raw_count: int = 0

    @property
    def duplicates_dropped(self) -> int:
        return self.raw_count - len(self.frames)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "frames": self.frames,
            "raw_count": self.raw_count,
        }


# ---------------------------------------------------------------------------
# Validation types
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A diagnostic produced by the sequence validator."""

    message: str
    position: int = 0
    severity: str = "warning"

    def __str__(self) -> str:
        return f"[{self.severity}] position {self.position}: {self.message}"
