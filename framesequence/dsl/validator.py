"""Semantic validator for parsed frame sequences.

Checks a FrameSequence the parser accepted for surprising constructs:
- Stepped ranges whose right bound is never reached
- Steps larger than the whole range
- Ranges with equal bounds
- Parts repeated verbatim
- Expansions above a frame limit
"""

from __future__ import annotations

from framesequence.core.types import ValidationError
from framesequence.dsl.ast_nodes import (
    BinarySequenceSymbol,
    Frame,
    FrameRange,
    FrameSequence,
    PositiveNumber,
)
from framesequence.expander.interpreter import count_frames


def validate_sequence(
    sequence: FrameSequence, max_frames: int | None = None
) -> list[ValidationError]:
    """Run all validation passes on a parsed FrameSequence.

    Returns a list of ValidationError objects (may be empty).
    """
    errors: list[ValidationError] = []

    for part in sequence.parts:
        if isinstance(part, FrameRange):
            _validate_range(part, errors)

    _validate_repeats(sequence, errors)
    if max_frames is not None:
        _validate_size(sequence, max_frames, errors)

    return errors


def _validate_range(frame_range: FrameRange, errors: list[ValidationError]) -> None:
    left = frame_range.left.value
    right = frame_range.right.value

    if left == right:
        errors.append(
            ValidationError(
                message=f"range '{frame_range}' has equal bounds and yields a single frame",
                position=frame_range.position,
                severity="info",
            )
        )
        return

    if not isinstance(frame_range.step, PositiveNumber):
        return

    step = frame_range.step.value
    span = abs(right - left)
    if step > span:
        errors.append(
            ValidationError(
                message=f"step {step} of range '{frame_range}' exceeds its span; only {left} is emitted",
                position=frame_range.step.position,
                severity="warning",
            )
        )
    elif span % step:
        last = left + (span // step) * step * (1 if right > left else -1)
        errors.append(
            ValidationError(
                message=f"range '{frame_range}' stops at {last}; {right} is not reachable with step {step}",
                position=frame_range.right.position,
                severity="warning",
            )
        )


def _validate_repeats(sequence: FrameSequence, errors: list[ValidationError]) -> None:
    seen: set[Frame | FrameRange] = set()
    for part in sequence.parts:
        # Positions differ between repeats; compare the values only
        key = _without_position(part)
        if key in seen:
            errors.append(
                ValidationError(
                    message=f"part '{_describe(part)}' repeats an earlier part",
                    position=part.position,
                    severity="warning",
                )
            )
        seen.add(key)


def _validate_size(
    sequence: FrameSequence, max_frames: int, errors: list[ValidationError]
) -> None:
    total = count_frames(sequence)
    if total > max_frames:
        errors.append(
            ValidationError(
                message=f"sequence expands to {total} frames (limit {max_frames})",
                position=0,
                severity="error",
            )
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _without_position(part: Frame | FrameRange) -> Frame | FrameRange:
    if isinstance(part, Frame):
        return Frame(part.value)
    step = part.step
    if isinstance(step, PositiveNumber):
        step = PositiveNumber(step.value)
    elif step is not None:
        step = BinarySequenceSymbol()
    return FrameRange(Frame(part.left.value), Frame(part.right.value), step)


def _describe(part: Frame | FrameRange) -> str:
    return str(part.value) if isinstance(part, Frame) else str(part)
