"""Range expansion strategies.

Pure functions turning the bounds of one parsed range into frame numbers:

- contiguous_range: every frame between the bounds, in the bounds' direction
- stepped_range: every step-th frame starting at the left bound
- binary_sequence: every frame, ordered coarse-to-fine by repeated bisection
  so that a partial render already covers the whole range
"""

from __future__ import annotations

from framesequence.dsl.ast_nodes import BinarySequenceSymbol, FrameRange, PositiveNumber


def contiguous_range(left: int, right: int) -> list[int]:
    """All frames from left to right inclusive, descending if left > right."""
    if left <= right:
        return list(range(left, right + 1))
    return list(range(left, right - 1, -1))


def stepped_range(left: int, right: int, step: int) -> list[int]:
    """Frames left, left±step, ... never passing right.

    The right bound is only included when a whole number of steps lands on it.
    """
    if step <= 0:
        raise ValueError(f"Step must be positive, got {step}")
    if left <= right:
        return list(range(left, right + 1, step))
    return list(range(left, right - 1, -step))


def binary_sequence(left: int, right: int) -> list[int]:
    """All frames between the bounds in binary subdivision order.

    An ascending range starts with left then right, followed by the
    midpoints of each level of bisection:

        binary_sequence(10, 20) == [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]

    A descending range is the ascending order of the swapped bounds, reversed,
    so it ends with left, right.
    """
    if left == right:
        return [left]
    if left > right:
        return list(reversed(_bisect(right, left)))
    return _bisect(left, right)


def _bisect(low: int, high: int) -> list[int]:
    total = high - low + 1
    sequence = [low, high]
    result = [low, high]

    while len(sequence) < total:
        next_level: list[int] = []
        for start, end in zip(sequence, sequence[1:]):
            mid = (start + end) // 2
            if start < mid:
                result.append(mid)
                next_level.extend((start, mid))
            else:
                next_level.append(start)
        next_level.append(sequence[-1])
        sequence = next_level

    return result


def expansion_size(frame_range: FrameRange) -> int:
    """Number of frames a range expands to, without expanding it."""
    span = abs(frame_range.right.value - frame_range.left.value)
    if isinstance(frame_range.step, PositiveNumber):
        return span // frame_range.step.value + 1
    return span + 1


def expand_range(frame_range: FrameRange) -> list[int]:
    """Dispatch a parsed range to the strategy its step selects."""
    left = frame_range.left.value
    right = frame_range.right.value
    step = frame_range.step

    if isinstance(step, BinarySequenceSymbol):
        return binary_sequence(left, right)
    if isinstance(step, PositiveNumber):
        return stepped_range(left, right, step.value)
    return contiguous_range(left, right)
