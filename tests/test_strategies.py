import pytest

from framesequence.dsl.ast_nodes import BinarySequenceSymbol, Frame, FrameRange, PositiveNumber
from framesequence.expander.strategies import (
    binary_sequence,
    contiguous_range,
    expand_range,
    expansion_size,
    stepped_range,
)


def test_contiguous_ascending():
    assert contiguous_range(10, 15) == [10, 11, 12, 13, 14, 15]


def test_contiguous_descending():
    assert contiguous_range(3, -2) == [3, 2, 1, 0, -1, -2]


def test_contiguous_equal_bounds():
    assert contiguous_range(7, 7) == [7]


def test_stepped_ascending_hits_bound():
    assert stepped_range(10, 20, 2) == [10, 12, 14, 16, 18, 20]


def test_stepped_descending_hits_bound():
    assert stepped_range(42, 33, 3) == [42, 39, 36, 33]


def test_stepped_descending_misses_bound():
    assert stepped_range(80, 70, 4) == [80, 76, 72]


def test_stepped_step_larger_than_span():
    assert stepped_range(1, 3, 10) == [1]
    assert stepped_range(3, 1, 10) == [3]


def test_stepped_equal_bounds():
    assert stepped_range(5, 5, 3) == [5]


def test_stepped_rejects_non_positive_step():
    with pytest.raises(ValueError):
        stepped_range(1, 10, 0)


@pytest.mark.parametrize("left, right, step", [(0, 17, 3), (-20, 7, 4), (30, -1, 7), (5, 6, 1)])
def test_stepped_values_are_reachable(left, right, step):
    frames = stepped_range(left, right, step)
    low, high = min(left, right), max(left, right)
    assert frames[0] == left
    assert all(low <= f <= high for f in frames)
    assert all((f - left) % step == 0 for f in frames)
    assert (right in frames) == ((right - left) % step == 0)


def test_binary_reference_order():
    assert binary_sequence(10, 20) == [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]


def test_binary_equal_bounds():
    assert binary_sequence(4, 4) == [4]


def test_binary_adjacent_bounds():
    assert binary_sequence(4, 5) == [4, 5]
    assert binary_sequence(5, 4) == [5, 4]
    assert binary_sequence(2, 0) == [1, 2, 0]


def test_binary_three_frames_includes_middle():
    assert binary_sequence(0, 2) == [0, 2, 1]


def test_binary_descending_reverses_ascending_order():
    assert binary_sequence(20, 10) == [19, 14, 18, 16, 13, 11, 17, 12, 15, 20, 10]


def test_binary_negative_bounds_use_floor_midpoints():
    assert binary_sequence(-3, 0) == [-3, 0, -2, -1]


@pytest.mark.parametrize("left, right", [(0, 1), (0, 100), (-50, 13), (99, -7), (1, 1024), (0, 1000)])
def test_binary_is_permutation_of_range(left, right):
    frames = binary_sequence(left, right)
    if left < right:
        assert frames[:2] == [left, right]
    else:
        assert frames[-2:] == [left, right]
    assert sorted(frames) == list(range(min(left, right), max(left, right) + 1))


def test_binary_power_of_two_levels():
    # 0-8: endpoints, then 4, then 2 and 6, then the odd frames
    assert binary_sequence(0, 8) == [0, 8, 4, 2, 6, 1, 3, 5, 7]


def test_expansion_size():
    assert expansion_size(FrameRange(Frame(10), Frame(20))) == 11
    assert expansion_size(FrameRange(Frame(20), Frame(10), BinarySequenceSymbol())) == 11
    assert expansion_size(FrameRange(Frame(80), Frame(70), PositiveNumber(4))) == 3
    assert expansion_size(FrameRange(Frame(3), Frame(3), PositiveNumber(4))) == 1


def test_expand_range_dispatch():
    assert expand_range(FrameRange(Frame(1), Frame(3))) == [1, 2, 3]
    assert expand_range(FrameRange(Frame(1), Frame(5), PositiveNumber(2))) == [1, 3, 5]
    assert expand_range(FrameRange(Frame(1), Frame(3), BinarySequenceSymbol())) == [1, 3, 2]
