import pytest

from framesequence import (
    FrameLimitError,
    FrameSequenceError,
    FrameSequenceSyntaxError,
    NumericOverflowError,
    expand_frame_sequence,
    parse_frame_sequence,
)


@pytest.mark.parametrize(
    "source, frames",
    [
        ("1,2,3,5,8,13", [1, 2, 3, 5, 8, 13]),
        ("10-15", [10, 11, 12, 13, 14, 15]),
        ("10-20@2", [10, 12, 14, 16, 18, 20]),
        ("42-33@3", [42, 39, 36, 33]),
        ("10-20@b", [10, 20, 15, 12, 17, 11, 13, 16, 18, 14, 19]),
        ("80-70@4", [80, 76, 72]),
        ("15-10", [15, 14, 13, 12, 11, 10]),
        ("7-7", [7]),
        ("7-7@3", [7]),
        ("7-7@b", [7]),
        ("-3-1", [-3, -2, -1, 0, 1]),
        ("-1--3", [-1, -2, -3]),
        ("0", [0]),
        ("-0", [0]),
    ],
)
def test_parse_frame_sequence(source, frames):
    assert parse_frame_sequence(source) == frames


def test_duplicates_removed_in_first_occurrence_order():
    assert parse_frame_sequence("5,1-6@b,3,6") == [5, 1, 6, 3, 2, 4]


def test_overlapping_ranges():
    assert parse_frame_sequence("1-5,3-8") == [1, 2, 3, 4, 5, 6, 7, 8]


def test_output_has_no_duplicates():
    frames = parse_frame_sequence("1-100@3,50-1@b,1-100@7,13,13")
    assert len(frames) == len(set(frames))


def test_expand_frame_sequence_counts_raw_frames():
    result = expand_frame_sequence("1-3,2-4")
    assert result.frames == [1, 2, 3, 4]
    assert result.raw_count == 6
    assert result.duplicates_dropped == 2
    assert result.source == "1-3,2-4"


def test_expand_frame_sequence_limit():
    with pytest.raises(FrameLimitError):
        expand_frame_sequence("1-1000", max_frames=10)


@pytest.mark.parametrize("source", ["1-", "1,2,", "10-20@0", "10-20@x", "1 - 2", "1-2 "])
def test_invalid_input_never_yields_frames(source):
    with pytest.raises(FrameSequenceSyntaxError):
        parse_frame_sequence(source)


def test_errors_share_base_class():
    for source in ("1-2@", "99999999999999999999"):
        with pytest.raises(FrameSequenceError):
            parse_frame_sequence(source)
    with pytest.raises(NumericOverflowError):
        parse_frame_sequence("99999999999999999999")


def test_zero_padded_literal_beyond_int_digit_limit():
    assert parse_frame_sequence("0" * 5000 + "1") == [1]


def test_result_to_dict():
    result = expand_frame_sequence("3-1,2")
    assert result.to_dict() == {"source": "3-1,2", "frames": [3, 2, 1], "raw_count": 4}
