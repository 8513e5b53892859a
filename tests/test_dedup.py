from framesequence.expander.dedup import remove_duplicates


def test_keeps_first_occurrence_order():
    assert remove_duplicates([3, 1, 3, 2, 1, 4]) == [3, 1, 2, 4]


def test_no_duplicates_is_identity():
    assert remove_duplicates([5, -1, 9]) == [5, -1, 9]


def test_empty():
    assert remove_duplicates([]) == []


def test_accepts_any_iterable():
    assert remove_duplicates(iter([2, 2, 2])) == [2]


def test_survivors_keep_relative_order():
    raw = [10, 20, 15, 10, 12, 20, 11, 15]
    result = remove_duplicates(raw)
    assert len(result) == len(set(raw))
    assert result == sorted(set(raw), key=raw.index)
