import random

import pytest

from bsdkit.radixsort import radixsort, sradixsort


def _random_strings(rng, count):
    alphabet = b"abcAB"
    return [
        bytes(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
        for _ in range(count)
    ]


def _fold_table():
    table = list(range(256))
    for c in range(ord("A"), ord("Z") + 1):
        table[c] = c + 32
    return table


@pytest.mark.parametrize("sorter", [radixsort, sradixsort])
def test_small_lists_sorted(sorter):
    data = [b"pear", b"apple", b"fig", b"", b"apricot"]
    assert sorter(data) == sorted(data)


@pytest.mark.parametrize("sorter", [radixsort, sradixsort])
def test_large_lists_match_sorted(sorter):
    rng = random.Random(7)
    data = _random_strings(rng, 500)
    assert sorter(data) == sorted(data)


def test_end_character_truncates_comparison():
    data = [b"b\0zzz", b"a\0zzz", b"ab"]
    result = radixsort(data)
    assert result == [b"a\0zzz", b"ab", b"b\0zzz"]


def test_custom_end_character():
    data = [b"b\nA", b"a\nZ", b"a\x00"]
    result = radixsort(data, None, ord("\n"))
    assert result[0] == b"a\nZ"
    assert result[1] == b"a\x00"
    assert result[2] == b"b\nA"


def test_table_with_end_sorting_last():
    table = list(range(256))
    table[0] = 255
    table[255] = 0
    assert radixsort([b"ab", b"abc"], table, 0) == [b"abc", b"ab"]


def test_case_folding_table_is_stable():
    rng = random.Random(3)
    data = _random_strings(rng, 300)
    result = sradixsort(data, _fold_table(), 0)
    assert result == sorted(data, key=lambda s: s.lower())


def test_small_case_folding_is_stable():
    data = [b"B", b"a", b"b", b"A"]
    assert sradixsort(data, _fold_table(), 0) == [b"a", b"A", b"B", b"b"]


def test_invalid_table_end_character():
    table = list(range(256))
    with pytest.raises(ValueError):
        radixsort([b"x"], table, ord("a"))
    with pytest.raises(ValueError):
        sradixsort([b"x"], table, ord("a"))


def test_table_of_wrong_length():
    with pytest.raises(ValueError):
        radixsort([b"x"], [0] * 10, 0)


def test_none_rejected_by_stable_sort():
    with pytest.raises(TypeError):
        sradixsort(None)


def test_result_is_permutation_of_input():
    rng = random.Random(11)
    data = _random_strings(rng, 120)
    result = radixsort(data)
    assert sorted(result) == sorted(data)
    assert len(result) == len(data)