import functools
import random

from bsdkit.mergesort import mergesort


def test_empty_and_single():
    assert mergesort([]) == []
    assert mergesort([7]) == [7]


def test_small_inputs_sorted():
    for n in range(2, 7):
        data = list(range(n, 0, -1))
        assert mergesort(data) == sorted(data)


def test_random_matches_sorted():
    rng = random.Random(1234)
    for size in (6, 17, 100, 1000):
        data = [rng.randint(-50, 50) for _ in range(size)]
        assert mergesort(data) == sorted(data)


def test_input_is_not_modified():
    data = [3, 1, 2, 9, 8, 7, 6]
    copy = list(data)
    mergesort(data)
    assert data == copy


def test_custom_cmp_descending():
    data = [5, 3, 8, 1, 9, 2, 7]
    result = mergesort(data, lambda a, b: b - a)
    assert result == sorted(data, reverse=True)


def test_stable_for_equal_keys():
    rng = random.Random(99)
    data = [(rng.randint(0, 5), i) for i in range(200)]
    result = mergesort(data, lambda a, b: a[0] - b[0])
    assert result == sorted(data, key=lambda p: p[0])
    for first, second in zip(result, result[1:]):
        if first[0] == second[0]:
            assert first[1] < second[1]


def test_descending_run_with_duplicates_stays_stable():
    data = [(9, "a"), (8, "b"), (8, "c"), (7, "d"), (7, "e"), (1, "f"), (0, "g")]
    result = mergesort(data, lambda a, b: a[0] - b[0])
    assert result == sorted(data, key=lambda p: p[0])


def test_strings_with_cmp_to_key_compatible_function():
    words = ["pear", "Apple", "banana", "apple", "Cherry", "date"]

    def cmp(a, b):
        return (a.lower() > b.lower()) - (a.lower() < b.lower())

    assert mergesort(words, cmp) == sorted(words, key=functools.cmp_to_key(cmp))


def test_accepts_any_iterable():
    assert mergesort(iter([4, 2, 3, 1, 6, 5])) == [1, 2, 3, 4, 5, 6]