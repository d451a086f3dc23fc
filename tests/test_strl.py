import pytest

from bsdkit.strl import strlcat, strlcpy, strnstr


def test_strlcpy_fits():
    src = "hello"
    assert strlcpy(src, 10) == (src, len(src))


def test_strlcpy_exact_boundary_truncates_last_char():
    src = "hello"
    result, length = strlcpy(src, len(src))
    assert length == len(src)
    assert result == src[:-1]


def test_strlcpy_truncates():
    src = "a fairly long string"
    result, length = strlcpy(src, 3)
    assert length == len(src)
    assert len(result) == 2
    assert src.startswith(result)


def test_strlcpy_size_zero():
    src = "abc"
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_stops_at_nul():
    result, length = strlcpy("ab\0cd", 10)
    assert result == "ab"
    assert length == len(result)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_fits():
    assert strlcat("foo", "bar", 10) == ("foobar", 6)


def test_strlcat_truncates():
    dst, src = "foo", "bar"
    result, length = strlcat(dst, src, 5)
    assert length == len(dst) + len(src)
    assert len(result) == 4
    assert result.startswith(dst)
    assert length >= 5


def test_strlcat_dst_fills_buffer():
    dst, src = "foobar", "x"
    size = 3
    result, length = strlcat(dst, src, size)
    assert result == dst
    assert length == size + len(src)


def test_strlcat_empty_dst_matches_strlcpy():
    src = "something"
    for size in range(1, 12):
        assert strlcat("", src, size) == strlcpy(src, size)


def test_strnstr_found_matches_str_find():
    s = "Foo Bar Baz"
    assert strnstr(s, "Bar", len(s)) == s.find("Bar")


def test_strnstr_match_must_fit_in_limit():
    s = "Foo Bar Baz"
    end = s.find("Bar") + len("Bar")
    assert strnstr(s, "Bar", end) == s.find("Bar")
    assert strnstr(s, "Bar", end - 1) is None


def test_strnstr_not_found():
    assert strnstr("Foo Bar Baz", "Qux", 11) is None


def test_strnstr_empty_find():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_stops_at_nul():
    assert strnstr("ab\0cd", "cd", 5) is None


def test_strnstr_zero_limit():
    assert strnstr("abc", "a", 0) is None