import pytest

from bsdkit.timeconv import (
    int_to_time,
    long_to_time,
    time32_to_time,
    time64_to_time,
    time_to_int,
    time_to_long,
    time_to_time32,
    time_to_time64,
)

INT32_SAMPLES = [0, 1, -1, 1234567890, -(2**31), 2**31 - 1]
INT64_SAMPLES = INT32_SAMPLES + [2**40, -(2**40), 2**63 - 1, -(2**63)]


@pytest.mark.parametrize("value", INT32_SAMPLES)
def test_time32_round_trip(value):
    assert time_to_time32(time32_to_time(value)) == value
    assert time32_to_time(value) == value


@pytest.mark.parametrize("value", INT64_SAMPLES)
def test_time64_round_trip(value):
    assert time_to_time64(time64_to_time(value)) == value


@pytest.mark.parametrize("value", INT64_SAMPLES)
def test_long_round_trip(value):
    assert long_to_time(time_to_long(value)) == value


@pytest.mark.parametrize("value", INT32_SAMPLES)
def test_int_round_trip(value):
    assert int_to_time(time_to_int(value)) == value


def test_time_to_time32_wraps_past_2038():
    assert time_to_time32(2**31) == -(2**31)


def test_time_to_time32_chops_high_bits():
    assert time_to_time32(2**32 + 5) == 5


def test_time_to_int_matches_time32():
    for value in INT64_SAMPLES:
        assert time_to_int(value) == time_to_time32(value)


def test_time_to_long_keeps_64_bits():
    assert time_to_long(2**40) == 2**40


def test_time64_to_time_wraps_out_of_range():
    assert time64_to_time(2**63) == -(2**63)