import pytest

from concmap.helpers import (
    DEFAULT_CAPACITY,
    MAX_RESIZERS,
    MAXIMUM_CAPACITY,
    RESIZE_STAMP_BITS,
    RESIZE_STAMP_SHIFT,
    next_power_of_two,
    number_of_leading_zeros,
    resize_stamp,
)


@pytest.mark.parametrize("x", [0, -1, -100])
def test_next_power_of_two_non_positive_is_one(x):
    assert next_power_of_two(x) == 1


@pytest.mark.parametrize("x", [1, 2, 16, 1024, DEFAULT_CAPACITY])
def test_next_power_of_two_keeps_powers(x):
    assert next_power_of_two(x) == x


def test_next_power_of_two_rounds_up():
    assert next_power_of_two(17) == 32
    assert next_power_of_two(DEFAULT_CAPACITY + 1) == DEFAULT_CAPACITY * 2


@pytest.mark.parametrize("x", [MAXIMUM_CAPACITY, MAXIMUM_CAPACITY + 1, 1 << 40])
def test_next_power_of_two_clamped(x):
    assert next_power_of_two(x) == MAXIMUM_CAPACITY


def test_next_power_of_two_invariant():
    for x in range(1, 5000):
        p = next_power_of_two(x)
        assert p & (p - 1) == 0
        assert x <= p < 2 * x


def test_leading_zeros_of_zero_is_full_width():
    assert number_of_leading_zeros(0) == 32


def test_leading_zeros_of_top_bit():
    assert number_of_leading_zeros(0x80000000) == 0
    assert number_of_leading_zeros(0xFFFFFFFF) == 0


def test_leading_zeros_single_bits():
    for k in range(32):
        assert number_of_leading_zeros(1 << k) == 31 - k


def test_leading_zeros_ignores_bits_above_32():
    assert number_of_leading_zeros((1 << 32) | 1) == number_of_leading_zeros(1)
    assert number_of_leading_zeros(1 << 32) == number_of_leading_zeros(0)


def test_leading_zeros_monotone_in_bit_length():
    for k in range(31):
        low = 1 << k
        high = (1 << (k + 1)) - 1
        assert number_of_leading_zeros(low) == number_of_leading_zeros(high)


def test_resize_stamp_has_marker_bit():
    marker = 1 << (RESIZE_STAMP_BITS - 1)
    for k in range(31):
        stamp = resize_stamp(1 << k)
        assert stamp & marker
        assert stamp - marker == number_of_leading_zeros(1 << k)


def test_resize_stamps_distinct_per_size():
    stamps = {resize_stamp(1 << k) for k in range(31)}
    assert len(stamps) == 31


def test_resize_stamp_of_default_capacity():
    assert resize_stamp(DEFAULT_CAPACITY) == 0x8000 | 27


def test_resize_stamp_shifted_is_negative_as_int32():
    stamp = resize_stamp(DEFAULT_CAPACITY) << RESIZE_STAMP_SHIFT
    assert stamp == (0x8000 | 27) << 16
    assert stamp & 0x80000000 == 0x80000000
    assert MAX_RESIZERS == (1 << RESIZE_STAMP_SHIFT) - 1