"""Tests for width and zero-padding helpers."""

import math

import pytest

from tick_chain import hand_text, limit_width, zero_pad, zero_pad_for_limit


def test_zero_pad_single_digit():
    """zero_pad(2, 1) pads to '01'."""
    assert zero_pad(2, 1) == "01"


def test_zero_pad_for_limit_100():
    """A limit of 100 pads to two digits, not three."""
    assert zero_pad_for_limit(100)(1) == "01"


def test_zero_pad_for_limit_60():
    assert zero_pad_for_limit(60)(1) == "01"


@pytest.mark.parametrize("limit", [1, 2, 9, 10, 11, 24, 59, 60, 99, 100, 101, 1000, 86400])
def test_limit_width_is_ceil_log10(limit):
    """limit_width matches ceil(log10(limit)) for positive limits."""
    assert limit_width(limit) == math.ceil(math.log10(limit))


@pytest.mark.parametrize(
    "limit,width",
    [(1, 0), (10, 1), (24, 2), (60, 2), (100, 2), (101, 3), (1000, 3)],
)
def test_limit_width_values(limit, width):
    assert limit_width(limit) == width


def test_limit_width_non_positive_is_zero():
    """Zero and negative limits give no padding instead of raising."""
    assert limit_width(0) == 0
    assert limit_width(-5) == 0


def test_zero_pad_truncates_wide_values():
    """A width narrower than the value keeps only the trailing digits."""
    assert zero_pad(1, 99) == "9"
    assert zero_pad(2, 123) == "23"


def test_zero_pad_wider_width():
    assert zero_pad(3, 99) == "099"
    assert zero_pad(4, 7) == "0007"


def test_zero_pad_zero_width_returns_text():
    assert zero_pad(0, 42) == "42"
    assert zero_pad(-1, 42) == "42"


def test_zero_pad_float_hands():
    """Integral floats print like integers."""
    assert zero_pad(2, 5.0) == "05"
    assert zero_pad_for_limit(60)(0.0) == "00"


def test_hand_text():
    assert hand_text(5) == "5"
    assert hand_text(5.0) == "5"
    assert hand_text(2.5) == "2.5"
    assert hand_text(-1.0) == "-1"


def test_zero_pad_for_limit_one():
    """A limit of 1 has width 0, so values print unpadded."""
    assert zero_pad_for_limit(1)(0) == "0"


def test_zero_pad_for_limit_ten():
    assert zero_pad_for_limit(10)(9) == "9"
    assert zero_pad_for_limit(10)(0) == "0"
