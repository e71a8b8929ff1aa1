"""Tests for hand parsing and the in-memory TextHand."""

import math

import pytest

from tick_chain import Hand, TextHand, parse_hand


@pytest.mark.parametrize(
    "text,value",
    [
        ("0", 0.0),
        ("05", 5.0),
        ("59", 59.0),
        (" 7 ", 7.0),
        ("12s", 12.0),
        ("2.5", 2.5),
        ("-3", -3.0),
        ("1e2", 100.0),
        (".5", 0.5),
    ],
)
def test_parse_hand_numeric_prefix(text, value):
    """parse_hand reads the leading number and ignores the rest."""
    assert parse_hand(text) == value


@pytest.mark.parametrize("text", ["", "abc", "--", ":", "."])
def test_parse_hand_non_numeric_is_nan(text):
    """Text with no leading number yields NaN rather than raising."""
    assert math.isnan(parse_hand(text))


def test_text_hand_defaults_to_zero():
    hand = TextHand()
    assert hand.text == "0"
    assert hand.read() == 0.0


def test_text_hand_write_replaces_text():
    hand = TextHand("07")
    hand.write("08")
    assert hand.text == "08"
    assert hand.read() == 8.0


def test_text_hand_satisfies_protocol():
    assert isinstance(TextHand(), Hand)


def test_object_without_write_is_not_a_hand():
    class ReadOnly:
        def read(self) -> float:
            return 1.0

    assert not isinstance(ReadOnly(), Hand)
