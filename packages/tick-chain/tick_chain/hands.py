"""Hand protocol and an in-memory display cell."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def parse_hand(text: str) -> float:
    """Read the numeric value shown by a display.

    Takes the longest leading decimal number and ignores whatever follows it,
    so ``"05" -> 5.0`` and ``"12s" -> 12.0``. Text with no leading number
    yields NaN rather than raising; ticking a NaN hand is not meaningful.
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return float("nan")
    return float(match.group(1))


@runtime_checkable
class Hand(Protocol):
    """Something that displays one unit of a dial.

    ``read`` returns the value currently shown and ``write`` replaces the
    shown text. Both are called once per tick, synchronously.
    """

    def read(self) -> float:
        ...

    def write(self, text: str) -> None:
        ...


@dataclass
class TextHand:
    """Display cell holding its text in memory."""

    text: str = "0"

    def read(self) -> float:
        return parse_hand(self.text)

    def write(self, text: str) -> None:
        self.text = text
