"""Width and zero-padding helpers for hand display text."""
from __future__ import annotations

import math
from typing import Callable

from tick_chain.types import Number


def limit_width(limit: Number) -> int:
    """Digits to pad a hand to, from its exclusive limit.

    ``ceil(log10(limit))``: a power-of-ten limit pads to its exponent, so
    ``limit_width(100) == 2`` and ``zero_pad_for_limit(100)(1) == "01"``,
    not ``"001"``. Non-positive limits have no logarithm and give 0 (no
    padding).
    """
    if limit <= 0:
        return 0
    return math.ceil(math.log10(limit))


def hand_text(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def zero_pad(width: int, value: Number) -> str:
    """Last ``width`` characters of ``width`` zeros followed by the value.

    Values wider than ``width`` lose their leading digits:
    ``zero_pad(1, 99) == "9"``.
    """
    text = hand_text(value)
    if width <= 0:
        return text
    return ("0" * width + text)[-width:]


def zero_pad_for_limit(limit: Number) -> Callable[[Number], str]:
    width = limit_width(limit)

    def pad(value: Number) -> str:
        return zero_pad(width, value)

    return pad
