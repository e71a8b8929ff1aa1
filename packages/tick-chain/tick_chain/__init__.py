"""tick-chain - Chained tick counters for clock and timer displays."""
from __future__ import annotations

from tick_chain.counter import ChainedTick
from tick_chain.dial import Dial, Unit
from tick_chain.hands import Hand, TextHand, parse_hand
from tick_chain.pad import hand_text, limit_width, zero_pad, zero_pad_for_limit
from tick_chain.types import Direction, OnChange, ReadHand, WriteHand

__all__ = [
    "ChainedTick",
    "Dial",
    "Unit",
    "Hand",
    "TextHand",
    "parse_hand",
    "limit_width",
    "zero_pad",
    "zero_pad_for_limit",
    "hand_text",
    "Direction",
    "OnChange",
    "ReadHand",
    "WriteHand",
]
