"""Dial - a fixed set of units ticked together, smallest first."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tick_chain.counter import ChainedTick
from tick_chain.hands import Hand, TextHand
from tick_chain.pad import hand_text
from tick_chain.types import Direction, OnChange

_DIRECTIONS = ("up", "down")


@dataclass
class Unit:
    """One position of a dial, e.g. the seconds of a clock."""

    hand: Hand
    limit: int
    on_change: OnChange | None = None


class Dial:
    """Runs one ``ChainedTick`` round per step across its units.

    Units are given smallest first. Their limits and order are taken as
    given; a dial does not check that they make a sensible clock.
    """

    def __init__(self, units: Sequence[Unit], direction: Direction = "up") -> None:
        if direction not in _DIRECTIONS:
            raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")
        self._units = list(units)
        self._direction = direction
        self._rounds = 0

    @classmethod
    def from_limits(cls, *limits: int, direction: Direction = "up") -> Dial:
        """Build a dial of in-memory hands, one per limit, smallest first."""
        return cls([Unit(TextHand(), limit) for limit in limits], direction)

    @property
    def units(self) -> list[Unit]:
        return list(self._units)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def rounds(self) -> int:
        return self._rounds

    def step(self) -> ChainedTick:
        chk = ChainedTick()
        for unit in self._units:
            if self._direction == "up":
                chk.up(unit.hand, unit.limit, unit.on_change)
            else:
                chk.down(unit.hand, unit.limit, unit.on_change)
        self._rounds += 1
        return chk

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def text(self, sep: str = ":") -> str:
        """Hand texts joined largest unit first.

        Hands that do not expose their text are shown by value.
        """
        parts = []
        for unit in reversed(self._units):
            text = getattr(unit.hand, "text", None)
            parts.append(text if isinstance(text, str) else hand_text(unit.hand.read()))
        return sep.join(parts)
