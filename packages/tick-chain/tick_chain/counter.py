"""ChainedTick - one tick round across a chain of dial units."""
from __future__ import annotations

import logging
from typing import Callable

from tick_chain.hands import Hand
from tick_chain.pad import zero_pad_for_limit
from tick_chain.types import Number, OnChange, ReadHand, WriteHand

logger = logging.getLogger(__name__)


def _up_overflow(limit: Number) -> Number:
    return 0


def _down_overflow(limit: Number) -> Number:
    # A zero limit is allowed but must not give a negative overflow.
    if limit <= 0:
        return 0
    return limit - 1


def _count_up(hand: Number, should_tick: bool) -> Number:
    return hand + 1 if should_tick else hand


def _count_down(hand: Number, should_tick: bool) -> Number:
    return hand - 1 if should_tick else hand


def _wrap_up(hand: Number, limit: Number, overflow: Number) -> Number:
    return overflow if hand >= limit else hand


def _wrap_down(hand: Number, limit: Number, overflow: Number) -> Number:
    return overflow if hand < 0 else hand


def _notify(on_change: OnChange | None, new_hand: Number, old_hand: Number) -> None:
    if not callable(on_change) or new_hand == old_hand:
        return
    try:
        on_change()
    except Exception:
        logger.debug("on_change callback raised, tick continues", exc_info=True)


class ChainedTick:
    """Ticks dial units smallest first, cascading on wrap-around.

    The chain state starts unset, so the first unit ticked always moves.
    Every tick then adds ``new_hand - overflow`` to it, which leaves zero
    only when every unit ticked so far sits at its overflow value, i.e.
    has just wrapped. Each following unit moves only while the state is
    zero::

        ChainedTick().up(seconds, 60).up(minutes, 60).up(hours, 24)

    Use one instance per tick round.
    """

    def __init__(self) -> None:
        self._chain_state: Number | None = None

    @property
    def chain_state(self) -> Number | None:
        return self._chain_state

    def should_tick(self) -> bool:
        return self._chain_state is None or self._chain_state == 0

    def tick_up(
        self,
        read_hand: ReadHand,
        write_hand: WriteHand,
        limit: Number,
        on_change: OnChange | None = None,
    ) -> None:
        self._tick(read_hand, write_hand, limit, on_change, _up_overflow, _count_up, _wrap_up)

    def tick_down(
        self,
        read_hand: ReadHand,
        write_hand: WriteHand,
        limit: Number,
        on_change: OnChange | None = None,
    ) -> None:
        self._tick(
            read_hand, write_hand, limit, on_change, _down_overflow, _count_down, _wrap_down
        )

    def up(self, hand: Hand, limit: Number, on_change: OnChange | None = None) -> ChainedTick:
        """Stopwatch-style tick of ``hand``; returns self for chaining."""
        self.tick_up(hand.read, hand.write, limit, on_change)
        return self

    def down(self, hand: Hand, limit: Number, on_change: OnChange | None = None) -> ChainedTick:
        """Timer-style tick of ``hand``; wraps from 0 to ``limit - 1``."""
        self.tick_down(hand.read, hand.write, limit, on_change)
        return self

    def _tick(
        self,
        read_hand: ReadHand,
        write_hand: WriteHand,
        limit: Number,
        on_change: OnChange | None,
        overflow_fn: Callable[[Number], Number],
        count_fn: Callable[[Number, bool], Number],
        wrap_fn: Callable[[Number, Number, Number], Number],
    ) -> None:
        overflow = overflow_fn(limit)
        old_hand = read_hand()
        new_hand = wrap_fn(count_fn(old_hand, self.should_tick()), limit, overflow)
        _notify(on_change, new_hand, old_hand)
        write_hand(zero_pad_for_limit(limit)(new_hand))
        # Unset counts as zero; the first tick seeds the state.
        self._chain_state = (self._chain_state or 0) + (new_hand - overflow)
