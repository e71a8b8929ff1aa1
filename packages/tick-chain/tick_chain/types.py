"""Shared type aliases for chained tick counters."""
from __future__ import annotations

from typing import Callable, Literal

Number = int | float

ReadHand = Callable[[], Number]
WriteHand = Callable[[str], None]
OnChange = Callable[[], None]

Direction = Literal["up", "down"]
