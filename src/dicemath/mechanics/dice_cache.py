"""Memoized n-dice sum distributions.

Slot ``k`` of the cache holds the distribution for ``k + 1`` dice and is built
as slot ``k - 1`` convolved with the single-die base case. The table only
ever grows.
"""
from __future__ import annotations

import logging
import threading
from typing import Any

from dicemath.mechanics.distribution import Distribution, calc_prob_add, clamp_int, get_base_case

logger = logging.getLogger(__name__)

DEFAULT_WARM_DICE = 50
DEFAULT_MAX_DICE = 1000

Slot = tuple[tuple[int, float], ...]


class DiceSumCache:
    """Append-only table of d6 sum distributions for 1..max_dice dice."""

    def __init__(self, warm_dice: int = DEFAULT_WARM_DICE, max_dice: int = DEFAULT_MAX_DICE):
        self.max_dice = clamp_int(max_dice, 1, DEFAULT_MAX_DICE)
        self._slots: list[Slot] = [tuple(get_base_case())]
        self._lock = threading.Lock()
        self.warm(warm_dice)

    def __len__(self) -> int:
        return len(self._slots)

    def warm(self, dice: Any) -> int:
        """Grow the table to hold ``dice`` dice (clamped). Returns that count."""
        target = clamp_int(dice, 1, self.max_dice)
        if len(self._slots) >= target:
            return target
        with self._lock:
            start = len(self._slots)
            while len(self._slots) < target:
                nxt = calc_prob_add(self._slots[-1], self._slots[0])
                self._slots.append(tuple(nxt))
            if start < target:
                logger.debug("Dice cache grown from %d to %d dice", start, target)
        return target

    def prop_n_dice(self, n: Any) -> Distribution:
        """Distribution of the sum of ``n`` d6.

        ``n == 0`` is certainty of zero and skips the table. Anything else is
        floored and clamped into ``[1, max_dice]``; malformed input means 1 die.
        """
        if n == 0:
            return [(0, 1.0)]
        dice = self.warm(n)
        return list(self._slots[dice - 1])


# Process-wide table, warmed at import so typical pools are lookups.
default_cache = DiceSumCache()


def prop_n_dice(n: Any) -> Distribution:
    """Look up ``n`` dice in the process-wide cache."""
    return default_cache.prop_n_dice(n)
