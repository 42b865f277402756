"""Damage pipeline — pure functions, no I/O.

Attack pool minus defense pool, shifted by flat bonuses, floored at zero,
then summarised as average damage and hit chance.
"""
from __future__ import annotations

import logging
from typing import Any

from dicemath.mechanics.dice_cache import DiceSumCache, default_cache
from dicemath.mechanics.distribution import (
    Distribution,
    InvalidDistributionError,
    Pairs,
    crush_duplicates,
    subtract_distributions,
)
from dicemath.models.result import DamageResult

logger = logging.getLogger(__name__)


def finish_up(dist: Pairs, base_attack_bonus: int, resistance: int) -> Distribution:
    """Shift every sum by ``base_attack_bonus + resistance``.

    Order is preserved, so the result needs no re-sort.
    """
    adjust = base_attack_bonus + resistance
    return [(s + adjust, p) for s, p in dist]


def clamp_zeros(dist: Pairs) -> Distribution:
    """Collapse negative sums onto 0 and merge the mass there."""
    return crush_duplicates([(0 if s < 0 else s, p) for s, p in dist])


def calculate_average_damage(dist: Pairs) -> float:
    """Expected value: sum of ``sum * probability``."""
    average = 0.0
    for s, p in dist:
        average += s * p
    return average


def calculate_hit_chance(dist: Pairs) -> float:
    """Probability of dealing more than zero damage.

    Expects a canonical distribution, so index 0 is the minimum sum. If that
    minimum isn't 0 there is no zero-damage outcome and the result is 1.
    """
    if not dist:
        raise InvalidDistributionError("Cannot compute hit chance of an empty distribution")
    low_sum, low_prob = dist[0]
    if low_sum != 0:
        return 1.0
    return 1 - low_prob


def full_calculation(
    resistance: int,
    base_attack_bonus: int,
    atk_dice: int,
    cover: Any = None,
    *,
    cache: DiceSumCache | None = None,
) -> DamageResult:
    """Run the whole attack-vs-defense pipeline.

    Resistance is applied twice: once as the defense pool, and again as a
    flat bonus in ``finish_up``. ``cover`` is accepted but not used yet.
    """
    if cache is None:
        cache = default_cache

    dist_atk = cache.prop_n_dice(atk_dice)
    logger.debug("Attack pool (%s dice): %s", atk_dice, dist_atk)
    dist_def = cache.prop_n_dice(resistance)
    logger.debug("Defense pool (%s dice): %s", resistance, dist_def)

    adjusted = subtract_distributions(dist_atk, dist_def)
    logger.debug("Attack minus defense: %s", adjusted)
    finished = finish_up(adjusted, base_attack_bonus, resistance)
    logger.debug("After flat bonuses: %s", finished)
    crushed = clamp_zeros(finished)
    logger.debug("Floored at zero: %s", crushed)

    return DamageResult(
        average_damage=calculate_average_damage(crushed),
        hit_chance=calculate_hit_chance(crushed),
        crushed=crushed,
    )
