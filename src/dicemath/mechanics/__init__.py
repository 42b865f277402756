from __future__ import annotations

from dicemath.mechanics.distribution import (
    SIDES,
    Distribution,
    InvalidDistributionError,
    calc_prob_add,
    clamp_int,
    crush_duplicates,
    get_base_case,
    sort_by_value,
    subtract_distributions,
)
from dicemath.mechanics.dice_cache import DiceSumCache, default_cache, prop_n_dice
from dicemath.mechanics.damage import (
    calculate_average_damage,
    calculate_hit_chance,
    clamp_zeros,
    finish_up,
    full_calculation,
)

__all__ = [
    "SIDES",
    "Distribution",
    "InvalidDistributionError",
    "calc_prob_add",
    "clamp_int",
    "crush_duplicates",
    "get_base_case",
    "sort_by_value",
    "subtract_distributions",
    "DiceSumCache",
    "default_cache",
    "prop_n_dice",
    "calculate_average_damage",
    "calculate_hit_chance",
    "clamp_zeros",
    "finish_up",
    "full_calculation",
]
