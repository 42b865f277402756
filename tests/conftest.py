"""Shared fixtures for the dicemath test suite."""
from __future__ import annotations

import pytest

from dicemath.mechanics.dice_cache import DiceSumCache


@pytest.fixture
def fresh_cache() -> DiceSumCache:
    """A cache holding only the single-die base case."""
    return DiceSumCache(warm_dice=1)


@pytest.fixture
def capped_cache() -> DiceSumCache:
    return DiceSumCache(warm_dice=1, max_dice=10)


@pytest.fixture
def two_d6() -> list[tuple[int, float]]:
    return [(s, (6 - abs(s - 7)) / 36) for s in range(2, 13)]
