"""Distribution math for d6 pools — pure functions, no I/O.

A distribution is a list of ``(sum, probability)`` pairs. Canonical form is
sorted ascending by sum with no repeated sums. Nothing here normalizes or
validates probability mass: feed in distributions that already sum to 1.
"""
from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence
from operator import itemgetter
from typing import Any

SIDES = 6

Distribution = list[tuple[int, float]]
Pairs = Sequence[Sequence[Any]]


class InvalidDistributionError(ValueError):
    """Raised when a distribution can't be summarised (e.g. it is empty)."""


def clamp_int(value: Any, minimum: int, maximum: int) -> int:
    """Floor ``value`` and clamp it into ``[minimum, maximum]``.

    Never raises: non-numeric or non-finite input comes back as ``minimum``.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return minimum
    if not math.isfinite(number):
        return minimum
    return min(maximum, max(minimum, math.floor(number)))


def get_base_case() -> Distribution:
    """One die: uniform over 1..SIDES."""
    return [(face, 1 / SIDES) for face in range(1, SIDES + 1)]


def sort_by_value(dist: Pairs) -> Distribution:
    """Return a new distribution sorted ascending by sum (stable)."""
    return [(s, p) for s, p in sorted(dist, key=itemgetter(0))]


def crush_duplicates(dist: Pairs) -> Distribution:
    """Merge entries sharing a sum by adding their probabilities.

    Accepts unsorted input with repeats; the result is canonical.
    """
    result: Distribution = []
    for s, p in sort_by_value(dist):
        if result and result[-1][0] == s:
            result[-1] = (s, result[-1][1] + p)
        else:
            result.append((s, p))
    return result


def calc_prob_add(first: Pairs, second: Pairs) -> Distribution:
    """Convolve two independent distributions: distribution of their sum."""
    acc: dict[int, float] = defaultdict(float)
    for s1, p1 in first:
        for s2, p2 in second:
            acc[s1 + s2] += p1 * p2
    return sort_by_value(acc.items())


def subtract_distributions(minuend: Pairs, subtrahend: Pairs) -> Distribution:
    """Distribution of ``A - B`` for independent A and B.

    Every cross pair is collected first (repeated differences included) and
    merged afterwards.
    """
    pairs = [
        (s1 - s2, p1 * p2)
        for s1, p1 in minuend
        for s2, p2 in subtrahend
    ]
    return crush_duplicates(sort_by_value(pairs))
