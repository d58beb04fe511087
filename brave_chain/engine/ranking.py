"""
Ranking of evaluated hand orders.
"""

from functools import cmp_to_key
from typing import Callable

from .scoring import HandStats


def _descending(a: float, b: float) -> int:
    # NaN compares false both ways and is treated as a tie
    if a < b:
        return 1
    if a > b:
        return -1
    return 0


def rank_by(entries, metric: Callable[[HandStats], float]) -> list[tuple]:
    """Sort (hand, stats) pairs by `metric`, highest first. Stable."""
    key = cmp_to_key(lambda x, y: _descending(metric(x[1]), metric(y[1])))
    return sorted(entries, key=key)


def rank_by_damage(evaluations) -> list[tuple]:
    return rank_by(_pairs(evaluations), lambda s: s.damage)


def rank_by_np(evaluations) -> list[tuple]:
    return rank_by(_pairs(evaluations), lambda s: s.np)


def rank_hands(evaluations: dict) -> tuple[list[tuple], list[tuple]]:
    """
    Rank evaluations by damage and by NP gain.

    The NP ranking is sorted from the damage ranking, so hands with equal
    NP stay in damage order.
    """
    by_damage = rank_by_damage(evaluations)
    by_np = rank_by_np(by_damage)
    return by_damage, by_np


def _pairs(evaluations) -> list[tuple]:
    if isinstance(evaluations, dict):
        return list(evaluations.items())
    return list(evaluations)
