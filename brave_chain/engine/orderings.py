"""
Play-order enumeration for a hand of cards.
Generates each distinct ordering once and evaluates it once.
"""

from collections import Counter
from typing import Callable, Iterator

from .cards import CardKind, Hand
from .scoring import FormulaConfig, HandStats, StatsBreakdown, hand_stats, stats_breakdown


def combinations(cards) -> Iterator[Hand]:
    """
    Yield every distinct ordering of `cards`.

    Repeated kinds are picked once per step, so {B, B, Q} yields
    three orderings instead of six.
    """
    # Counter keeps first-appearance order of the kinds
    remaining = Counter(cards)
    total = len(cards)

    def _orderings(prefix: list[CardKind]) -> Iterator[Hand]:
        if len(prefix) == total:
            yield tuple(prefix)
            return
        for kind in remaining:
            if remaining[kind] == 0:
                continue
            remaining[kind] -= 1
            prefix.append(kind)
            yield from _orderings(prefix)
            prefix.pop()
            remaining[kind] += 1

    yield from _orderings([])


def _score_once(cards, score: Callable) -> dict:
    results = {}
    for hand in combinations(cards):
        if hand in results:
            continue
        results[hand] = score(hand)
    return results


def evaluate_orderings(cards, config: FormulaConfig = None) -> dict[Hand, HandStats]:
    """Map each distinct ordering of `cards` to its stats."""
    return _score_once(cards, lambda hand: hand_stats(hand, config))


def evaluate_breakdowns(cards, config: FormulaConfig = None) -> dict[Hand, StatsBreakdown]:
    """Map each distinct ordering of `cards` to its full stats breakdown."""
    return _score_once(cards, lambda hand: stats_breakdown(hand, config))
