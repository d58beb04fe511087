"""
Chain detection.
A chain is a hand whose three cards are all the same kind.
"""

from collections import Counter
from typing import Optional

from .cards import CardKind, HAND_SIZE


def chain_type(hand) -> Optional[CardKind]:
    """Return the kind of a full chain, or None if the hand is mixed."""
    counts = Counter()
    for card in hand:
        counts[card] += 1
        if counts[card] == HAND_SIZE:
            return card
    return None
