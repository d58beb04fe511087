"""
Card vocabulary for the Brave Chain calculator.
Defines card kinds, hand positions and the card-code parser.
"""

from enum import Enum
from typing import Optional

from ..errors import InvalidCardCode, InvalidLength


class CardKind(Enum):
    QUICK = "Quick"
    ARTS = "Arts"
    BUSTER = "Buster"

    @property
    def code(self) -> str:
        """One-letter display code."""
        return self.value[0]

    def __str__(self) -> str:
        return self.code


class Position(Enum):
    """Slot a card occupies when the hand resolves."""
    FIRST = 0
    SECOND = 1
    THIRD = 2
    EXTRA = 3      # Follow-up hit after the three played cards


HAND_SIZE = 3

# Positions a played card can occupy, in play order
REAL_POSITIONS = (Position.FIRST, Position.SECOND, Position.THIRD)

# Hand is a fixed-size play order: (first, second, third)
Hand = tuple[CardKind, CardKind, CardKind]

CARD_CODES = {
    "a": CardKind.ARTS,
    "b": CardKind.BUSTER,
    "q": CardKind.QUICK,
}


def position_for_index(index: int) -> Position:
    """Position of the card at `index` in a hand."""
    if not 0 <= index < HAND_SIZE:
        raise IndexError(f"No hand position for index {index}")
    return REAL_POSITIONS[index]


def format_hand(hand) -> str:
    return "".join(card.code for card in hand)


def translate(code: Optional[str]) -> CardKind:
    """Map a single card code (case-insensitive) to its kind."""
    kind = CARD_CODES.get(code.lower()) if code else None
    if kind is None:
        raise InvalidCardCode(code)
    return kind


def to_hand(query: str) -> Hand:
    """
    Parse a three-letter query such as "bbq" into a hand.

    Raises:
        InvalidLength: query is not exactly three characters
        InvalidCardCode: first character that is not a/b/q
    """
    if len(query) != HAND_SIZE:
        raise InvalidLength(query, HAND_SIZE)
    return tuple(translate(c) for c in query)
