"""
Stats engine for the Brave Chain calculator.
Turns one hand order into damage, NP gain and star generation.
"""

from dataclasses import dataclass, field
from typing import Optional

from .cards import CardKind, Hand, Position, position_for_index
from .chain import chain_type


# Fixed hits per card; hit count is not configurable
NUMBER_OF_HITS = 2.0

# Share of attack applied per damage point of a card
DAMAGE_SCALE = 0.23

FIRST_BUSTER_BONUS = 0.5
FIRST_ARTS_BONUS = 1.0
BUSTER_CHAIN_BONUS = 0.2
QUICK_CHAIN_BONUS = 0.2
ARTS_CHAIN_NP = 0.2
QUICK_CHAIN_STARS = 10.0

# Extra hit multiplier, without / with a chain
EXTRA_MODIFIER = 2.0
EXTRA_CHAIN_MODIFIER = 3.5


@dataclass(frozen=True)
class HandStats:
    """Damage, NP gain and stars for one card or one hand."""
    damage: float = 0.0
    np: float = 0.0
    stars: float = 0.0

    def to_dict(self) -> dict:
        return {"damage": self.damage, "np": self.np, "stars": self.stars}


# (damage, np, stars) per card kind and position (before bonuses)
CARD_FORMULAS = {
    (CardKind.BUSTER, Position.FIRST): HandStats(1.5, 0.0, 0.10),
    (CardKind.BUSTER, Position.SECOND): HandStats(1.8, 0.0, 0.15),
    (CardKind.BUSTER, Position.THIRD): HandStats(2.1, 0.0, 0.20),
    (CardKind.QUICK, Position.FIRST): HandStats(0.8, 1.0, 0.80),
    (CardKind.QUICK, Position.SECOND): HandStats(0.96, 1.5, 1.30),
    (CardKind.QUICK, Position.THIRD): HandStats(1.12, 2.0, 1.80),
    (CardKind.ARTS, Position.FIRST): HandStats(1.0, 3.0, 0.0),
    (CardKind.ARTS, Position.SECOND): HandStats(1.2, 4.5, 0.0),
    (CardKind.ARTS, Position.THIRD): HandStats(1.4, 6.0, 0.0),
}

# Contribution of the follow-up hit, which has no card
EXTRA_HIT = HandStats(1.0, 1.0, 1.0)


@dataclass
class FormulaConfig:
    """Servant numbers fed into the hand formula."""
    servant_attack: float = 7000.0
    np_rate: float = 0.01
    star_generation: float = 0.1


def card_stats(card: Optional[CardKind], position: Position) -> HandStats:
    """
    Base contribution of a card at a position.

    Passing no card gives the follow-up hit's contribution. A real card
    never sits in the extra slot.
    """
    if card is None:
        return EXTRA_HIT
    if position == Position.EXTRA:
        raise ValueError(f"{card.value} card cannot occupy the extra slot")
    return CARD_FORMULAS[(card, position)]


@dataclass
class StatsBreakdown:
    """Detailed breakdown of how a hand's stats were calculated."""
    hand: Hand
    chain: Optional[CardKind]
    stats: HandStats
    slots: list[HandStats] = field(default_factory=list)
    details: list[str] = field(default_factory=list)


@dataclass
class StatsContext:
    """Running totals passed through the slot fold."""
    damage: float = 0.0
    np: float = 0.0
    stars: float = 0.0
    details: list[str] = field(default_factory=list)

    def add_damage(self, amount: float, source: str = ""):
        self.damage += amount
        if source:
            self.details.append(f"+{amount:.1f} dmg ({source})")

    def add_np(self, amount: float, source: str = ""):
        self.np += amount
        if source:
            self.details.append(f"+{amount:.3f} np ({source})")

    def add_stars(self, amount: float, source: str = ""):
        self.stars += amount
        if source:
            self.details.append(f"+{amount:.2f} stars ({source})")

    @property
    def stats(self) -> HandStats:
        return HandStats(self.damage, self.np, self.stars)


class StatsEngine:
    """
    Calculates hand stats following the card chain rules.

    Each of the four slots (three cards plus the extra hit) adds:
        damage = 0.23 × modifier × ATK × (first buster bonus + card dmg) + ATK × buster chain bonus
        np     = hits × np rate × (first arts bonus + card np)
        stars  = hits × (star gen + quick chain bonus + card stars)
    """

    def __init__(self, config: FormulaConfig = None):
        self.config = config or FormulaConfig()

    def score_hand(self, hand) -> StatsBreakdown:
        attack = self.config.servant_attack
        chain = chain_type(hand)

        first_buster = FIRST_BUSTER_BONUS if hand[0] == CardKind.BUSTER else 0.0
        first_arts = FIRST_ARTS_BONUS if hand[0] == CardKind.ARTS else 0.0
        buster_chain = BUSTER_CHAIN_BONUS if chain == CardKind.BUSTER else 0.0
        quick_chain = QUICK_CHAIN_BONUS if chain == CardKind.QUICK else 0.0

        slots = [card_stats(card, position_for_index(i)) for i, card in enumerate(hand)]
        slots.append(card_stats(None, Position.EXTRA))

        ctx = StatsContext()

        # Chain opening bonuses
        if chain == CardKind.ARTS:
            ctx.add_np(ARTS_CHAIN_NP, "Arts chain")
        if chain == CardKind.QUICK:
            ctx.add_stars(QUICK_CHAIN_STARS, "Quick chain")

        for i, slot in enumerate(slots):
            if i == Position.EXTRA.value:
                modifier = EXTRA_MODIFIER if chain is None else EXTRA_CHAIN_MODIFIER
                source = "extra hit"
            else:
                modifier = 1.0
                source = f"{hand[i].value} #{i + 1}"

            damage = (DAMAGE_SCALE * modifier * attack * (first_buster + slot.damage)
                      + attack * buster_chain)
            np = NUMBER_OF_HITS * self.config.np_rate * (first_arts + slot.np)
            stars = NUMBER_OF_HITS * (self.config.star_generation + quick_chain + slot.stars)

            ctx.add_damage(damage, source)
            ctx.add_np(np, source)
            ctx.add_stars(stars, source)

        return StatsBreakdown(
            hand=tuple(hand),
            chain=chain,
            stats=ctx.stats,
            slots=slots,
            details=ctx.details,
        )


def hand_stats(hand, config: FormulaConfig = None) -> HandStats:
    """Convenience function to get a hand's stats."""
    return StatsEngine(config).score_hand(hand).stats


def stats_breakdown(hand, config: FormulaConfig = None) -> StatsBreakdown:
    """Convenience function to get a detailed stats breakdown."""
    return StatsEngine(config).score_hand(hand)
