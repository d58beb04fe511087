"""
Main API for the Brave Chain calculator.
Evaluates every play order of a hand and ranks them.
"""

from dataclasses import dataclass, field
from typing import Optional

from .engine.cards import CardKind, Hand, HAND_SIZE, format_hand, to_hand
from .engine.chain import chain_type
from .engine.orderings import evaluate_breakdowns
from .engine.ranking import rank_hands
from .engine.scoring import FormulaConfig, HandStats, StatsBreakdown
from .errors import InvalidCardCode, InvalidLength


@dataclass
class EvaluatedHand:
    """One play order and its stats."""
    hand: Hand
    stats: HandStats

    @property
    def code(self) -> str:
        return format_hand(self.hand)

    def __str__(self):
        return (f"{self.code}|dmg: {self.stats.damage:5.0f}, "
                f"np: {self.stats.np:4.3f}, stars {self.stats.stars:3.1f}")

    def to_dict(self):
        return {"hand": self.code, **self.stats.to_dict()}


@dataclass
class ChainReport:
    """Both rankings for one hand query."""
    cards: Hand
    chain: Optional[CardKind]
    by_damage: list[EvaluatedHand] = field(default_factory=list)
    by_np: list[EvaluatedHand] = field(default_factory=list)
    breakdowns: dict[Hand, StatsBreakdown] = field(default_factory=dict)

    @property
    def best_damage(self) -> EvaluatedHand:
        return self.by_damage[0]

    @property
    def best_np(self) -> EvaluatedHand:
        return self.by_np[0]

    def __str__(self):
        lines = ["By Damage:"]
        lines.extend(str(entry) for entry in self.by_damage)
        lines.append("By NP:")
        lines.extend(str(entry) for entry in self.by_np)
        return "\n".join(lines)

    def to_dict(self):
        return {
            "cards": format_hand(self.cards),
            "chain": self.chain.value if self.chain else None,
            "by_damage": [entry.to_dict() for entry in self.by_damage],
            "by_np": [entry.to_dict() for entry in self.by_np],
        }


class ChainCalculator:
    """
    Main calculator class.

    Usage:
        calc = ChainCalculator()
        report = calc.evaluate_codes("bbq")
        print(report)

        # Or with custom servant numbers:
        calc = ChainCalculator(FormulaConfig(servant_attack=9000))
        report = calc.evaluate([CardKind.ARTS, CardKind.ARTS, CardKind.QUICK])
    """

    def __init__(self, config: FormulaConfig = None):
        self.config = config or FormulaConfig()

    def evaluate(self, cards, verbose: bool = False) -> ChainReport:
        """
        Evaluate and rank every distinct order of `cards`.

        Args:
            cards: Exactly three CardKind values
            verbose: Print each order's breakdown

        Returns:
            ChainReport with damage and NP rankings

        Raises:
            InvalidLength: not exactly three cards
            InvalidCardCode: first element that is not a CardKind
        """
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidLength("".join(str(c) for c in cards), HAND_SIZE, length=len(cards))
        for card in cards:
            if not isinstance(card, CardKind):
                raise InvalidCardCode(card)

        breakdowns = evaluate_breakdowns(cards, self.config)

        if verbose:
            print(f"{format_hand(cards)}: {len(breakdowns)} distinct orders")
            for hand, breakdown in breakdowns.items():
                print(f"  {format_hand(hand)}")
                for line in breakdown.details:
                    print(f"    {line}")

        by_damage, by_np = rank_hands({hand: b.stats for hand, b in breakdowns.items()})

        return ChainReport(
            cards=cards,
            chain=chain_type(cards),
            by_damage=[EvaluatedHand(hand, stats) for hand, stats in by_damage],
            by_np=[EvaluatedHand(hand, stats) for hand, stats in by_np],
            breakdowns=breakdowns,
        )

    def evaluate_codes(self, query: str, verbose: bool = False) -> ChainReport:
        """
        Parse a query like "bbq" and evaluate it.

        Raises:
            ParseError: query is not three a/b/q codes
        """
        return self.evaluate(to_hand(query), verbose=verbose)


# Convenience functions
def evaluate(cards, config: FormulaConfig = None) -> ChainReport:
    """Quick evaluation with a default calculator."""
    return ChainCalculator(config).evaluate(cards)


def evaluate_hand(query: str, config: FormulaConfig = None) -> ChainReport:
    """Quick evaluation of a card-code query."""
    return ChainCalculator(config).evaluate_codes(query)
