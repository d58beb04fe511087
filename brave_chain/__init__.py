"""
Brave Chain Calculator
"""

from .engine.cards import CardKind, Position, Hand, to_hand
from .engine.chain import chain_type
from .engine.scoring import FormulaConfig, HandStats, StatsBreakdown, card_stats, hand_stats, stats_breakdown
from .engine.orderings import combinations, evaluate_orderings, evaluate_breakdowns
from .calculator import ChainCalculator, ChainReport, EvaluatedHand, evaluate, evaluate_hand
from .errors import ParseError, InvalidLength, InvalidCardCode

__version__ = "0.1.0"
