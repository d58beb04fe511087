"""
Brave Chain calculation engine components.
"""

from .cards import CardKind, Position, Hand, HAND_SIZE, REAL_POSITIONS, CARD_CODES, position_for_index, to_hand
from .chain import chain_type
from .scoring import StatsEngine, StatsBreakdown, FormulaConfig, HandStats, card_stats, hand_stats, stats_breakdown
from .orderings import combinations, evaluate_orderings, evaluate_breakdowns
from .ranking import rank_by_damage, rank_by_np, rank_hands
