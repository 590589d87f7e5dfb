"""Glicko rating engine: formulas, per-player calculator and rating periods"""

from .player import RatedPlayer, Outcome, RatedGame
from .calculator import RatingCalculator
from .period import RatingPeriod, IndexedRatedPlayer, InvalidPlayerReference

__all__ = [
    'RatedPlayer',
    'Outcome',
    'RatedGame',
    'RatingCalculator',
    'RatingPeriod',
    'IndexedRatedPlayer',
    'InvalidPlayerReference'
]
