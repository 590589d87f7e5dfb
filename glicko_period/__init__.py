"""Glicko ratings for batches of games"""

from .rating import (
    IndexedRatedPlayer,
    InvalidPlayerReference,
    Outcome,
    RatedGame,
    RatedPlayer,
    RatingCalculator,
    RatingPeriod,
)
from .tools.diag import RatingConfig, load_config

__version__ = "0.1.0"

__all__ = [
    'RatedPlayer',
    'Outcome',
    'RatedGame',
    'RatingCalculator',
    'RatingPeriod',
    'IndexedRatedPlayer',
    'InvalidPlayerReference',
    'RatingConfig',
    'load_config'
]
