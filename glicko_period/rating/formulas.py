"""Glicko rating formulas

Pure functions only. Inputs are not clamped or checked: an opponent with
rd = 0 or a huge rating gap produces whatever IEEE floating point gives
(0.0, 1.0 or inf), as it would with hardware floats.
"""

from __future__ import annotations

import math
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .player import RatedGame, RatedPlayer


Q = math.log(10) / 400  # ≈ 0.0057564627
MAX_RD = 350.0


def g(rd: float) -> float:
    """Opponent weighting; 1.0 for a certain opponent, smaller as rd grows"""
    return 1 / math.sqrt(1 + 3 * Q**2 * rd**2 / math.pi**2)


def e(r: float, r_j: float, rd_j: float) -> float:
    """Expected score of a player rated r against an opponent (r_j, rd_j)"""
    try:
        power = 10 ** (-g(rd_j) * (r - r_j) / 400)
    except OverflowError:
        # Python raises where IEEE pow gives inf
        power = math.inf
    return 1 / (1 + power)


def d2(r: float, games: Iterable[RatedGame]) -> float:
    """Estimated variance of the rating from the games of one period.

    A zero sum (no games, or only games with certain outcomes) gives inf.
    """
    total = 0.0
    for game in games:
        rd_j = game.opponent.rd
        e_j = e(r, game.opponent.rating, rd_j)
        total += g(rd_j) ** 2 * e_j * (1 - e_j)
    information = Q**2 * total
    if information == 0:
        return math.inf
    return 1 / information


def inflate_rd(rd: float, c: float, t: int = 1) -> float:
    """RD after t rating periods without games, capped at MAX_RD"""
    return min(MAX_RD, math.sqrt(rd**2 + c**2 * t))


def expected_score(player: RatedPlayer, opponent: RatedPlayer) -> float:
    """Probability-like score of player against opponent"""
    return e(player.rating, opponent.rating, opponent.rd)
