"""Rated player, outcome and game values"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .formulas import inflate_rd

if TYPE_CHECKING:
    from ..tools.diag import RatingConfig


@dataclass(frozen=True)
class RatedPlayer:
    """Rating and rating deviation of one player"""
    rating: float
    rd: float

    @classmethod
    def from_rating_and_rd(cls, rating: float, rd: float) -> RatedPlayer:
        return cls(rating=rating, rd=rd)

    @classmethod
    def from_rating_and_rd_after_one_period(cls, rating: float, rd: float, c: float) -> RatedPlayer:
        """Player who sat out one rating period; rd grows by c"""
        return cls(rating=rating, rd=inflate_rd(rd, c))

    @classmethod
    def from_rating_and_rd_and_inactivity(cls, rating: float, rd: float,
                                          c: float, t: int) -> RatedPlayer:
        """Player who sat out t rating periods.

        rd' = min(350, sqrt(rd^2 + c^2 * t))
        """
        return cls(rating=rating, rd=inflate_rd(rd, c, t))

    @classmethod
    def unrated(cls, config: Optional[RatingConfig] = None) -> RatedPlayer:
        """New player with the configured initial rating and RD"""
        if config is None:
            from ..tools.diag import load_config
            config = load_config()
        return cls(rating=config.initial_rating, rd=config.initial_rd)

    def aged(self, t: int = 1, config: Optional[RatingConfig] = None) -> RatedPlayer:
        """This player after t idle periods, using the configured constant"""
        if config is None:
            from ..tools.diag import load_config
            config = load_config()
        return RatedPlayer.from_rating_and_rd_and_inactivity(
            self.rating, self.rd, config.inactivity_constant, t)

    @property
    def lower_bound(self) -> float:
        """95% confidence interval lower bound"""
        return self.rating - 1.96 * self.rd

    @property
    def upper_bound(self) -> float:
        """95% confidence interval upper bound"""
        return self.rating + 1.96 * self.rd

    @property
    def confidence_width(self) -> float:
        """Width of 95% confidence interval"""
        return 3.92 * self.rd  # 2 * 1.96 * rd


class Outcome(Enum):
    """Result of a game from one player's side"""
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    @property
    def score(self) -> float:
        return _SCORES[self]

    def reversed(self) -> Outcome:
        """The same game seen by the opponent"""
        if self is Outcome.WIN:
            return Outcome.LOSS
        if self is Outcome.LOSS:
            return Outcome.WIN
        return Outcome.DRAW


_SCORES = {Outcome.WIN: 1.0, Outcome.DRAW: 0.5, Outcome.LOSS: 0.0}


@dataclass(frozen=True)
class RatedGame:
    """One game against an opponent, with the opponent's pre-period values"""
    outcome: Outcome
    opponent: RatedPlayer
