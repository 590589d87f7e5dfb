"""Per-player Glicko update for one rating period"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .formulas import Q, d2, e, g
from .player import RatedGame, RatedPlayer

logger = logging.getLogger(__name__)


class RatingCalculator:
    """Collects one player's games in a period and computes the new rating"""

    def __init__(self, player: RatedPlayer):
        self.player = player
        self._games: List[RatedGame] = []

    @classmethod
    def for_player(cls, player: RatedPlayer) -> RatingCalculator:
        return cls(player)

    @property
    def games(self) -> Tuple[RatedGame, ...]:
        return tuple(self._games)

    def add_game(self, game: RatedGame) -> None:
        self._games.append(game)

    def calculate_new_rating(self) -> RatedPlayer:
        """New rating and RD from the games recorded so far.

        A player without games keeps the starting rating and RD.
        """
        if not self._games:
            return self.player

        r = self.player.rating
        rd = self.player.rd

        improvement = sum(
            g(game.opponent.rd) * (game.outcome.score - e(r, game.opponent.rating, game.opponent.rd))
            for game in self._games
        )
        precision = 1 / rd**2 + 1 / d2(r, self._games)

        new_rating = r + (Q / precision) * improvement
        new_rd = math.sqrt(1 / precision)

        logger.debug("rated %.1f/%.1f -> %.1f/%.1f over %d games",
                     r, rd, new_rating, new_rd, len(self._games))
        return RatedPlayer(rating=new_rating, rd=new_rd)
