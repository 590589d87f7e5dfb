"""Rating period: players, their games and the batch update"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .calculator import RatingCalculator
from .player import Outcome, RatedGame, RatedPlayer
from ..tools.diag import log_event

logger = logging.getLogger(__name__)


class InvalidPlayerReference(ValueError):
    """Handle was not issued by this rating period"""


@dataclass(frozen=True)
class IndexedRatedPlayer:
    """Handle to a registered player.

    rating and rd are a snapshot taken at registration.
    """
    rating: float
    rd: float
    index: int
    _period: object = field(repr=False, compare=False)

    def without_index(self) -> RatedPlayer:
        return RatedPlayer(rating=self.rating, rd=self.rd)


@dataclass
class _Entry:
    handle: IndexedRatedPlayer
    calculator: RatingCalculator


class RatingPeriod:
    """Batch of games rated together.

    Use one instance per period: register players, record results, then
    call calculate_new_ratings().
    """

    def __init__(self):
        self._token = object()
        self._entries: List[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def players(self) -> Tuple[IndexedRatedPlayer, ...]:
        return tuple(entry.handle for entry in self._entries)

    def add_player(self, player: RatedPlayer) -> IndexedRatedPlayer:
        handle = IndexedRatedPlayer(
            rating=player.rating,
            rd=player.rd,
            index=len(self._entries),
            _period=self._token,
        )
        self._entries.append(_Entry(handle, RatingCalculator.for_player(player)))
        logger.debug("registered player %d at %.1f/%.1f", handle.index, player.rating, player.rd)
        return handle

    def add_result(self, winner: IndexedRatedPlayer, loser: IndexedRatedPlayer) -> None:
        self.add_game(winner, loser, Outcome.WIN)

    def add_draw(self, player1: IndexedRatedPlayer, player2: IndexedRatedPlayer) -> None:
        self.add_game(player1, player2, Outcome.DRAW)

    def add_game(self, player: IndexedRatedPlayer, opponent: IndexedRatedPlayer,
                 outcome: Outcome) -> None:
        """Record outcome for player and the reverse outcome for opponent"""
        player_calc = self._calculator(player)
        opponent_calc = self._calculator(opponent)
        player_calc.add_game(RatedGame(outcome=outcome, opponent=opponent.without_index()))
        opponent_calc.add_game(RatedGame(outcome=outcome.reversed(), opponent=player.without_index()))
        logger.debug("recorded %s for player %d vs %d", outcome.value, player.index, opponent.index)

    def calculate_new_ratings(self) -> List[RatedPlayer]:
        """New ratings for every player, in registration order"""
        results = [entry.calculator.calculate_new_rating() for entry in self._entries]
        log_event(
            "rating_period",
            "ratings_calculated",
            players=len(results),
            games=sum(len(entry.calculator.games) for entry in self._entries) // 2,
        )
        return results

    def _calculator(self, handle: IndexedRatedPlayer) -> RatingCalculator:
        if not isinstance(handle, IndexedRatedPlayer) or handle._period is not self._token:
            raise InvalidPlayerReference(f"player handle {handle!r} belongs to another rating period")
        if not 0 <= handle.index < len(self._entries):
            raise InvalidPlayerReference(f"player index {handle.index} out of range")
        return self._entries[handle.index].calculator
