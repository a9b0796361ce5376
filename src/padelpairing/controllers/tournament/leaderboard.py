"""Standings calculation for padel sessions.

This module ranks players by total points using competition ranking: tied
totals share a rank and the next distinct total ranks at its position.
"""

# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from padelpairing.models.player import Player
from padelpairing.pairing.mexicano import rank_order


@dataclass(frozen=True)
class StandingEntry:
    """One leaderboard line.

    Attributes
    ----------
    rank : int
        Competition rank (1-indexed).
    player_id : int
        Id of the player.
    name : str
        Display name.
    total_points : int
        Points collected so far.
    tied : bool
        True when at least one other player has the same total.
    """

    rank: int
    player_id: int
    name: str
    total_points: int
    tied: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "player_id": self.player_id,
            "name": self.name,
            "total_points": self.total_points,
            "tied": self.tied,
        }


class LeaderboardRanker:
    """Builds the leaderboard and determines winners.

    Players are ordered by total points, highest first. Players on equal
    totals keep ascending id order, the same order the Mexicano formats use
    when pairing by standing.
    """

    def rank(self, players: Sequence[Player]) -> List[StandingEntry]:
        """Return the leaderboard with competition ranks.

        Args:
            players: All session players

        Returns:
            Standing entries, best first
        """
        ordered = rank_order(players)
        counts = Counter(p.total_points for p in ordered)

        standings = []
        current_rank = 1
        previous_points = None
        for position, player in enumerate(ordered, start=1):
            if previous_points is not None and player.total_points != previous_points:
                current_rank = position
            standings.append(
                StandingEntry(
                    rank=current_rank,
                    player_id=player.id,
                    name=player.name,
                    total_points=player.total_points,
                    tied=counts[player.total_points] > 1,
                )
            )
            previous_points = player.total_points
        return standings

    def winners(self, players: Sequence[Player]) -> List[Player]:
        """Every player on the highest total, in id order."""
        if not players:
            return []
        best = max(p.total_points for p in players)
        return [p for p in sorted(players, key=lambda p: p.id) if p.total_points == best]

    def is_tie_for_first(self, players: Sequence[Player]) -> bool:
        return len(self.winners(players)) > 1
