"""Match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from padelpairing.constants import (
    MATCH_STATUS_COMPLETE,
    MATCH_STATUS_EMPTY,
    MATCH_STATUS_ERROR,
    MATCH_STATUS_INCOMPLETE,
    TEAM_1,
    TEAM_2,
)
from padelpairing.type_hints import Team


def make_match_id(round_number: int, match_index: int) -> str:
    """Build the id of a match from its round and 0-based position."""
    return f"round-{round_number}-match-{match_index}"


@dataclass
class Match:
    """Represents one doubles match of a round.

    Attributes
    ----------
    id : str
        Unique within a round, see :func:`make_match_id`.
    round_number : int
        Round the match belongs to (1-indexed).
    team1 : tuple of int
        Player ids of the first team.
    team2 : tuple of int
        Player ids of the second team.
    team1_score : int
        Current score of the first team.
    team2_score : int
        Current score of the second team.
    points_awarded : bool
        Whether the scores have been applied to player totals.
    team1_points_awarded : int
        Amount actually added to each team1 player. May differ from
        ``team1_score`` until a correction is applied.
    team2_points_awarded : int
        Amount actually added to each team2 player.
    """

    id: str
    round_number: int
    team1: Team
    team2: Team
    team1_score: int = 0
    team2_score: int = 0
    points_awarded: bool = False
    team1_points_awarded: int = 0
    team2_points_awarded: int = 0

    @property
    def total_score(self) -> int:
        return self.team1_score + self.team2_score

    @property
    def player_ids(self) -> Tuple[int, ...]:
        return tuple(self.team1) + tuple(self.team2)

    def team_for(self, player_id: int) -> Optional[str]:
        """Return ``'team1'``/``'team2'`` for a player, or None if not playing."""
        if player_id in self.team1:
            return TEAM_1
        if player_id in self.team2:
            return TEAM_2
        return None

    def partner_of(self, player_id: int) -> int:
        """Return the teammate of ``player_id``.

        Raises:
            ValueError: If the player is not in this match
        """
        for team in (self.team1, self.team2):
            if player_id in team:
                return team[1] if team[0] == player_id else team[0]
        raise ValueError(f"Player {player_id} is not in match {self.id}")

    def opponents_of(self, player_id: int) -> Team:
        """Return the opposing team of ``player_id``."""
        if player_id in self.team1:
            return self.team2
        if player_id in self.team2:
            return self.team1
        raise ValueError(f"Player {player_id} is not in match {self.id}")

    def score_for(self, team: str) -> int:
        return self.team1_score if team == TEAM_1 else self.team2_score

    def set_score(self, team: str, score: int) -> None:
        if team == TEAM_1:
            self.team1_score = score
        else:
            self.team2_score = score

    def is_complete(self, match_points: int) -> bool:
        """True when the two scores add up to the match point target."""
        return self.total_score == match_points

    def status(self, match_points: int) -> str:
        """Display status of the current scores against the target."""
        total = self.total_score
        if total > match_points:
            return MATCH_STATUS_ERROR
        if total == match_points:
            return MATCH_STATUS_COMPLETE
        if total > 0:
            return MATCH_STATUS_INCOMPLETE
        return MATCH_STATUS_EMPTY

    def points_needed(self, match_points: int) -> int:
        """Points still missing before the match reaches the target."""
        return max(0, match_points - self.total_score)

    def copy(self) -> "Match":
        """Return an independent value copy."""
        return Match(
            id=self.id,
            round_number=self.round_number,
            team1=tuple(self.team1),
            team2=tuple(self.team2),
            team1_score=self.team1_score,
            team2_score=self.team2_score,
            points_awarded=self.points_awarded,
            team1_points_awarded=self.team1_points_awarded,
            team2_points_awarded=self.team2_points_awarded,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "points_awarded": self.points_awarded,
            "team1_points_awarded": self.team1_points_awarded,
            "team2_points_awarded": self.team2_points_awarded,
        }
