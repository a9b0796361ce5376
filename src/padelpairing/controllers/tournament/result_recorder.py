"""Score entry and point awarding for padel sessions.

This module handles recording match scores with proper validation, awarding
points to players, and correcting points after they were awarded.
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

from typing import Any, Dict, Iterable, List

from padelpairing.constants import TEAM_1, TEAM_2
from padelpairing.exceptions import (
    DuplicateResultException,
    InvalidPlayerDataException,
    RoundValidationException,
)
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import (
    validate_score_strict,
    validate_team_key_strict,
)

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match scores.

    This class is responsible for:
    - Validating score edits and filling in the complementary score
    - Checking that a round is ready to be completed
    - Awarding points exactly once per match
    - Recording partnerships and opponents while a format tracks them
    - Correcting player totals when an awarded score is edited
    """

    def update_score(
        self, match: Match, team: str, score: Any, match_points: int
    ) -> bool:
        """Apply a validated score edit to a match.

        When the score changes, the other team's score is set to the
        remaining points of the match.

        Args:
            match: Match being edited
            team: 'team1' or 'team2'
            score: New score for ``team``, interpreted as an integer
            match_points: Points played per match

        Returns:
            True if the scores changed

        Raises:
            InvalidResultException: If the team key is unknown
            InvalidScoreException: If the score is not an integer in range
        """
        team = validate_team_key_strict(team)
        new_score = validate_score_strict(score, match_points)

        old_score = match.score_for(team)
        if new_score == old_score:
            logger.debug(f"Match {match.id}: {team} score unchanged at {new_score}")
            return False

        match.set_score(team, new_score)
        other_team = TEAM_2 if team == TEAM_1 else TEAM_1
        match.set_score(other_team, match_points - new_score)

        logger.debug(
            f"Match {match.id}: scores now {match.team1_score}-{match.team2_score}"
        )
        return True

    def validate_round(self, matches: Iterable[Match], match_points: int) -> None:
        """Check that every match adds up to the match point target.

        Raises:
            RoundValidationException: Listing the matches that do not
        """
        invalid = [m for m in matches if not m.is_complete(match_points)]
        if invalid:
            details = ", ".join(
                f"{m.id} ({m.team1_score}-{m.team2_score})" for m in invalid
            )
            raise RoundValidationException(
                f"Please ensure all matches have scores that total exactly "
                f"{match_points} points: {details}",
                invalid_match_ids=[m.id for m in invalid],
            )

    def award_round(
        self,
        matches: Iterable[Match],
        players: List[Player],
        track_relationships: bool,
    ) -> int:
        """Award points for every match not yet awarded.

        Returns:
            Number of matches awarded by this call
        """
        awarded = 0
        for match in matches:
            if match.points_awarded:
                continue
            self.award_points_for_match(match, players, track_relationships)
            awarded += 1
        return awarded

    def award_points_for_match(
        self, match: Match, players: List[Player], track_relationships: bool
    ) -> None:
        """Add a match's scores to its players and mark it awarded.

        Args:
            match: Match with final scores
            players: All session players
            track_relationships: Record partners and opponents as well

        Raises:
            DuplicateResultException: If the match was already awarded
        """
        if match.points_awarded:
            raise DuplicateResultException(f"Points for {match.id} already awarded")

        by_id = self._players_by_id(players, match)

        match.team1_points_awarded = match.team1_score
        match.team2_points_awarded = match.team2_score

        for player_id in match.player_ids:
            player = by_id[player_id]
            if match.team_for(player_id) == TEAM_1:
                player.total_points += match.team1_points_awarded
            else:
                player.total_points += match.team2_points_awarded

            if track_relationships:
                player.partnerships.add(match.partner_of(player_id))
                player.opponents.update(match.opponents_of(player_id))

        match.points_awarded = True
        logger.debug(
            f"Awarded {match.id}: {match.team1} +{match.team1_points_awarded}, "
            f"{match.team2} +{match.team2_points_awarded}"
        )

    def correct_awarded_match(
        self,
        match: Match,
        new_team1_score: int,
        new_team2_score: int,
        players: List[Player],
    ) -> None:
        """Replace the points a match already gave its players.

        The previously awarded amounts are subtracted and the new scores added.
        Partnerships and opponents are left untouched.
        """
        by_id = self._players_by_id(players, match)

        for player_id in match.team1:
            by_id[player_id].total_points += new_team1_score - match.team1_points_awarded
        for player_id in match.team2:
            by_id[player_id].total_points += new_team2_score - match.team2_points_awarded

        logger.debug(
            f"Corrected {match.id}: "
            f"{match.team1_points_awarded}-{match.team2_points_awarded} -> "
            f"{new_team1_score}-{new_team2_score}"
        )
        match.team1_points_awarded = new_team1_score
        match.team2_points_awarded = new_team2_score

    @staticmethod
    def _players_by_id(players: List[Player], match: Match) -> Dict[int, Player]:
        by_id = {p.id: p for p in players}
        missing = [pid for pid in match.player_ids if pid not in by_id]
        if missing:
            logger.error(f"Cannot find players {missing} for match {match.id}")
            raise InvalidPlayerDataException(
                f"Match {match.id} references unknown players: {missing}"
            )
        return by_id
