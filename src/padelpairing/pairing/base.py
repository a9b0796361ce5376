"""Common interface of the pairing formats."""

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

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from padelpairing.constants import PLAYERS_PER_MATCH, PLAYERS_PER_TEAM
from padelpairing.exceptions import InvalidPairingException
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match
from padelpairing.type_hints import FormatState
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)

COMPLETE_SUFFIX = " - Tournament Complete!"


def validate_match_structure(match: Match) -> None:
    """Check that a match has two teams of two and four distinct players.

    Raises:
        InvalidPairingException: If the structure is broken
    """
    for team in (match.team1, match.team2):
        if len(team) != PLAYERS_PER_TEAM or team[0] == team[1]:
            raise InvalidPairingException(
                f"Match {match.id} has an invalid team: {team}"
            )
    if len(set(match.player_ids)) != PLAYERS_PER_MATCH:
        raise InvalidPairingException(
            f"Match {match.id} uses a player twice: {match.team1} vs {match.team2}"
        )


class PairingFormat(ABC):
    """Strategy producing the matches of each round for one format.

    A format instance is selected once at setup and owns the format-specific
    rules: match generation, termination, relationship tracking, phase flags
    and round labelling.
    """

    name: str = ""
    display_name: str = ""

    def __init__(self, player_count: int, rng: Optional[random.Random] = None):
        self.player_count = player_count
        self.rng = rng or random.Random()

    @property
    def matches_per_round(self) -> int:
        return self.player_count // PLAYERS_PER_MATCH

    # ========== Match Generation ==========

    def generate_round_matches(
        self, players: List[Player], round_number: int
    ) -> List[Match]:
        """Generate the matches of a round.

        Args:
            players: All session players, ordered by id
            round_number: The round being created (1-indexed)

        Returns:
            List of matches; empty when the format has no valid round left

        Raises:
            InvalidPairingException: If a generated match is malformed
        """
        matches = self._generate(players, round_number)
        for match in matches:
            validate_match_structure(match)
        logger.debug(
            f"{self.display_name} round {round_number}: "
            f"{[(m.team1, m.team2) for m in matches]}"
        )
        return matches

    @abstractmethod
    def _generate(self, players: List[Player], round_number: int) -> List[Match]:
        """Format-specific match generation."""

    # ========== Format Rules ==========

    def should_end_tournament(self, round_number: int) -> bool:
        """Whether the session ends once ``round_number`` is completed."""
        return False

    @property
    def tracks_relationships(self) -> bool:
        """Whether awarded matches record partnerships and opponents now."""
        return False

    def on_round_advanced(self, completed_round: int) -> None:
        """Hook called when the controller moves past ``completed_round``."""

    # ========== Phase State ==========

    def get_state(self) -> FormatState:
        """Phase flags to store in a round snapshot."""
        return {}

    def set_state(self, state: FormatState) -> None:
        """Restore phase flags from a round snapshot."""

    def reset(self) -> None:
        """Return to the initial phase."""

    # ========== Display ==========

    @property
    def phase_label(self) -> Optional[str]:
        return None

    def round_label(self, round_number: int, complete: bool = False) -> str:
        label = f"Round {round_number}"
        return label + COMPLETE_SUFFIX if complete else label

    def pairing_explanation(self, round_number: int) -> str:
        return ""

    def _rank_pairing_text(self) -> str:
        if self.player_count == 4:
            return "Rank-based pairing: 1st & 3rd place vs 2nd & 4th place"
        return "Rank-based pairing: 1st & 3rd vs 2nd & 4th, 5th & 7th vs 6th & 8th"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(player_count={self.player_count})"
