"""TournamentConfig data class."""

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
from typing import Any, Dict, Optional

from padelpairing.constants import (
    DEFAULT_FORMAT,
    DEFAULT_MATCH_POINTS,
    DEFAULT_PLAYER_COUNT,
)
from padelpairing.exceptions import InvalidConfigurationException
from padelpairing.utils.validation import (
    validate_format_name,
    validate_player_count,
    validate_positive_integer,
)


@dataclass
class TournamentConfig:
    """Session configuration settings.

    Attributes
    ----------
    name : str
        Session name, for display only.
    player_count : int
        Number of players, 4 or 8.
    match_points : int
        Points played per match; both team scores must add up to it.
    tournament_format : str
        Pairing format: "americano", "mexicano" or "matsicano".
    seed : int or None
        Seed for the random first Mexicano round. None draws from the OS.
    """

    name: str = "Padel Session"
    player_count: int = DEFAULT_PLAYER_COUNT
    match_points: int = DEFAULT_MATCH_POINTS
    tournament_format: str = DEFAULT_FORMAT
    seed: Optional[int] = None

    def validate(self) -> "TournamentConfig":
        """Normalize the settings in place.

        Raises:
            InvalidConfigurationException: If any setting is invalid
        """
        count = validate_player_count(self.player_count)
        if not count:
            raise InvalidConfigurationException(count.error_message)

        points = validate_positive_integer(self.match_points, "Match points")
        if not points:
            raise InvalidConfigurationException(points.error_message)

        fmt = validate_format_name(self.tournament_format)
        if not fmt:
            raise InvalidConfigurationException(fmt.error_message)

        self.player_count = count.sanitized_value
        self.match_points = points.sanitized_value
        self.tournament_format = fmt.sanitized_value
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "player_count": self.player_count,
            "match_points": self.match_points,
            "tournament_format": self.tournament_format,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Padel Session"),
            player_count=data.get("player_count", DEFAULT_PLAYER_COUNT),
            match_points=data.get("match_points", DEFAULT_MATCH_POINTS),
            tournament_format=data.get("tournament_format", DEFAULT_FORMAT),
            seed=data.get("seed"),
        ).validate()
