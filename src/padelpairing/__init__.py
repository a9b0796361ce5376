"""Padel Pairing: Americano, Mexicano and Matsicano sessions for 4 or 8 players."""

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

from padelpairing.controllers.tournament import (
    LeaderboardRanker,
    RoundController,
    StandingEntry,
    create_session,
)
from padelpairing.models.enums import TournamentState
from padelpairing.models.player import Player, create_players
from padelpairing.models.tournament import Match, TournamentConfig
from padelpairing.pairing import create_pairing_format

__version__ = "0.1.0"

__all__ = [
    "LeaderboardRanker",
    "Match",
    "Player",
    "RoundController",
    "StandingEntry",
    "TournamentConfig",
    "TournamentState",
    "create_pairing_format",
    "create_players",
    "create_session",
]
