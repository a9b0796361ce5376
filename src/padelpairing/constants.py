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

# --- Constants ---
LOG_LEVEL_ENV_VAR = "PADELPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Session setup
SUPPORTED_PLAYER_COUNTS = (4, 8)
DEFAULT_PLAYER_COUNT = 4
DEFAULT_MATCH_POINTS = 21
PLAYERS_PER_MATCH = 4
PLAYERS_PER_TEAM = 2

# Team keys used by score edits
TEAM_1 = "team1"
TEAM_2 = "team2"
TEAM_KEYS = (TEAM_1, TEAM_2)

# Tournament formats
FORMAT_AMERICANO = "americano"
FORMAT_MEXICANO = "mexicano"
FORMAT_MATSICANO = "matsicano"
DEFAULT_FORMAT = FORMAT_AMERICANO
SUPPORTED_FORMATS = (FORMAT_AMERICANO, FORMAT_MEXICANO, FORMAT_MATSICANO)

FORMAT_NAMES = {
    FORMAT_AMERICANO: "Americano",
    FORMAT_MEXICANO: "Mexicano",
    FORMAT_MATSICANO: "Matsicano",
}

# Americano round cap (and Matsicano Americano-phase cap), keyed by player count.
# choose(4, 2) = 6 partnerships / 2 per round = 3 rounds,
# choose(8, 2) = 28 partnerships / 4 per round = 7 rounds.
AMERICANO_MAX_ROUNDS = {4: 3, 8: 7}

# Phase labels
PHASE_AMERICANO = "Americano Phase"
PHASE_MEXICANO = "Mexicano Phase"

# Match status values (for display)
MATCH_STATUS_EMPTY = "empty"
MATCH_STATUS_INCOMPLETE = "incomplete"
MATCH_STATUS_COMPLETE = "complete"
MATCH_STATUS_ERROR = "error"

# Default display names, "Player A" .. "Player H"
DEFAULT_PLAYER_NAMES = [f"Player {chr(65 + i)}" for i in range(8)]
