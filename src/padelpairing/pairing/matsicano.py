"""Matsicano pairing: an Americano phase followed by a permanent Mexicano phase."""

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
from typing import Any, Dict, List, Optional

from padelpairing.constants import (
    AMERICANO_MAX_ROUNDS,
    FORMAT_MATSICANO,
    FORMAT_NAMES,
    PHASE_AMERICANO,
    PHASE_MEXICANO,
)
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match
from padelpairing.pairing.americano import create_americano_matches
from padelpairing.pairing.base import COMPLETE_SUFFIX, PairingFormat
from padelpairing.pairing.mexicano import create_ranked_matches
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


class MatsicanoFormat(PairingFormat):
    """Hybrid format.

    The session starts in the Americano phase. The phase ends for good on the
    first of:

    - the Americano generator returning no matches for a requested round
      (partnerships exhausted); that round is then paired by rank;
    - advancing past a round numbered at or above the phase cap
      (3 rounds for 4 players, 7 rounds for 8 players).

    Afterwards every round is paired by rank and the session never ends on
    its own.
    """

    name = FORMAT_MATSICANO
    display_name = FORMAT_NAMES[FORMAT_MATSICANO]

    def __init__(self, player_count: int, rng: Optional[random.Random] = None):
        super().__init__(player_count, rng)
        self.americano_phase = True

    @property
    def americano_round_cap(self) -> int:
        return AMERICANO_MAX_ROUNDS[self.player_count]

    @property
    def tracks_relationships(self) -> bool:
        return self.americano_phase

    def _generate(self, players: List[Player], round_number: int) -> List[Match]:
        if self.americano_phase:
            matches = create_americano_matches(players, round_number)
            if matches:
                return matches
            self._end_americano_phase(
                f"partnerships exhausted before round {round_number}"
            )
        return create_ranked_matches(players, round_number)

    def on_round_advanced(self, completed_round: int) -> None:
        if self.americano_phase and completed_round >= self.americano_round_cap:
            self._end_americano_phase(f"round cap reached after round {completed_round}")

    def _end_americano_phase(self, reason: str) -> None:
        self.americano_phase = False
        logger.info(f"Matsicano switching to Mexicano phase: {reason}")

    # ========== Phase State ==========

    def get_state(self) -> Dict[str, Any]:
        return {"americano_phase": self.americano_phase}

    def set_state(self, state: Dict[str, Any]) -> None:
        self.americano_phase = bool(state.get("americano_phase", True))

    def reset(self) -> None:
        self.americano_phase = True

    # ========== Display ==========

    @property
    def phase_label(self) -> str:
        return PHASE_AMERICANO if self.americano_phase else PHASE_MEXICANO

    def round_label(self, round_number: int, complete: bool = False) -> str:
        label = f"Round {round_number} - {self.phase_label}"
        return label + COMPLETE_SUFFIX if complete else label

    def pairing_explanation(self, round_number: int) -> str:
        if self.americano_phase:
            return (
                "Americano Phase: Everyone partners with everyone else exactly "
                "once to establish initial rankings."
            )
        return f"Mexicano Phase: {self._rank_pairing_text()}"
