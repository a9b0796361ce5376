"""Data model for a rollback snapshot of one round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from padelpairing.models.player import Player
from padelpairing.models.tournament.match import Match


@dataclass
class RoundSnapshot:
    """Full value copy of a session taken before a forward round transition.

    Attributes
    ----------
    round_number : int
        Round number at capture time (1-indexed).
    format_state : dict
        Phase flags of the pairing format, e.g. ``{"americano_phase": True}``.
    players : list of Player
        Player copies, relationship sets included.
    matches : list of Match
        Match copies of the round.
    """

    round_number: int
    format_state: Dict[str, Any] = field(default_factory=dict)
    players: List[Player] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)

    @classmethod
    def capture(
        cls,
        round_number: int,
        format_state: Dict[str, Any],
        players: Iterable[Player],
        matches: Iterable[Match],
    ) -> "RoundSnapshot":
        """Copy live state into a new snapshot.

        Nothing in the snapshot shares storage with the live objects.
        """
        return cls(
            round_number=round_number,
            format_state=dict(format_state),
            players=[p.copy() for p in players],
            matches=[m.copy() for m in matches],
        )

    def restore_players(self) -> List[Player]:
        """Return fresh copies of the stored players."""
        return [p.copy() for p in self.players]

    def restore_matches(self) -> List[Match]:
        """Return fresh copies of the stored matches."""
        return [m.copy() for m in self.matches]
