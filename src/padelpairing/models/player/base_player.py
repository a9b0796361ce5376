"""A padel player taking part in one session."""

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
from typing import Any, Dict, Iterable, Set


@dataclass
class Player:
    """
    Mutable player entity shared by the pairing formats and the controller.

    Attributes
    ----------
    id : int
        Position of the player in the session, ``0 .. player_count - 1``.
        Assigned once at start and never reused.
    name : str
        Display name.
    total_points : int
        Sum of the team scores awarded to this player so far.
    partnerships : set of int
        Ids of players this player has partnered with. Only written by
        formats that track relationships.
    opponents : set of int
        Ids of players this player has faced. Only written by formats that
        track relationships.

    Notes
    -----
    - Relationship sets are kept symmetric by the result recorder: when A
      records B as partner, B records A.
    - ``copy()`` never shares the relationship sets with the original, so a
      snapshot cannot be corrupted by later live mutation.
    """

    id: int
    name: str
    total_points: int = 0
    partnerships: Set[int] = field(default_factory=set)
    opponents: Set[int] = field(default_factory=set)

    def has_partnered(self, other_id: int) -> bool:
        """Check if this player has already partnered ``other_id``."""
        return other_id in self.partnerships

    def count_encounters(self, opponent_ids: Iterable[int]) -> int:
        """Count how many of ``opponent_ids`` this player has already faced."""
        return sum(1 for opp_id in opponent_ids if opp_id in self.opponents)

    @property
    def is_fresh(self) -> bool:
        """True when the player has no points and no recorded relationships."""
        return self.total_points == 0 and not self.partnerships and not self.opponents

    def copy(self) -> "Player":
        """Return a value copy with independent relationship sets."""
        return Player(
            id=self.id,
            name=self.name,
            total_points=self.total_points,
            partnerships=set(self.partnerships),
            opponents=set(self.opponents),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "total_points": self.total_points,
            "partnerships": sorted(self.partnerships),
            "opponents": sorted(self.opponents),
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.total_points})"
