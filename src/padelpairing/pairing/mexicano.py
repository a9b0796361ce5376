"""Mexicano pairing: random first round, then pairing by standing."""

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
from typing import List, Optional, Sequence

from padelpairing.constants import FORMAT_MEXICANO, FORMAT_NAMES, PLAYERS_PER_MATCH
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match, make_match_id
from padelpairing.pairing.base import PairingFormat


def rank_order(players: Sequence[Player]) -> List[Player]:
    """Sort players by total points, highest first.

    Equal totals keep ascending id order.
    """
    return sorted(players, key=lambda p: (-p.total_points, p.id))


def create_ranked_matches(
    players: Sequence[Player], round_number: int
) -> List[Match]:
    """Pair by standing: 1st & 3rd vs 2nd & 4th, 5th & 7th vs 6th & 8th."""
    ordered = [p.id for p in rank_order(players)]
    matches = []
    for index, start in enumerate(range(0, len(ordered), PLAYERS_PER_MATCH)):
        r1, r2, r3, r4 = ordered[start : start + PLAYERS_PER_MATCH]
        matches.append(
            Match(
                id=make_match_id(round_number, index),
                round_number=round_number,
                team1=(r1, r3),
                team2=(r2, r4),
            )
        )
    return matches


def create_random_matches(
    players: Sequence[Player], round_number: int, rng: random.Random
) -> List[Match]:
    """Shuffle the ids and pair consecutive slots: [0,1] vs [2,3], ..."""
    shuffled = [p.id for p in players]
    rng.shuffle(shuffled)
    matches = []
    for index, start in enumerate(range(0, len(shuffled), PLAYERS_PER_MATCH)):
        a, b, c, d = shuffled[start : start + PLAYERS_PER_MATCH]
        matches.append(
            Match(
                id=make_match_id(round_number, index),
                round_number=round_number,
                team1=(a, b),
                team2=(c, d),
            )
        )
    return matches


def create_mexicano_matches(
    players: Sequence[Player],
    round_number: int,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """
    Create the matches of a Mexicano round.

    - players: all session players
    - round_number: the 1-based round being created
    - rng: random source for the first round

    Returns: random pairs in round 1, rank-based pairs afterwards.
    """
    if round_number == 1:
        return create_random_matches(players, round_number, rng or random.Random())
    return create_ranked_matches(players, round_number)


class MexicanoFormat(PairingFormat):
    """Rank-based format without a natural end."""

    name = FORMAT_MEXICANO
    display_name = FORMAT_NAMES[FORMAT_MEXICANO]

    def _generate(self, players: List[Player], round_number: int) -> List[Match]:
        return create_mexicano_matches(players, round_number, self.rng)

    def pairing_explanation(self, round_number: int) -> str:
        if round_number == 1:
            return (
                "First round: Players are paired randomly to establish "
                "initial rankings."
            )
        return self._rank_pairing_text()
