"""Americano pairing: every player partners every other player once."""

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

from itertools import combinations
from typing import Dict, List, Optional, Sequence, Set

from padelpairing.constants import (
    AMERICANO_MAX_ROUNDS,
    FORMAT_AMERICANO,
    FORMAT_NAMES,
    PLAYERS_PER_MATCH,
)
from padelpairing.models.player import Player
from padelpairing.models.tournament import Match, make_match_id
from padelpairing.pairing.base import COMPLETE_SUFFIX, PairingFormat
from padelpairing.type_hints import Partnership, Team
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


def available_partnerships(players: Sequence[Player]) -> List[Partnership]:
    """List the pairs that have never played together, ids ascending.

    A pair is discarded when either member has the other recorded as partner.
    """
    by_id = {p.id: p for p in players}
    ids = sorted(by_id)
    return [
        (a, b)
        for a, b in combinations(ids, 2)
        if not by_id[a].has_partnered(b) and not by_id[b].has_partnered(a)
    ]


def _pick_opponent_pair(
    first: Player,
    second: Player,
    candidates: List[int],
    valid_pairs: Set[Partnership],
) -> Optional[Team]:
    """Pick the opposing team with the fewest prior encounters.

    Only pairs that may still partner are considered. Ties keep the first
    pair in enumeration order.
    """
    best_pair = None
    min_encounters = None

    for pair in combinations(candidates, 2):
        if pair not in valid_pairs:
            continue
        encounters = first.count_encounters(pair) + second.count_encounters(pair)
        if min_encounters is None or encounters < min_encounters:
            min_encounters = encounters
            best_pair = pair

    return best_pair


def create_americano_matches(
    players: Sequence[Player], round_number: int
) -> List[Match]:
    """
    Create the matches of an Americano round.

    - players: all session players; their ``partnerships`` and ``opponents``
      sets describe previous rounds
    - round_number: the 1-based round being created

    Partnerships are tried in ascending id order. Each one that does not touch
    an already used player is matched against the unused valid pair with the
    fewest previous encounters, until ``len(players) // 4`` matches exist.
    With 4 players this is simply the first free partnership against the
    other two.

    Returns: list of matches, empty when fewer than 2 partnerships are left
    or no disjoint match can be formed.
    """
    partnerships = available_partnerships(players)
    if len(partnerships) < 2:
        logger.info(
            f"Round {round_number}: only {len(partnerships)} partnerships left, "
            "no Americano round possible"
        )
        return []

    by_id: Dict[int, Player] = {p.id: p for p in players}
    ids = sorted(by_id)
    valid_pairs = set(partnerships)
    matches_per_round = len(ids) // PLAYERS_PER_MATCH

    used: Set[int] = set()
    matches: List[Match] = []

    for p1, p2 in partnerships:
        if len(matches) >= matches_per_round:
            break
        if p1 in used or p2 in used:
            continue

        candidates = [pid for pid in ids if pid not in used and pid not in (p1, p2)]
        opponents = _pick_opponent_pair(by_id[p1], by_id[p2], candidates, valid_pairs)
        if opponents is None:
            continue

        matches.append(
            Match(
                id=make_match_id(round_number, len(matches)),
                round_number=round_number,
                team1=(p1, p2),
                team2=opponents,
            )
        )
        used.update((p1, p2) + opponents)

    if len(matches) < matches_per_round:
        logger.warning(
            f"Round {round_number}: built {len(matches)} of {matches_per_round} "
            "Americano matches from the remaining partnerships"
        )

    return matches


class AmericanoFormat(PairingFormat):
    """Partnership-exhaustive format with a fixed number of rounds."""

    name = FORMAT_AMERICANO
    display_name = FORMAT_NAMES[FORMAT_AMERICANO]

    @property
    def max_rounds(self) -> int:
        return AMERICANO_MAX_ROUNDS[self.player_count]

    @property
    def tracks_relationships(self) -> bool:
        return True

    def _generate(self, players: List[Player], round_number: int) -> List[Match]:
        return create_americano_matches(players, round_number)

    def should_end_tournament(self, round_number: int) -> bool:
        return round_number >= self.max_rounds

    def round_label(self, round_number: int, complete: bool = False) -> str:
        label = f"Round {round_number} of {self.max_rounds}"
        return label + COMPLETE_SUFFIX if complete else label

    def pairing_explanation(self, round_number: int) -> str:
        return "Everyone partners with everyone else exactly once."
