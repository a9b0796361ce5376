"""Round history for rollback."""

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

from typing import Any, Dict, Iterable, List, Optional

from padelpairing.models.player import Player
from padelpairing.models.tournament import Match, RoundSnapshot
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


class HistoryManager:
    """LIFO stack of round snapshots.

    Snapshots are unbounded; fixed-length formats produce a handful and the
    open-ended ones are ended by the operator.
    """

    def __init__(self):
        self._snapshots: List[RoundSnapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    @property
    def is_empty(self) -> bool:
        return not self._snapshots

    def snapshot(
        self,
        round_number: int,
        format_state: Dict[str, Any],
        players: Iterable[Player],
        matches: Iterable[Match],
    ) -> RoundSnapshot:
        """Copy the given state and push it onto the stack."""
        snap = RoundSnapshot.capture(round_number, format_state, players, matches)
        self._snapshots.append(snap)
        logger.debug(
            f"Saved snapshot of round {round_number} (depth {len(self._snapshots)})"
        )
        return snap

    def restore(self) -> Optional[RoundSnapshot]:
        """Pop the most recent snapshot, or return None when empty."""
        if not self._snapshots:
            logger.warning("Cannot restore: round history is empty")
            return None
        snap = self._snapshots.pop()
        logger.debug(
            f"Restored snapshot of round {snap.round_number} "
            f"(depth {len(self._snapshots)})"
        )
        return snap

    def clear(self) -> None:
        self._snapshots.clear()
