"""Factory for creating the players of a session with validation.

This module implements the Factory pattern for Player creation,
providing a single point of entry for creating players with
proper validation and error handling.
"""

from typing import List, Optional, Sequence

from padelpairing.constants import DEFAULT_PLAYER_NAMES
from padelpairing.exceptions import (
    InvalidPlayerDataException,
    PlayerCountValidationException,
)
from padelpairing.models.player.base_player import Player
from padelpairing.utils import setup_logger
from padelpairing.utils.validation import (
    validate_player_count_strict,
    validate_player_name,
)

logger = setup_logger(__name__)


def default_player_names(player_count: int) -> List[str]:
    """Return the default display names ``Player A``, ``Player B``, ..."""
    return list(DEFAULT_PLAYER_NAMES[:player_count])


class PlayerFactory:
    """Factory for creating the ordered player list of a session.

    Ids are assigned from the position in the name list, so the result is
    always the contiguous range ``0 .. player_count - 1``.

    Example:
        >>> factory = PlayerFactory()
        >>> players = factory.create_players(["Ana", "Ben", "Cleo", "Dan"])
        >>> [p.id for p in players]
        [0, 1, 2, 3]
    """

    def create_players(
        self,
        names: Optional[Sequence[Optional[str]]] = None,
        player_count: Optional[int] = None,
    ) -> List[Player]:
        """Create fresh players from display names.

        Args:
            names: Ordered display names; blank entries fall back to defaults.
                When omitted, default names are used for ``player_count``.
            player_count: Expected number of players. Defaults to ``len(names)``.

        Returns:
            List of Player objects with ids ``0 .. N-1``

        Raises:
            InvalidPlayerDataException: If the names or count are invalid
        """
        if names is None and player_count is None:
            raise InvalidPlayerDataException(
                "Either player names or a player count is required"
            )

        count = player_count if player_count is not None else len(names)
        try:
            count = validate_player_count_strict(count)
        except PlayerCountValidationException as e:
            raise InvalidPlayerDataException(str(e)) from e

        if names is None:
            names = [None] * count

        if len(names) != count:
            raise InvalidPlayerDataException(
                f"Expected {count} player names, got {len(names)}"
            )

        defaults = default_player_names(count)
        players = []
        for index, raw_name in enumerate(names):
            result = validate_player_name(raw_name)
            if not result.is_valid:
                raise InvalidPlayerDataException(result.error_message)
            name = result.sanitized_value or defaults[index]
            players.append(Player(id=index, name=name))

        logger.debug(f"Created {count} players: {[p.name for p in players]}")
        return players


# Convenience functions using default factory
_default_factory = PlayerFactory()


def create_players(
    names: Optional[Sequence[Optional[str]]] = None,
    player_count: Optional[int] = None,
) -> List[Player]:
    """Create session players using the default factory."""
    return _default_factory.create_players(names, player_count)
