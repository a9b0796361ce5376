from padelpairing.models.player.base_player import Player
from padelpairing.models.player.factory import (
    PlayerFactory,
    create_players,
    default_player_names,
)

__all__ = [
    "Player",
    "PlayerFactory",
    "create_players",
    "default_player_names",
]
