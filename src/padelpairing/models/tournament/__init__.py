from padelpairing.models.tournament.match import Match, make_match_id
from padelpairing.models.tournament.round_snapshot import RoundSnapshot
from padelpairing.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "Match",
    "make_match_id",
    "RoundSnapshot",
    "TournamentConfig",
]
