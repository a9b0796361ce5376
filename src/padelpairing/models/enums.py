"""Enumerations shared across Padel Pairing."""

from enum import Enum


class TournamentState(Enum):
    """Round progression states of a session.

    SETUP -> ROUND_IN_PROGRESS -> ROUND_COMPLETE -> ROUND_IN_PROGRESS -> ...
    -> TOURNAMENT_COMPLETE
    """

    SETUP = "setup"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_COMPLETE = "round_complete"
    TOURNAMENT_COMPLETE = "tournament_complete"

    @property
    def is_started(self) -> bool:
        return self is not TournamentState.SETUP
