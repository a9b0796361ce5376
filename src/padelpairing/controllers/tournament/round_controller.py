"""Round progression for padel sessions.

This module holds the state machine that drives a session: starting it,
score entry, completing and advancing rounds, rolling back, and ending.
"""

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
from typing import Any, Dict, List, Optional, Sequence

from padelpairing.controllers.tournament.history_manager import HistoryManager
from padelpairing.controllers.tournament.leaderboard import (
    LeaderboardRanker,
    StandingEntry,
)
from padelpairing.controllers.tournament.result_recorder import ResultRecorder
from padelpairing.exceptions import (
    InvalidPlayerDataException,
    MatchNotFoundException,
    NoPairingAvailableException,
    ResultException,
    TournamentStateException,
)
from padelpairing.models.enums import TournamentState
from padelpairing.models.player import Player, create_players
from padelpairing.models.tournament import Match, TournamentConfig
from padelpairing.pairing import create_pairing_format
from padelpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundController:
    """Drives one session through its rounds.

    This class is responsible for:
    - Requesting each round's matches from the session's pairing format
    - Routing score edits and round completion through the ResultRecorder
    - Snapshotting state before every forward round transition
    - Rolling back to the previous round
    - Exposing labels, leaderboard and winners for presentation layers

    Commands run one at a time and either apply fully or raise before
    changing anything.
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the controller.

        Args:
            config: Session settings; defaults to 4-player Americano to 21
            rng: Random source for random pairings; seeded from
                ``config.seed`` when omitted
        """
        self.config = (config or TournamentConfig()).validate()
        self.rng = rng or random.Random(self.config.seed)
        self.pairing_format = create_pairing_format(
            self.config.tournament_format, self.config.player_count, self.rng
        )
        self.result_recorder = ResultRecorder()
        self.leaderboard_ranker = LeaderboardRanker()
        self.history = HistoryManager()

        self.players: List[Player] = []
        self.matches: List[Match] = []
        self.round_number = 0
        self.state = TournamentState.SETUP

    # ========== Properties ==========

    @property
    def match_points(self) -> int:
        return self.config.match_points

    @property
    def player_count(self) -> int:
        return self.config.player_count

    @property
    def is_complete(self) -> bool:
        return self.state is TournamentState.TOURNAMENT_COMPLETE

    @property
    def round_label(self) -> str:
        return self.pairing_format.round_label(self.round_number, self.is_complete)

    @property
    def phase_label(self) -> Optional[str]:
        return self.pairing_format.phase_label

    @property
    def pairing_explanation(self) -> str:
        return self.pairing_format.pairing_explanation(self.round_number)

    @property
    def can_complete_round(self) -> bool:
        """True when every score adds up and some match still awaits points."""
        return (
            self.state is TournamentState.ROUND_IN_PROGRESS
            and all(m.is_complete(self.match_points) for m in self.matches)
            and not all(m.points_awarded for m in self.matches)
        )

    @property
    def can_advance(self) -> bool:
        return self.state is TournamentState.ROUND_COMPLETE

    @property
    def can_go_back(self) -> bool:
        return self.state.is_started and not self.history.is_empty

    @property
    def history_depth(self) -> int:
        return len(self.history)

    # ========== Setup ==========

    def start(self, players: Sequence[Player]) -> List[Match]:
        """Start the session with initialized players and create round 1.

        Args:
            players: Players with ids ``0 .. N-1``, zero points and no history

        Returns:
            The matches of round 1

        Raises:
            TournamentStateException: If the session has already started
            InvalidPlayerDataException: If the players are not initialized
        """
        if self.state is not TournamentState.SETUP:
            raise TournamentStateException(
                "Session already started; reset it before starting again"
            )

        ordered = sorted(players, key=lambda p: p.id)
        self._check_players(ordered)

        matches = self.pairing_format.generate_round_matches(ordered, 1)
        if not matches:
            raise NoPairingAvailableException("No matches could be created for round 1")

        self.players = ordered
        self.round_number = 1
        self.matches = matches
        self.state = TournamentState.ROUND_IN_PROGRESS
        logger.info(
            f"Started {self.pairing_format.display_name} session with "
            f"{len(ordered)} players to {self.match_points} points"
        )
        return self.matches

    def start_with_names(
        self, names: Optional[Sequence[Optional[str]]] = None
    ) -> List[Match]:
        """Create players from display names, then start the session."""
        return self.start(create_players(names, self.player_count))

    def _check_players(self, players: List[Player]) -> None:
        if len(players) != self.player_count:
            raise InvalidPlayerDataException(
                f"Expected {self.player_count} players, got {len(players)}"
            )
        ids = [p.id for p in players]
        if ids != list(range(self.player_count)):
            raise InvalidPlayerDataException(
                f"Player ids must be 0..{self.player_count - 1}, got {ids}"
            )
        stale = [p.name for p in players if not p.is_fresh]
        if stale:
            raise InvalidPlayerDataException(
                f"Players must start with no points or history: {stale}"
            )

    def reset(self) -> None:
        """Return to setup, discarding players, matches and history."""
        self.players = []
        self.matches = []
        self.round_number = 0
        self.history.clear()
        self.pairing_format.reset()
        self.state = TournamentState.SETUP
        logger.info("Session reset")

    # ========== Score Entry ==========

    def get_match(self, match_id: str) -> Match:
        """Return the current-round match with ``match_id``.

        Raises:
            MatchNotFoundException: If no such match is in the current round
        """
        for match in self.matches:
            if match.id == match_id:
                return match
        raise MatchNotFoundException(f"No match {match_id!r} in round {self.round_number}")

    def submit_score(self, match_id: str, team: str, score: Any) -> Match:
        """Set one team's score; the other team gets the remaining points.

        Editing a match whose points were already awarded corrects the
        player totals immediately.

        Raises:
            TournamentStateException: Before start or after the session ended
            MatchNotFoundException: If the match is not in the current round
            InvalidResultException: If the team key is unknown
            InvalidScoreException: If the score is not an integer in range
        """
        if not self.state.is_started:
            raise TournamentStateException("Start the session before entering scores")
        if self.is_complete:
            raise TournamentStateException("Session has ended; standings are final")

        match = self.get_match(match_id)
        try:
            self.result_recorder.update_score(match, team, score, self.match_points)
        except ResultException as e:
            logger.warning(f"Rejected score {score!r} for {match_id} {team}: {e}")
            raise

        if match.points_awarded:
            self.result_recorder.correct_awarded_match(
                match, match.team1_score, match.team2_score, self.players
            )
        return match

    # ========== Round Progression ==========

    def complete_round(self) -> int:
        """Validate the round's scores and award points.

        Returns:
            Number of matches awarded by this call (already awarded matches
            are skipped)

        Raises:
            TournamentStateException: If no round is being played
            RoundValidationException: If a match does not add up to the target
        """
        if self.state not in (
            TournamentState.ROUND_IN_PROGRESS,
            TournamentState.ROUND_COMPLETE,
        ):
            raise TournamentStateException(
                f"Cannot complete a round while {self.state.value}"
            )

        self.result_recorder.validate_round(self.matches, self.match_points)
        awarded = self.result_recorder.award_round(
            self.matches, self.players, self.pairing_format.tracks_relationships
        )
        self.state = TournamentState.ROUND_COMPLETE
        logger.info(f"Round {self.round_number} completed ({awarded} matches awarded)")
        return awarded

    def advance_round(self) -> bool:
        """Move past a completed round.

        The current state is snapshotted first. The session ends when the
        format says so or when no valid round can be generated; in that case
        the round number and matches stay on the completed round.

        Returns:
            True if a new round was created, False if the session ended

        Raises:
            TournamentStateException: If the current round is not completed
        """
        if self.state is not TournamentState.ROUND_COMPLETE:
            raise TournamentStateException(
                "Complete the current round before moving to the next one"
            )

        completed = self.round_number
        self.history.snapshot(
            completed, self.pairing_format.get_state(), self.players, self.matches
        )
        self.pairing_format.on_round_advanced(completed)

        if self.pairing_format.should_end_tournament(completed):
            self._finish(f"{self.pairing_format.display_name} finished after round {completed}")
            return False

        matches = self.pairing_format.generate_round_matches(self.players, completed + 1)
        if not matches:
            self._finish(f"no valid pairings left after round {completed}")
            return False

        self.round_number = completed + 1
        self.matches = matches
        self.state = TournamentState.ROUND_IN_PROGRESS
        logger.info(f"Started round {self.round_number}")
        return True

    def go_back(self) -> bool:
        """Restore the state saved before the last forward transition.

        Returns:
            True if a snapshot was restored, False if there was none
        """
        if not self.state.is_started:
            logger.warning("Cannot go back: session not started")
            return False

        snapshot = self.history.restore()
        if snapshot is None:
            return False

        self.round_number = snapshot.round_number
        self.pairing_format.set_state(snapshot.format_state)
        self.players = snapshot.restore_players()
        self.matches = snapshot.restore_matches()
        if self.matches and all(m.points_awarded for m in self.matches):
            self.state = TournamentState.ROUND_COMPLETE
        else:
            self.state = TournamentState.ROUND_IN_PROGRESS
        logger.info(f"Went back to round {self.round_number}")
        return True

    def end_tournament(self) -> None:
        """End the session now; current standings become final.

        Raises:
            TournamentStateException: If the session has not started
        """
        if not self.state.is_started:
            raise TournamentStateException("Cannot end a session that has not started")
        self._finish("ended by operator")

    def _finish(self, reason: str) -> None:
        self.state = TournamentState.TOURNAMENT_COMPLETE
        logger.info(f"Session complete: {reason}")

    # ========== Standings ==========

    def player_name(self, player_id: int) -> str:
        for player in self.players:
            if player.id == player_id:
                return player.name
        raise InvalidPlayerDataException(f"Unknown player id {player_id}")

    def team_names(self, team: Sequence[int]) -> str:
        return " & ".join(self.player_name(pid) for pid in team)

    def leaderboard(self) -> List[StandingEntry]:
        return self.leaderboard_ranker.rank(self.players)

    def winners(self) -> List[Player]:
        """Winning players once the session is complete, else an empty list."""
        if not self.is_complete:
            return []
        return self.leaderboard_ranker.winners(self.players)

    @property
    def tie_for_first(self) -> bool:
        """True when a finished session has more than one winner."""
        return self.is_complete and self.leaderboard_ranker.is_tie_for_first(
            self.players
        )

    @property
    def winning_score(self) -> Optional[int]:
        winners = self.winners()
        return winners[0].total_points if winners else None

    def view(self) -> Dict[str, Any]:
        """Snapshot of everything a presentation layer displays."""
        matches = []
        for match in self.matches:
            data = match.to_dict()
            data["team1_names"] = self.team_names(match.team1)
            data["team2_names"] = self.team_names(match.team2)
            data["status"] = match.status(self.match_points)
            data["points_needed"] = match.points_needed(self.match_points)
            matches.append(data)

        return {
            "config": self.config.to_dict(),
            "state": self.state.value,
            "round_number": self.round_number,
            "round_label": self.round_label if self.state.is_started else "",
            "phase_label": self.phase_label,
            "pairing_explanation": (
                self.pairing_explanation if self.state.is_started else ""
            ),
            "matches": matches,
            "players": [p.to_dict() for p in self.players],
            "leaderboard": [entry.to_dict() for entry in self.leaderboard()],
            "winners": [p.name for p in self.winners()],
            "winning_score": self.winning_score,
            "tie_for_first": self.tie_for_first,
            "can_complete_round": self.can_complete_round,
            "can_advance": self.can_advance,
            "can_go_back": self.can_go_back,
        }


def create_session(
    names: Optional[Sequence[Optional[str]]] = None,
    tournament_format: str = "americano",
    player_count: Optional[int] = None,
    match_points: int = 21,
    seed: Optional[int] = None,
) -> RoundController:
    """Build a controller and start it in one call.

    ``player_count`` defaults to the number of names, or 4 without names.
    """
    if player_count is None:
        player_count = len(names) if names else 4
    config = TournamentConfig(
        player_count=player_count,
        match_points=match_points,
        tournament_format=tournament_format,
        seed=seed,
    )
    controller = RoundController(config)
    controller.start_with_names(names)
    return controller
