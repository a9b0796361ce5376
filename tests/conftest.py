import random

import pytest

from padelpairing.controllers.tournament import RoundController
from padelpairing.models.player import create_players
from padelpairing.models.tournament import TournamentConfig


def build_players(count=4, totals=None):
    players = create_players(player_count=count)
    for player, total in zip(players, totals or []):
        player.total_points = total
    return players


def build_controller(tournament_format="americano", player_count=4, match_points=21, seed=7):
    config = TournamentConfig(
        player_count=player_count,
        match_points=match_points,
        tournament_format=tournament_format,
        seed=seed,
    )
    controller = RoundController(config)
    controller.start_with_names()
    return controller


def fill_round(controller, team1_score=15):
    for match in controller.matches:
        controller.submit_score(match.id, "team1", team1_score)


def play_round(controller, team1_score=15):
    fill_round(controller, team1_score)
    return controller.complete_round()


@pytest.fixture
def players4():
    return build_players(4)


@pytest.fixture
def players8():
    return build_players(8)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def americano4():
    return build_controller("americano", 4)


@pytest.fixture
def americano8():
    return build_controller("americano", 8)


@pytest.fixture
def mexicano4():
    return build_controller("mexicano", 4)


@pytest.fixture
def matsicano4():
    return build_controller("matsicano", 4)
