import random

import pytest
from conftest import build_players, play_round

from padelpairing.exceptions import InvalidPairingException, UnsupportedFormatException
from padelpairing.models.tournament import Match
from padelpairing.pairing import (
    AmericanoFormat,
    MatsicanoFormat,
    MexicanoFormat,
    create_mexicano_matches,
    create_pairing_format,
    create_random_matches,
    create_ranked_matches,
    rank_order,
    validate_match_structure,
)


def test_rank_order_sorts_by_points_descending():
    players = build_players(4, totals=[10, 30, 20, 5])

    assert [p.id for p in rank_order(players)] == [1, 2, 0, 3]


def test_rank_order_keeps_id_order_on_ties():
    players = build_players(4, totals=[20, 30, 20, 30])

    assert [p.id for p in rank_order(players)] == [1, 3, 0, 2]


def test_ranked_round_pairs_first_and_third_against_second_and_fourth():
    players = build_players(4, totals=[10, 30, 20, 5])

    matches = create_ranked_matches(players, 2)

    assert len(matches) == 1
    assert matches[0].team1 == (1, 0)
    assert matches[0].team2 == (2, 3)
    assert matches[0].id == "round-2-match-0"


def test_ranked_round_for_eight_players():
    players = build_players(8, totals=[80, 70, 60, 50, 40, 30, 20, 10])

    matches = create_ranked_matches(players, 3)

    assert [(m.team1, m.team2) for m in matches] == [
        ((0, 2), (1, 3)),
        ((4, 6), (5, 7)),
    ]


def test_random_round_uses_every_player_once(players8, rng):
    matches = create_random_matches(players8, 1, rng)

    ids = [pid for m in matches for pid in m.player_ids]
    assert sorted(ids) == list(range(8))
    for match in matches:
        validate_match_structure(match)


def test_random_round_is_reproducible_with_seed(players8):
    first = create_random_matches(players8, 1, random.Random(5))
    second = create_random_matches(players8, 1, random.Random(5))

    assert [(m.team1, m.team2) for m in first] == [(m.team1, m.team2) for m in second]


def test_first_round_is_random_and_later_rounds_ranked(players4):
    expected = create_random_matches(players4, 1, random.Random(9))
    first = create_mexicano_matches(players4, 1, random.Random(9))
    assert [(m.team1, m.team2) for m in first] == [
        (m.team1, m.team2) for m in expected
    ]

    later = create_mexicano_matches(build_players(4, totals=[10, 30, 20, 5]), 2)
    assert (later[0].team1, later[0].team2) == ((1, 0), (2, 3))


def test_mexicano_never_ends_and_does_not_track():
    fmt = MexicanoFormat(4)

    assert not fmt.should_end_tournament(50)
    assert not fmt.tracks_relationships
    assert fmt.round_label(2) == "Round 2"
    assert fmt.round_label(2, complete=True) == "Round 2 - Tournament Complete!"
    assert "randomly" in fmt.pairing_explanation(1)
    assert fmt.pairing_explanation(2).startswith("Rank-based pairing")


def test_mexicano_session_leaves_relationships_empty(mexicano4):
    play_round(mexicano4)
    assert mexicano4.advance_round()
    play_round(mexicano4)

    assert all(not p.partnerships and not p.opponents for p in mexicano4.players)
    assert sum(p.total_points for p in mexicano4.players) == 2 * 2 * 21


def test_second_round_follows_standings(mexicano4):
    play_round(mexicano4)
    mexicano4.advance_round()

    ranked = [p.id for p in rank_order(mexicano4.players)]
    match = mexicano4.matches[0]
    assert match.team1 == (ranked[0], ranked[2])
    assert match.team2 == (ranked[1], ranked[3])


def test_create_pairing_format_lookup():
    assert isinstance(create_pairing_format("americano", 4), AmericanoFormat)
    assert isinstance(create_pairing_format("MEXICANO", 8), MexicanoFormat)
    assert isinstance(create_pairing_format(" matsicano ", 4), MatsicanoFormat)

    with pytest.raises(UnsupportedFormatException):
        create_pairing_format("swiss", 4)


def test_malformed_match_is_rejected():
    match = Match(id="round-1-match-0", round_number=1, team1=(0, 1), team2=(1, 2))

    with pytest.raises(InvalidPairingException):
        validate_match_structure(match)
