from itertools import combinations

from conftest import build_controller, build_players, play_round

from padelpairing.constants import PHASE_AMERICANO, PHASE_MEXICANO
from padelpairing.pairing import MatsicanoFormat, create_ranked_matches


def _exhaust_partnerships(players):
    for a, b in combinations([p.id for p in players], 2):
        players[a].partnerships.add(b)
        players[b].partnerships.add(a)


def test_starts_in_americano_phase(matsicano4):
    assert matsicano4.phase_label == PHASE_AMERICANO
    assert matsicano4.round_label == "Round 1 - Americano Phase"
    assert matsicano4.pairing_format.tracks_relationships
    assert (matsicano4.matches[0].team1, matsicano4.matches[0].team2) == ((0, 1), (2, 3))


def test_phase_ends_when_round_cap_is_passed(matsicano4):
    for _ in range(3):
        assert matsicano4.phase_label == PHASE_AMERICANO
        play_round(matsicano4)
        assert matsicano4.advance_round()

    assert matsicano4.round_number == 4
    assert matsicano4.phase_label == PHASE_MEXICANO
    assert matsicano4.round_label == "Round 4 - Mexicano Phase"

    expected = create_ranked_matches(matsicano4.players, 4)
    assert [(m.team1, m.team2) for m in matsicano4.matches] == [
        (m.team1, m.team2) for m in expected
    ]


def test_mexicano_phase_stops_tracking_relationships(matsicano4):
    for _ in range(3):
        play_round(matsicano4)
        matsicano4.advance_round()
    before = [(set(p.partnerships), set(p.opponents)) for p in matsicano4.players]

    play_round(matsicano4)

    after = [(p.partnerships, p.opponents) for p in matsicano4.players]
    assert after == before
    assert matsicano4.advance_round()
    assert matsicano4.round_number == 5


def test_phase_ends_when_partnerships_run_out():
    fmt = MatsicanoFormat(4)
    players = build_players(4, totals=[10, 30, 20, 5])
    _exhaust_partnerships(players)

    matches = fmt.generate_round_matches(players, 2)

    assert not fmt.americano_phase
    assert fmt.phase_label == PHASE_MEXICANO
    assert (matches[0].team1, matches[0].team2) == ((1, 0), (2, 3))


def test_eight_player_phase_cap():
    fmt = MatsicanoFormat(8)

    fmt.on_round_advanced(6)
    assert fmt.americano_phase
    fmt.on_round_advanced(7)
    assert not fmt.americano_phase


def test_phase_state_round_trip():
    fmt = MatsicanoFormat(4)
    saved = fmt.get_state()
    fmt.on_round_advanced(3)

    assert fmt.get_state() == {"americano_phase": False}
    fmt.set_state(saved)
    assert fmt.americano_phase
    fmt.on_round_advanced(3)
    fmt.reset()
    assert fmt.americano_phase


def test_going_back_restores_americano_phase(matsicano4):
    for _ in range(3):
        play_round(matsicano4)
        matsicano4.advance_round()
    assert matsicano4.phase_label == PHASE_MEXICANO

    assert matsicano4.go_back()

    assert matsicano4.round_number == 3
    assert matsicano4.phase_label == PHASE_AMERICANO


def test_matsicano_never_ends_on_its_own():
    controller = build_controller("matsicano", 4)
    for _ in range(6):
        play_round(controller)
        assert controller.advance_round()

    assert controller.round_number == 7
    assert not controller.is_complete


def test_eight_player_session_switches_after_round_seven():
    controller = build_controller("matsicano", 8)
    for _ in range(7):
        assert controller.phase_label == PHASE_AMERICANO
        assert len(controller.matches) == 2
        play_round(controller)
        assert controller.advance_round()

    assert controller.round_number == 8
    assert controller.round_label == "Round 8 - Mexicano Phase"

    assert controller.go_back()

    assert controller.round_number == 7
    assert controller.pairing_format.americano_phase
    assert controller.round_label == "Round 7 - Americano Phase"


def test_session_switches_when_partnerships_run_out(matsicano4):
    play_round(matsicano4)
    for player in matsicano4.players:
        player.total_points = {0: 10, 1: 30, 2: 20, 3: 5}[player.id]
    _exhaust_partnerships(matsicano4.players)

    assert matsicano4.advance_round()

    assert matsicano4.round_number == 2
    assert matsicano4.phase_label == PHASE_MEXICANO
    match = matsicano4.matches[0]
    assert (match.team1, match.team2) == ((1, 0), (2, 3))
