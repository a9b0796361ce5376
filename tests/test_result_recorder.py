import pytest
from conftest import build_players

from padelpairing.controllers.tournament import ResultRecorder
from padelpairing.exceptions import (
    DuplicateResultException,
    InvalidPlayerDataException,
    InvalidResultException,
    InvalidScoreException,
    RoundValidationException,
)
from padelpairing.models.tournament import Match


def _match(index=0, team1=(0, 1), team2=(2, 3), score=None):
    match = Match(
        id=f"round-1-match-{index}", round_number=1, team1=team1, team2=team2
    )
    if score:
        match.team1_score, match.team2_score = score
    return match


def test_score_fills_in_other_team():
    match = _match()

    assert ResultRecorder().update_score(match, "team1", 15, 21)
    assert (match.team1_score, match.team2_score) == (15, 6)

    ResultRecorder().update_score(match, "team2", 8, 21)
    assert (match.team1_score, match.team2_score) == (13, 8)


def test_score_given_as_text_is_read_as_integer():
    match = _match()

    ResultRecorder().update_score(match, "team2", "12", 21)

    assert (match.team1_score, match.team2_score) == (9, 12)


def test_unchanged_score_leaves_other_team_alone():
    match = _match(score=(0, 0))

    assert ResultRecorder().update_score(match, "team1", 0, 21) is False
    assert (match.team1_score, match.team2_score) == (0, 0)


def test_zero_score_fills_in_full_points_when_changed():
    match = _match(score=(15, 6))

    ResultRecorder().update_score(match, "team1", 0, 21)

    assert (match.team1_score, match.team2_score) == (0, 21)


@pytest.mark.parametrize(
    "bad_score", [25, -1, "abc", None, True, float("inf"), float("nan")]
)
def test_invalid_score_is_rejected_without_change(bad_score):
    match = _match(score=(15, 6))

    with pytest.raises(InvalidScoreException):
        ResultRecorder().update_score(match, "team1", bad_score, 21)
    assert (match.team1_score, match.team2_score) == (15, 6)


def test_unknown_team_is_rejected():
    with pytest.raises(InvalidResultException):
        ResultRecorder().update_score(_match(), "team3", 10, 21)


def test_round_validation_lists_bad_matches():
    good = _match(0, score=(11, 10))
    bad = _match(1, team1=(4, 5), team2=(6, 7), score=(11, 5))

    with pytest.raises(RoundValidationException) as excinfo:
        ResultRecorder().validate_round([good, bad], 21)

    assert excinfo.value.invalid_match_ids == ["round-1-match-1"]
    assert "21" in str(excinfo.value)


def test_award_adds_team_score_to_both_members():
    players = build_players(4)
    match = _match(score=(15, 6))

    ResultRecorder().award_points_for_match(match, players, track_relationships=True)

    assert [p.total_points for p in players] == [15, 15, 6, 6]
    assert match.points_awarded
    assert (match.team1_points_awarded, match.team2_points_awarded) == (15, 6)
    assert players[0].partnerships == {1}
    assert players[0].opponents == {2, 3}
    assert players[3].partnerships == {2}
    assert players[3].opponents == {0, 1}


def test_award_without_tracking_leaves_relationships_empty():
    players = build_players(4)

    ResultRecorder().award_points_for_match(
        _match(score=(15, 6)), players, track_relationships=False
    )

    assert all(not p.partnerships and not p.opponents for p in players)


def test_award_twice_is_refused():
    players = build_players(4)
    match = _match(score=(15, 6))
    recorder = ResultRecorder()
    recorder.award_points_for_match(match, players, track_relationships=False)

    with pytest.raises(DuplicateResultException):
        recorder.award_points_for_match(match, players, track_relationships=False)
    assert players[0].total_points == 15


def test_award_round_skips_awarded_matches():
    players = build_players(8)
    first = _match(0, score=(15, 6))
    second = _match(1, team1=(4, 5), team2=(6, 7), score=(10, 11))
    recorder = ResultRecorder()

    assert recorder.award_round([first, second], players, True) == 2
    assert recorder.award_round([first, second], players, True) == 0
    assert sum(p.total_points for p in players) == 2 * 21 * 2


def test_correction_replaces_awarded_points():
    players = build_players(4)
    match = _match(score=(15, 6))
    recorder = ResultRecorder()
    recorder.award_points_for_match(match, players, track_relationships=True)

    recorder.correct_awarded_match(match, 10, 11, players)

    assert [p.total_points for p in players] == [10, 10, 11, 11]
    assert (match.team1_points_awarded, match.team2_points_awarded) == (10, 11)
    assert players[0].partnerships == {1}


def test_unknown_player_is_reported():
    match = _match(team1=(0, 1), team2=(2, 9), score=(15, 6))

    with pytest.raises(InvalidPlayerDataException):
        ResultRecorder().award_points_for_match(match, build_players(4), False)
    assert not match.points_awarded
