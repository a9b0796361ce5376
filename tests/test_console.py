import pytest
from conftest import build_controller

from padelpairing.console.__main__ import (
    COMMANDS,
    build_controller as build_console_controller,
    create_completer,
    create_main_parser,
    execute_command,
    resolve_match_id,
)
from padelpairing.models.enums import TournamentState
from padelpairing.utils.print import format_leaderboard, format_matches, format_round_header


def test_parser_defaults():
    args = create_main_parser().parse_args([])

    assert args.players == 4
    assert args.points == 21
    assert args.tournament_format == "americano"
    assert args.names is None


def test_parser_builds_started_controller():
    args = create_main_parser().parse_args(
        ["--players", "8", "--format", "Mexicano", "--points", "32", "--seed", "4"]
    )

    controller = build_console_controller(args)

    assert controller.config.tournament_format == "mexicano"
    assert controller.match_points == 32
    assert len(controller.matches) == 2
    assert controller.state is TournamentState.ROUND_IN_PROGRESS


def test_parser_rejects_unsupported_player_count():
    with pytest.raises(SystemExit):
        create_main_parser().parse_args(["--players", "6"])


def test_match_reference_by_number_or_id(americano8):
    assert resolve_match_id(americano8, "2") == "round-1-match-1"
    assert resolve_match_id(americano8, "round-1-match-0") == "round-1-match-0"
    assert resolve_match_id(americano8, "9") == "9"


def test_score_complete_and_next(americano4, capsys):
    assert execute_command(americano4, "score 1 team1 15")
    assert "15 - 6" in capsys.readouterr().out

    execute_command(americano4, "complete")
    out = capsys.readouterr().out
    assert "Round 1 complete" in out
    assert "Standings" in out

    execute_command(americano4, "next")
    assert "Round 2 of 3" in capsys.readouterr().out
    assert americano4.round_number == 2


def test_errors_are_printed_not_raised(americano4, capsys):
    execute_command(americano4, "score 1 team1 99")
    assert "Error" in capsys.readouterr().out

    execute_command(americano4, "complete")
    assert "total exactly 21" in capsys.readouterr().out

    execute_command(americano4, "next")
    assert "Error" in capsys.readouterr().out
    assert americano4.round_number == 1


def test_score_usage_message(americano4, capsys):
    execute_command(americano4, "score 1")

    assert "Usage" in capsys.readouterr().out


def test_back_without_history(americano4, capsys):
    execute_command(americano4, "back")

    assert "Nothing to go back to" in capsys.readouterr().out


def test_end_and_reset(capsys):
    controller = build_controller("mexicano", 4)
    execute_command(controller, "score 1 team2 12")
    execute_command(controller, "complete")

    execute_command(controller, "end")
    assert "Tie" in capsys.readouterr().out
    assert controller.is_complete

    execute_command(controller, "reset", names=["Ana", "Ben", "Cleo", "Dan"])
    assert controller.state is TournamentState.ROUND_IN_PROGRESS
    assert controller.player_name(0) == "Ana"


def test_help_unknown_and_exit(americano4, capsys):
    assert execute_command(americano4, "help")
    assert "Available Commands" in capsys.readouterr().out

    assert execute_command(americano4, "help score")
    assert "<points>" in capsys.readouterr().out

    assert execute_command(americano4, "dance")
    assert "Unknown command" in capsys.readouterr().out

    assert execute_command(americano4, "") is True
    assert execute_command(americano4, "exit") is False
    assert execute_command(americano4, "/quit") is False


def test_completer_covers_commands(americano4):
    completer = create_completer(americano4)

    assert set(COMMANDS) <= set(completer.options)
    assert "round-1-match-0" in completer.options["score"].options


def test_text_rendering(americano4):
    americano4.submit_score(americano4.matches[0].id, "team1", 10)
    view = americano4.view()

    lines = format_matches(view)
    assert lines[0].startswith("round-1-match-0")
    assert "Player A & Player B" in lines[0]
    assert "[ok]" in lines[0]
    assert format_leaderboard(view)[0].strip().startswith("1=.")
    assert format_round_header(view)[0] == "Round 1 of 3"
