"""Interactive console for Padel Pairing.

This module runs a session from the terminal: players and settings come from
command-line flags, and scores and round commands are typed at a prompt with
autocompletion.
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

import argparse
import sys
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from padelpairing.constants import (
    DEFAULT_FORMAT,
    DEFAULT_MATCH_POINTS,
    DEFAULT_PLAYER_COUNT,
    SUPPORTED_FORMATS,
    SUPPORTED_PLAYER_COUNTS,
    TEAM_KEYS,
)
from padelpairing.controllers.tournament import RoundController
from padelpairing.exceptions import PadelPairingException, RoundValidationException
from padelpairing.models.tournament import TournamentConfig
from padelpairing.utils import set_log_level, setup_logger
from padelpairing.utils.print import (
    format_leaderboard,
    format_matches,
    format_round_header,
    format_winner,
)

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their arguments
COMMANDS = {
    "score": {
        "description": "Enter a team's score; the other team gets the rest",
        "options": {
            "<match>": "Match number in this round (1, 2) or match id",
            "<team>": "team1 or team2",
            "<points>": "Points scored by that team",
        },
    },
    "complete": {
        "description": "Check the scores and award points for this round",
        "options": {},
    },
    "next": {"description": "Move on to the next round", "options": {}},
    "back": {"description": "Return to the previous round", "options": {}},
    "end": {"description": "End the session and show the winner", "options": {}},
    "reset": {
        "description": "Start over with the same players and settings",
        "options": {},
    },
    "matches": {"description": "Show this round's matches", "options": {}},
    "standings": {"description": "Show the leaderboard", "options": {}},
    "help": {
        "description": "Show help for a specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Leave the console", "options": {}},
}

EXIT_WORDS = ("exit", "quit", "q")


def print_banner(controller: RoundController):
    """Print the console banner."""
    config = controller.config
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                        PADEL PAIRING                          ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

{controller.pairing_format.display_name}, {config.player_count} players, matches to {config.match_points} points

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:12}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Arguments:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:12}{Colors.ENDC} {description}")
    print()


def create_completer(controller: RoundController) -> NestedCompleter:
    """Create autocomplete completer for the prompt."""
    team_completer = WordCompleter(list(TEAM_KEYS))
    match_refs = [str(i) for i in range(1, len(controller.matches) + 1)]
    match_refs.extend(m.id for m in controller.matches)

    completions = {cmd: None for cmd in COMMANDS}
    completions["score"] = {ref: team_completer for ref in match_refs}
    completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


def print_round(controller: RoundController):
    view = controller.view()
    header = format_round_header(view)
    print(f"\n{Colors.BOLD}{header[0]}{Colors.ENDC}")
    for line in header[1:]:
        print(f"{Colors.OKCYAN}{line}{Colors.ENDC}")
    print()
    for line in format_matches(view):
        print(f"  {line}")
    print()


def print_standings(controller: RoundController):
    view = controller.view()
    print(f"\n{Colors.BOLD}Standings:{Colors.ENDC}")
    for line in format_leaderboard(view):
        print(f"  {line}")
    winner = format_winner(view)
    if winner:
        print(f"\n{Colors.OKGREEN}{Colors.BOLD}{winner}{Colors.ENDC}")
    print()


def resolve_match_id(controller: RoundController, ref: str) -> str:
    """Turn a 1-based match number into a match id; ids pass through."""
    if ref.isdigit():
        index = int(ref) - 1
        if 0 <= index < len(controller.matches):
            return controller.matches[index].id
    return ref


def run_score_command(controller: RoundController, args: List[str]):
    if len(args) != 3:
        print(f"{Colors.FAIL}Usage: score <match> <team> <points>{Colors.ENDC}")
        return

    ref, team, points = args
    match = controller.submit_score(resolve_match_id(controller, ref), team, points)
    print(
        f"{match.id}: {controller.team_names(match.team1)} {match.team1_score} - "
        f"{match.team2_score} {controller.team_names(match.team2)}"
    )


def run_complete_command(controller: RoundController):
    try:
        awarded = controller.complete_round()
    except RoundValidationException as e:
        print(f"{Colors.FAIL}{e}{Colors.ENDC}")
        return
    print(f"{Colors.OKGREEN}Round {controller.round_number} complete ({awarded} matches awarded){Colors.ENDC}")
    print_standings(controller)


def run_next_command(controller: RoundController):
    if controller.advance_round():
        print_round(controller)
    else:
        print(f"\n{Colors.OKGREEN}{controller.round_label}{Colors.ENDC}")
        print_standings(controller)


def run_back_command(controller: RoundController):
    if controller.go_back():
        print(f"{Colors.WARNING}Returned to round {controller.round_number}{Colors.ENDC}")
        print_round(controller)
    else:
        print(f"{Colors.WARNING}Nothing to go back to{Colors.ENDC}")


def run_end_command(controller: RoundController):
    controller.end_tournament()
    print(f"\n{Colors.OKGREEN}{controller.round_label}{Colors.ENDC}")
    print_standings(controller)


def run_reset_command(controller: RoundController, names: Optional[Sequence[str]]):
    controller.reset()
    controller.start_with_names(names)
    print(f"{Colors.WARNING}Session restarted{Colors.ENDC}")
    print_round(controller)


def execute_command(
    controller: RoundController,
    user_input: str,
    names: Optional[Sequence[str]] = None,
) -> bool:
    """Run one console command against the controller.

    Args:
        controller: The running session
        user_input: Raw input line
        names: Player names used when the session is reset

    Returns:
        False when the console should exit, True otherwise
    """
    parts = user_input.split()
    if not parts:
        return True

    command = parts[0].lstrip("/").lower()
    args = parts[1:]

    if command in EXIT_WORDS:
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if command in ("help", "?"):
        if args:
            print_command_help(args[0].lstrip("/"))
        else:
            print_commands_list()
        return True

    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return True

    try:
        if command == "score":
            run_score_command(controller, args)
        elif command == "complete":
            run_complete_command(controller)
        elif command == "next":
            run_next_command(controller)
        elif command == "back":
            run_back_command(controller)
        elif command == "end":
            run_end_command(controller)
        elif command == "reset":
            run_reset_command(controller, names)
        elif command == "matches":
            print_round(controller)
        elif command == "standings":
            print_standings(controller)
    except PadelPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug(f"Command {user_input!r} failed: {e}")
    return True


def run_interactive_mode(
    controller: RoundController, names: Optional[Sequence[str]] = None
) -> int:
    """Run the prompt loop with autocomplete."""
    print_banner(controller)
    print_round(controller)

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(history=InMemoryHistory(), style=style)

    while True:
        try:
            # Match ids change every round, so rebuild the completer each time
            user_input = session.prompt(
                "padel> ", completer=create_completer(controller)
            ).strip()

            if not execute_command(controller, user_input, names):
                break

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="padel-pairing",
        description="Run an Americano, Mexicano or Matsicano padel session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four players with default names, Americano to 21
  padel-pairing

  # Eight named players, Mexicano to 32
  padel-pairing --players 8 --format mexicano --points 32 \\
      --names Ana Ben Cleo Dan Eva Finn Gus Hana
        """,
    )
    parser.add_argument(
        "--players",
        type=int,
        choices=SUPPORTED_PLAYER_COUNTS,
        default=DEFAULT_PLAYER_COUNT,
        help="Number of players",
    )
    parser.add_argument(
        "--points",
        type=int,
        default=DEFAULT_MATCH_POINTS,
        help="Points played per match",
    )
    parser.add_argument(
        "--format",
        dest="tournament_format",
        type=str.lower,
        choices=SUPPORTED_FORMATS,
        default=DEFAULT_FORMAT,
        help="Pairing format",
    )
    parser.add_argument("--names", nargs="*", help="Player names in order")
    parser.add_argument("--seed", type=int, help="Random seed for the first Mexicano round")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (overrides PADELPAIRING_LOG_LEVEL)",
    )
    return parser


def build_controller(args: argparse.Namespace) -> RoundController:
    """Create and start a controller from parsed arguments."""
    config = TournamentConfig(
        player_count=args.players,
        match_points=args.points,
        tournament_format=args.tournament_format,
        seed=args.seed,
    )
    controller = RoundController(config)
    controller.start_with_names(args.names or None)
    return controller


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the padel-pairing console."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    try:
        controller = build_controller(args)
    except PadelPairingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    return run_interactive_mode(controller, args.names or None)


if __name__ == "__main__":
    sys.exit(main())
