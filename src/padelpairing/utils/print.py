"""
Plain-text rendering of a session view.
These helpers turn the dict returned by ``RoundController.view()`` into lines for the console.
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

from typing import Any, Dict, List

from padelpairing.constants import (
    MATCH_STATUS_COMPLETE,
    MATCH_STATUS_EMPTY,
    MATCH_STATUS_ERROR,
    MATCH_STATUS_INCOMPLETE,
)

STATUS_TEXT = {
    MATCH_STATUS_EMPTY: "",
    MATCH_STATUS_INCOMPLETE: "needs {needed} more",
    MATCH_STATUS_COMPLETE: "ok",
    MATCH_STATUS_ERROR: "too many points",
}


def format_round_header(view: Dict[str, Any]) -> List[str]:
    """Round label and the pairing explanation under it."""
    lines = [view["round_label"]]
    if view.get("pairing_explanation"):
        lines.append(view["pairing_explanation"])
    return lines


def format_match_status(match: Dict[str, Any]) -> str:
    text = STATUS_TEXT.get(match["status"], "")
    if match["status"] == MATCH_STATUS_INCOMPLETE:
        text = text.format(needed=match["points_needed"])
    if match["points_awarded"]:
        text = f"{text}, awarded" if text else "awarded"
    return text


def format_matches(view: Dict[str, Any]) -> List[str]:
    """One line per match: id, teams, scores and status.

    Example line::

        round-1-match-0  Ana & Ben  15 - 6  Cleo & Dan  [ok]
    """
    lines = []
    for match in view["matches"]:
        status = format_match_status(match)
        line = (
            f"{match['id']:<16} {match['team1_names']}  "
            f"{match['team1_score']:>2} - {match['team2_score']:<2}  "
            f"{match['team2_names']}"
        )
        if status:
            line += f"  [{status}]"
        lines.append(line)
    return lines


def format_leaderboard(view: Dict[str, Any]) -> List[str]:
    """Leaderboard table with shared ranks marked by ``=``."""
    entries = view["leaderboard"]
    if not entries:
        return ["No players yet"]

    width = max(len(entry["name"]) for entry in entries)
    lines = []
    for entry in entries:
        rank = f"{entry['rank']}{'=' if entry['tied'] else ''}"
        lines.append(f"{rank:>3}. {entry['name']:<{width}}  {entry['total_points']:>4}")
    return lines


def format_winner(view: Dict[str, Any]) -> str:
    """Winner announcement, or an empty string while the session runs."""
    winners = view["winners"]
    if not winners:
        return ""
    if view["tie_for_first"]:
        return f"Tie: {', '.join(winners)} with {view['winning_score']} points"
    return f"Winner: {winners[0]} with {view['winning_score']} points"
