"""Plain-text rendering of a generated schedule."""

# Rally Pairing
# Copyright (C) 2026  Rally Pairing developers
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

from typing import List, Optional, Sequence

from rallypairing.analysis.metrics import SessionStatistics, bye_table
from rallypairing.constants import MODE_COUPLES, PARTICIPANT_LABELS
from rallypairing.models.schedule.round_data import CourtAssignment, RoundData
from rallypairing.type_hints import ParticipantId


def participant_label(participant_id: ParticipantId, mode: str = MODE_COUPLES) -> str:
    """Default display name, e.g. ``Couple 3`` or ``Player 7``."""
    return f"{PARTICIPANT_LABELS.get(mode, 'Player')} {participant_id}"


def format_court(assignment: CourtAssignment, mode: str) -> str:
    sides = [
        " & ".join(participant_label(p, mode) for p in team)
        for team in assignment.teams
    ]
    return f"Court {assignment.court}: {' vs '.join(sides)}"


def format_round(
    round_data: RoundData, court_numbers: Optional[Sequence[int]] = None
) -> List[str]:
    """Lines for one round. Courts in ``court_numbers`` left unused show as OPEN."""
    mode = round_data.mode
    lines = [f"ROUND {round_data.round_number}"]
    if not round_data.courts:
        lines.append("(No playable courts)")

    lines.extend(format_court(assignment, mode) for assignment in round_data.courts)

    used = {assignment.court for assignment in round_data.courts}
    lines.extend(
        f"Court {court}: OPEN" for court in (court_numbers or []) if court not in used
    )

    if round_data.byes:
        lines.append(
            "Byes: " + ", ".join(participant_label(p, mode) for p in round_data.byes)
        )
    if round_data.repeats_used:
        plural = "" if round_data.repeats_used == 1 else "s"
        lines.append(
            f"(Used {round_data.repeats_used} repeat pairing{plural}, unavoidable)"
        )
    return lines


def format_schedule(
    rounds: Sequence[RoundData],
    participant_count: int,
    court_numbers: Optional[Sequence[int]] = None,
    statistics: Optional[SessionStatistics] = None,
) -> str:
    """Render rounds, optional statistics and the bye table as text.

    The bye table lists every participant, sorted by bye count and then
    by participant number.
    """
    lines: List[str] = []
    for round_data in rounds:
        lines.extend(format_round(round_data, court_numbers))
        lines.append("")

    if statistics is not None:
        lines.append("SESSION")
        lines.append(f"Byes per participant: {statistics.min_byes}-{statistics.max_byes}")
        lines.append(f"Repeat pairings: {statistics.repeat_pair_count}")
        lines.append("")

    mode = rounds[0].mode if rounds else MODE_COUPLES
    table = bye_table(rounds, participant_count)
    if table:
        lines.append("BYE COUNTS (fair rotation)")
        for participant, count in sorted(table.items(), key=lambda item: (item[1], item[0])):
            lines.append(f"{participant_label(participant, mode)}: {count}")

    return "\n".join(lines)
