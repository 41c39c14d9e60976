"""Data model for one generated round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from rallypairing.constants import MODE_COUPLES, MODE_ROUND_ROBIN
from rallypairing.type_hints import Group, Pair, ParticipantId


def group_pairs(group: Sequence[ParticipantId], mode: str) -> List[Pair]:
    """Pairs of a court group that count towards repeat pairings.

    Couples mode scores the matchup itself. Round-robin mode scores the two
    partner pairs at positions {0, 1} and {2, 3}; opponents never count.
    """
    if mode == MODE_ROUND_ROBIN:
        return [(group[0], group[1]), (group[2], group[3])]
    return [(group[0], group[1])]


@dataclass
class CourtAssignment:
    """Participants placed on one court.

    Attributes
    ----------
    court : int
        Court label as supplied by the caller.
    group : list of int
        Participant ids in court order. Two ids in couples mode; four in
        round-robin mode, where ids 0-1 and 2-3 are the partner pairs.
    """

    court: int
    group: Group = field(default_factory=list)

    @property
    def teams(self) -> List[Group]:
        """Sides of the court: each couple, or each partner pair."""
        if len(self.group) == 4:
            return [self.group[:2], self.group[2:]]
        return [[participant] for participant in self.group]

    def to_dict(self) -> Dict[str, Any]:
        return {"court": self.court, "group": list(self.group)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourtAssignment":
        return cls(court=int(data["court"]), group=[int(p) for p in data["group"]])


@dataclass
class RoundData:
    """Container for all data related to a single generated round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    mode : str
        Pairing mode the round was generated for.
    courts : list of CourtAssignment
        One entry per usable court, in the caller's court order.
    byes : list of int
        Participants sitting out this round.
    repeats_used : int
        Court groups that reuse a pair already grouped in an earlier round.
    """

    round_number: int
    mode: str = MODE_COUPLES
    courts: List[CourtAssignment] = field(default_factory=list)
    byes: List[ParticipantId] = field(default_factory=list)
    repeats_used: int = 0

    def participants(self) -> List[ParticipantId]:
        """Everyone on court this round, in court order."""
        return [p for assignment in self.courts for p in assignment.group]

    def scored_pairs(self) -> List[Pair]:
        """All pairs of this round that feed the pairing counts."""
        return [
            pair
            for assignment in self.courts
            for pair in group_pairs(assignment.group, self.mode)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "mode": self.mode,
            "courts": [assignment.to_dict() for assignment in self.courts],
            "byes": list(self.byes),
            "repeats_used": self.repeats_used,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            mode=data.get("mode", MODE_COUPLES),
            courts=[CourtAssignment.from_dict(c) for c in data.get("courts", [])],
            byes=[int(p) for p in data.get("byes", [])],
            repeats_used=data.get("repeats_used", 0),
        )
