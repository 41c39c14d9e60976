"""ScheduleConfig and GenerationRequest data classes."""

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

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rallypairing.constants import (
    COUPLES_SEARCH_ATTEMPTS,
    MODE_ROUND_ROBIN,
    REPEAT_WEIGHT,
    ROUND_ROBIN_SEARCH_ATTEMPTS,
    UNITS_PER_GROUP,
)
from rallypairing.exceptions import InvalidConfigurationException


@dataclass
class ScheduleConfig:
    """Tuning for the group formation search.

    Attributes
    ----------
    couples_attempts : int
        Random groupings sampled per round in couples mode.
    round_robin_attempts : int
        Random groupings sampled per round in round-robin mode.
    repeat_weight : int
        Penalty added per previous grouping of a scored pair.
    seed : int or None
        Seed for the random source; None draws a fresh seed.
    """

    couples_attempts: int = COUPLES_SEARCH_ATTEMPTS
    round_robin_attempts: int = ROUND_ROBIN_SEARCH_ATTEMPTS
    repeat_weight: int = REPEAT_WEIGHT
    seed: Optional[int] = None

    def __post_init__(self):
        if self.couples_attempts < 1 or self.round_robin_attempts < 1:
            raise InvalidConfigurationException(
                "Search attempts must be at least 1 "
                f"(got {self.couples_attempts}, {self.round_robin_attempts})"
            )
        if self.repeat_weight < 0:
            raise InvalidConfigurationException(
                f"Repeat weight cannot be negative (got {self.repeat_weight})"
            )

    def attempts_for(self, mode: str) -> int:
        """Search budget for a pairing mode."""
        if mode == MODE_ROUND_ROBIN:
            return self.round_robin_attempts
        return self.couples_attempts

    def make_rng(self) -> random.Random:
        """Random source for one generation run."""
        return random.Random(self.seed) if self.seed is not None else random.Random()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "couples_attempts": self.couples_attempts,
            "round_robin_attempts": self.round_robin_attempts,
            "repeat_weight": self.repeat_weight,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            couples_attempts=data.get("couples_attempts", COUPLES_SEARCH_ATTEMPTS),
            round_robin_attempts=data.get(
                "round_robin_attempts", ROUND_ROBIN_SEARCH_ATTEMPTS
            ),
            repeat_weight=data.get("repeat_weight", REPEAT_WEIGHT),
            seed=data.get("seed"),
        )


@dataclass(frozen=True)
class GenerationRequest:
    """Validated inputs of one generation call.

    Attributes
    ----------
    mode : str
        "couples" or "round_robin".
    participant_count : int
        Participants are numbered 1..participant_count.
    court_numbers : list of int
        Court labels in fill order.
    game_count : int
        Number of rounds to generate.
    """

    mode: str
    participant_count: int
    court_numbers: List[int] = field(default_factory=list)
    game_count: int = 1

    @property
    def units_per_group(self) -> int:
        return UNITS_PER_GROUP[self.mode]

    @property
    def usable_courts(self) -> int:
        """Courts that can be filled with the participants available."""
        return min(
            len(self.court_numbers), self.participant_count // self.units_per_group
        )

    @property
    def byes_needed(self) -> int:
        return max(0, self.participant_count - self.usable_courts * self.units_per_group)

    @property
    def open_courts(self) -> List[int]:
        """Courts left empty every round."""
        return list(self.court_numbers[self.usable_courts :])

    def participants(self) -> List[int]:
        return list(range(1, self.participant_count + 1))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "participant_count": self.participant_count,
            "court_numbers": list(self.court_numbers),
            "game_count": self.game_count,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationRequest":
        return cls(
            mode=data["mode"],
            participant_count=data["participant_count"],
            court_numbers=list(data.get("court_numbers", [])),
            game_count=data.get("game_count", 1),
        )
