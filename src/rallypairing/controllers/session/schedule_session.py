"""Schedule session that keeps its history between generation calls."""

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
from typing import Any, Dict, List, Optional, Sequence

from rallypairing.analysis import SessionStatistics, analyze, format_schedule
from rallypairing.controllers.session.round_manager import RoundManager
from rallypairing.exceptions import RoundNotFoundException
from rallypairing.models.schedule import PairingLedger, RoundData, ScheduleConfig
from rallypairing.utils import setup_logger
from rallypairing.utils.validation import (
    validate_court_numbers_strict,
    validate_game_count_strict,
    validate_mode_strict,
    validate_participant_count_strict,
)

logger = setup_logger(__name__)


class ScheduleSession:
    """A playing session that can be extended a few games at a time.

    New rounds continue the numbering, bye rotation and repeat avoidance of
    the rounds already generated. State lives in memory only.
    """

    def __init__(
        self,
        mode: str,
        participant_count: int,
        court_numbers: Sequence[int],
        config: Optional[ScheduleConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create an empty session.

        Raises:
            ModeValidationException: Unknown mode
            ParticipantCountValidationException: Count missing or not positive
            CourtListValidationException: Court list empty or malformed
        """
        validate_mode_strict(mode)
        validate_participant_count_strict(participant_count)
        courts = validate_court_numbers_strict(court_numbers)
        self.round_manager = RoundManager(
            mode, participant_count, courts, PairingLedger(), config, rng
        )

    @property
    def mode(self) -> str:
        return self.round_manager.mode

    @property
    def participant_count(self) -> int:
        return self.round_manager.participant_count

    @property
    def court_numbers(self) -> List[int]:
        return self.round_manager.court_numbers

    @property
    def ledger(self) -> PairingLedger:
        return self.round_manager.ledger

    @property
    def rounds(self) -> List[RoundData]:
        return list(self.round_manager.rounds)

    def generate_rounds(self, game_count: int) -> List[RoundData]:
        """Append ``game_count`` rounds and return just the new ones.

        Raises:
            GameCountValidationException: If game_count is not positive
        """
        validate_game_count_strict(game_count)
        new_rounds = self.round_manager.create_rounds(game_count)
        logger.info(
            f"Session now has {self.round_manager.current_round_number} round(s)"
        )
        return new_rounds

    def get_round(self, round_number: int) -> RoundData:
        """Get a generated round by number.

        Raises:
            RoundNotFoundException: If the round has not been generated
        """
        round_data = self.round_manager.get_round(round_number)
        if round_data is None:
            raise RoundNotFoundException(
                f"Round {round_number} does not exist "
                f"({self.round_manager.current_round_number} generated)"
            )
        return round_data

    def undo_last_round(self) -> bool:
        return self.round_manager.undo_last_round()

    def reset(self) -> None:
        """Drop all rounds and history."""
        self.round_manager.reset()
        logger.info("Session history cleared")

    def statistics(self) -> SessionStatistics:
        return analyze(self.round_manager.rounds, self.mode)

    def report(self) -> str:
        """Text report of every round plus session statistics."""
        return format_schedule(
            self.round_manager.rounds,
            self.participant_count,
            self.court_numbers,
            self.statistics(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode,
            "participant_count": self.participant_count,
            "court_numbers": list(self.court_numbers),
            "rounds": [round_data.to_dict() for round_data in self.round_manager.rounds],
            "statistics": self.statistics().to_dict(),
            "ledger": self.ledger.to_dict(),
        }
