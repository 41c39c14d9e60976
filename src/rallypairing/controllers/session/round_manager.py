"""Round-by-round schedule generation."""

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
from typing import List, Optional, Sequence

from rallypairing.models.schedule import (
    CourtAssignment,
    GenerationRequest,
    PairingLedger,
    RoundData,
    ScheduleConfig,
    group_pairs,
)
from rallypairing.pairing import search_groups, select_byes
from rallypairing.type_hints import Groups
from rallypairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Generates rounds one at a time against a shared ledger.

    This class is responsible for:
    - Choosing byes and forming court groups for each new round
    - Recording the chosen byes and pairs in the ledger
    - Keeping the list of generated rounds
    """

    def __init__(
        self,
        mode: str,
        participant_count: int,
        court_numbers: Sequence[int],
        ledger: Optional[PairingLedger] = None,
        config: Optional[ScheduleConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the round manager.

        Args:
            mode: Pairing mode ('couples' or 'round_robin')
            participant_count: Participants are numbered 1..participant_count
            court_numbers: Court labels in fill order
            ledger: Bye and pairing history; a new one if omitted
            config: Search tuning; defaults if omitted
            rng: Random source; built from ``config.seed`` if omitted
        """
        self.mode = mode
        self.participant_count = participant_count
        self.court_numbers = list(court_numbers)
        self.ledger = ledger if ledger is not None else PairingLedger()
        self.config = config or ScheduleConfig()
        self.rng = rng or self.config.make_rng()
        self.rounds: List[RoundData] = []

    @property
    def request(self) -> GenerationRequest:
        return GenerationRequest(
            mode=self.mode,
            participant_count=self.participant_count,
            court_numbers=list(self.court_numbers),
            game_count=max(1, len(self.rounds)),
        )

    @property
    def usable_courts(self) -> int:
        """Courts that can be filled each round."""
        return self.request.usable_courts

    @property
    def byes_needed(self) -> int:
        return self.request.byes_needed

    @property
    def current_round_number(self) -> int:
        """Number of the last generated round, or 0 before the first."""
        return len(self.rounds)

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            RoundData for the specified round, or None if invalid round number
        """
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def _count_repeats(self, groups: Groups) -> int:
        """Groups reusing a pair that was grouped in an earlier round."""
        return sum(
            1
            for group in groups
            if any(
                self.ledger.have_paired(first, second)
                for first, second in group_pairs(group, self.mode)
            )
        )

    def create_next_round(self) -> RoundData:
        """Generate, record and return the next round."""
        round_number = len(self.rounds) + 1
        pool = list(range(1, self.participant_count + 1))
        previous_byes = self.rounds[-1].byes if self.rounds else []

        byes, active = select_byes(
            pool, self.ledger, self.byes_needed, previous_byes, self.rng
        )
        self.rng.shuffle(active)

        search = search_groups(
            active,
            self.usable_courts,
            self.mode,
            self.ledger,
            self.rng,
            attempts=self.config.attempts_for(self.mode),
            repeat_weight=self.config.repeat_weight,
        )

        round_data = RoundData(
            round_number=round_number,
            mode=self.mode,
            courts=[
                CourtAssignment(court=court, group=group)
                for court, group in zip(self.court_numbers, search.groups)
            ],
            byes=byes,
            repeats_used=self._count_repeats(search.groups),
        )

        self.ledger.record_round(round_data)
        self.rounds.append(round_data)

        logger.debug(
            f"Round {round_number}: {len(round_data.courts)} court(s), "
            f"{len(byes)} bye(s), search score {search.score} "
            f"after {search.attempts_used} attempt(s)"
        )
        return round_data

    def create_rounds(self, count: int) -> List[RoundData]:
        """Generate ``count`` consecutive rounds."""
        return [self.create_next_round() for _ in range(count)]

    def undo_last_round(self) -> bool:
        """Remove the last round and take its byes and pairs off the ledger.

        Returns:
            True if a round was removed, False if there were none
        """
        if not self.rounds:
            logger.warning("Cannot undo: no rounds exist")
            return False

        last_round = self.rounds.pop()
        self.ledger.forget_round(last_round)

        logger.info(f"Undid round {last_round.round_number}")
        return True

    def reset(self) -> None:
        """Forget every round and clear the ledger."""
        self.rounds.clear()
        self.ledger.clear()
