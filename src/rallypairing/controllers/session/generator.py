"""Single-call schedule generation."""

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
from typing import Any, Dict, List, Optional, Sequence

from rallypairing.controllers.session.round_manager import RoundManager
from rallypairing.models.schedule import (
    GenerationRequest,
    PairingLedger,
    RoundData,
    ScheduleConfig,
)
from rallypairing.utils import setup_logger
from rallypairing.utils.validation import validate_generation_request

logger = setup_logger(__name__)


@dataclass
class GenerationResult:
    """Rounds produced by :func:`generate`, or the reason there are none.

    Attributes
    ----------
    rounds : list of RoundData
        All requested rounds, or empty when ``error`` is set.
    error : str
        Empty on success; otherwise a message naming the bad input.
    ledger : PairingLedger
        Bye and pairing counters after the last round.
    request : GenerationRequest or None
        The validated request; None when validation failed.
    """

    rounds: List[RoundData] = field(default_factory=list)
    error: str = ""
    ledger: PairingLedger = field(default_factory=PairingLedger)
    request: Optional[GenerationRequest] = None

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rounds": [round_data.to_dict() for round_data in self.rounds],
            "error": self.error,
        }


def generate(
    mode: str,
    participant_count: int,
    court_numbers: Sequence[int],
    game_count: int,
    rng: Optional[random.Random] = None,
    config: Optional[ScheduleConfig] = None,
) -> GenerationResult:
    """Generate ``game_count`` rounds for a fresh session.

    Invalid input yields no rounds and a descriptive ``error``; nothing is
    raised for it. Once the input is valid every round is produced.

    Args:
        mode: "couples" or "round_robin"
        participant_count: Participants are numbered 1..participant_count
        court_numbers: Distinct court labels in fill order
        game_count: Number of rounds
        rng: Random source (seed it for reproducible schedules)
        config: Search tuning

    Returns:
        GenerationResult with the rounds and ledger, or an error message
    """
    validation = validate_generation_request(
        mode, participant_count, court_numbers, game_count
    )
    if not validation:
        logger.warning(f"Rejected generation request: {validation.error_message}")
        return GenerationResult(error=validation.error_message)

    request = GenerationRequest(mode, participant_count, list(court_numbers), game_count)
    manager = RoundManager(
        request.mode,
        request.participant_count,
        request.court_numbers,
        config=config,
        rng=rng,
    )
    rounds = manager.create_rounds(request.game_count)

    logger.info(
        f"Generated {len(rounds)} {mode} round(s) for {participant_count} "
        f"participants on {request.usable_courts} of {len(court_numbers)} court(s)"
    )
    return GenerationResult(rounds=rounds, ledger=manager.ledger, request=request)
