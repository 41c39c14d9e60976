"""Court group formation with repeat avoidance.

Sampling search: shuffle the active participants, cut them into court
groups, score the grouping by how often its pairs were grouped before, and
keep the best grouping seen within a fixed attempt budget.
"""

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
from typing import Optional, Sequence

from rallypairing.constants import (
    COUPLES_SEARCH_ATTEMPTS,
    MODE_COUPLES,
    MODE_ROUND_ROBIN,
    REPEAT_WEIGHT,
    ROUND_ROBIN_SEARCH_ATTEMPTS,
    UNITS_PER_GROUP,
)
from rallypairing.exceptions import InvalidPairingException
from rallypairing.models.schedule.ledger import PairingLedger
from rallypairing.models.schedule.round_data import group_pairs
from rallypairing.pairing.round_robin import best_partner_split
from rallypairing.type_hints import Groups, ParticipantId
from rallypairing.utils import setup_logger

logger = setup_logger(__name__)

DEFAULT_ATTEMPTS = {
    MODE_COUPLES: COUPLES_SEARCH_ATTEMPTS,
    MODE_ROUND_ROBIN: ROUND_ROBIN_SEARCH_ATTEMPTS,
}


@dataclass
class GroupSearchResult:
    """Outcome of one group formation search."""

    groups: Groups = field(default_factory=list)
    score: int = 0
    attempts_used: int = 0


def score_groups(
    groups: Groups,
    mode: str,
    ledger: PairingLedger,
    repeat_weight: int = REPEAT_WEIGHT,
) -> int:
    """Total repeat penalty of a grouping. Zero means no repeats."""
    return sum(
        repeat_weight * ledger.pair_count(first, second)
        for group in groups
        for first, second in group_pairs(group, mode)
    )


def search_groups(
    remaining: Sequence[ParticipantId],
    courts_to_use: int,
    mode: str,
    ledger: PairingLedger,
    rng: Optional[random.Random] = None,
    attempts: Optional[int] = None,
    repeat_weight: int = REPEAT_WEIGHT,
) -> GroupSearchResult:
    """Run the bounded search and report score and attempts used.

    Raises:
        InvalidPairingException: If fewer participants remain than the
            courts need, or the attempt budget is not positive
    """
    units = UNITS_PER_GROUP[mode]
    needed = courts_to_use * units
    if courts_to_use <= 0:
        return GroupSearchResult()
    if len(remaining) < needed:
        raise InvalidPairingException(
            f"{courts_to_use} court(s) need {needed} participants, "
            f"only {len(remaining)} available"
        )

    if attempts is None:
        attempts = DEFAULT_ATTEMPTS[mode]
    if attempts < 1:
        raise InvalidPairingException(f"Attempt budget must be positive: {attempts}")

    rng = rng or random.Random()
    pool = list(remaining[:needed])
    best = GroupSearchResult()
    best_score = None

    for attempt in range(1, attempts + 1):
        order = pool[:]
        rng.shuffle(order)
        groups = [order[i : i + units] for i in range(0, needed, units)]
        if mode == MODE_ROUND_ROBIN:
            groups = [best_partner_split(g, ledger, repeat_weight) for g in groups]

        score = score_groups(groups, mode, ledger, repeat_weight)
        if best_score is None or score < best_score:
            best_score = score
            best = GroupSearchResult(groups=groups, score=score, attempts_used=attempt)
            if score == 0:
                break
    else:
        best.attempts_used = attempts

    logger.debug(
        "Group search (%s): score %s after %s attempt(s)",
        mode,
        best.score,
        best.attempts_used,
    )
    return best


def form_groups(
    remaining: Sequence[ParticipantId],
    courts_to_use: int,
    mode: str,
    ledger: PairingLedger,
    rng: Optional[random.Random] = None,
    attempts: Optional[int] = None,
    repeat_weight: int = REPEAT_WEIGHT,
) -> Groups:
    """
    Split active participants into ``courts_to_use`` court groups.

    Only the first ``courts_to_use * units_per_group`` participants are
    used. The search stops at the first grouping with no repeats; otherwise
    the lowest-scoring grouping found first is returned. The ledger is only
    read; the caller records the chosen pairs once the round is final.

    Parameters
    ----------
        remaining: Participants not on bye
        courts_to_use: Number of groups to form
        mode: "couples" (groups of 2) or "round_robin" (groups of 4)
        ledger: Pairing history used for scoring
        rng: Random source
        attempts: Search budget (400 for couples, 1000 for round-robin by default)
        repeat_weight: Penalty per previous grouping of a pair

    Returns
    -------
        List of ``courts_to_use`` groups
    """
    return search_groups(
        remaining, courts_to_use, mode, ledger, rng, attempts, repeat_weight
    ).groups
