"""Fair bye allocation."""

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
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from rallypairing.models.schedule.ledger import PairingLedger
from rallypairing.type_hints import ParticipantId, Participants
from rallypairing.utils import setup_logger

logger = setup_logger(__name__)


def _group_by_bye_count(
    pool: Sequence[ParticipantId], ledger: PairingLedger
) -> Dict[int, Participants]:
    """Bucket participants by bye count, keeping pool order in each bucket."""
    buckets: Dict[int, Participants] = defaultdict(list)
    for participant in pool:
        buckets[ledger.bye_count(participant)].append(participant)
    return buckets


def select_byes(
    pool: Sequence[ParticipantId],
    ledger: PairingLedger,
    byes_needed: int,
    previous_byes: Optional[Iterable[ParticipantId]] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[Participants, Participants]:
    """
    Choose who sits out this round.

    Participants with the fewest byes so far go first. Inside a bucket of
    equal bye counts the order is random, except that anyone who sat out
    the previous round is moved to the back of the bucket. That only
    matters when a bucket is split; it never lets a participant with more
    byes sit out ahead of one with fewer.

    Parameters
    ----------
        pool: Every participant of the round
        ledger: Bye history; chosen participants get their count bumped
        byes_needed: How many participants sit out
        previous_byes: Bye list of the preceding round, if any
        rng: Random source (a fresh ``random.Random`` if omitted)

    Returns
    -------
        (chosen byes, remaining pool in original order)
    """
    if byes_needed <= 0:
        return [], list(pool)

    rng = rng or random.Random()
    previous = set(previous_byes or ())
    buckets = _group_by_bye_count(pool, ledger)

    chosen: Participants = []
    for bye_count in sorted(buckets):
        if len(chosen) >= byes_needed:
            break
        bucket = buckets[bye_count]
        rested = [p for p in bucket if p not in previous]
        repeat = [p for p in bucket if p in previous]
        rng.shuffle(rested)
        rng.shuffle(repeat)
        take = byes_needed - len(chosen)
        chosen.extend((rested + repeat)[:take])

    ledger.record_byes(chosen)

    chosen_set = set(chosen)
    remaining = [p for p in pool if p not in chosen_set]
    logger.debug("Byes chosen: %s (needed %s)", chosen, byes_needed)
    return chosen, remaining
