"""Session statistics derived from generated rounds.

Statistics are a read-only pass over finished rounds: the spread of byes
between participants and how many groupings reused an earlier pair.
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

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from rallypairing.models.schedule.ledger import pair_key
from rallypairing.models.schedule.round_data import RoundData, group_pairs
from rallypairing.type_hints import PairKey, ParticipantId
from rallypairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class SessionStatistics:
    """Summary of a generated session."""

    min_byes: int = 0  # among participants with at least one bye
    max_byes: int = 0
    repeat_pair_count: int = 0  # excess groupings, not distinct pairs
    rounds: int = 0

    @property
    def bye_spread(self) -> int:
        return self.max_byes - self.min_byes

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "min_byes": self.min_byes,
            "max_byes": self.max_byes,
            "repeat_pair_count": self.repeat_pair_count,
            "rounds": self.rounds,
        }


def count_byes(rounds: Sequence[RoundData]) -> Counter:
    """Byes per participant across rounds. Only participants with a bye appear."""
    counts: Counter = Counter()
    for round_data in rounds:
        counts.update(round_data.byes)
    return counts


def count_pairings(
    rounds: Sequence[RoundData], mode: Optional[str] = None
) -> Dict[PairKey, int]:
    """Times each scored pair was grouped across rounds.

    Args:
        rounds: Finished rounds
        mode: Pairing mode; defaults to each round's own mode

    Returns:
        Mapping of unordered pair to grouping count
    """
    counts: Counter = Counter()
    for round_data in rounds:
        round_mode = mode or round_data.mode
        for assignment in round_data.courts:
            for first, second in group_pairs(assignment.group, round_mode):
                counts[pair_key(first, second)] += 1
    return dict(counts)


def analyze(
    rounds: Sequence[RoundData], mode: Optional[str] = None
) -> SessionStatistics:
    """Compute bye spread and repeated pairings of a session.

    A pair grouped ``n`` times adds ``n - 1`` to ``repeat_pair_count``.

    Args:
        rounds: Finished rounds (not modified)
        mode: Pairing mode; defaults to each round's own mode

    Returns:
        SessionStatistics with min/max byes (0/0 if nobody sat out)
    """
    bye_counts = count_byes(rounds)
    pair_counts = count_pairings(rounds, mode)

    repeats = sum(count - 1 for count in pair_counts.values() if count > 1)
    stats = SessionStatistics(
        min_byes=min(bye_counts.values()) if bye_counts else 0,
        max_byes=max(bye_counts.values()) if bye_counts else 0,
        repeat_pair_count=repeats,
        rounds=len(rounds),
    )
    logger.debug("Session statistics: %s", stats)
    return stats


def bye_table(
    rounds: Sequence[RoundData], participant_count: int
) -> Dict[ParticipantId, int]:
    """Bye count of every participant, including those with none."""
    counts = count_byes(rounds)
    return {p: counts.get(p, 0) for p in range(1, participant_count + 1)}
