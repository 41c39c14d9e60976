"""Running bye and pairing counters for one schedule session."""

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
from typing import Any, Dict, Iterable

from rallypairing.models.schedule.round_data import RoundData
from rallypairing.type_hints import PairKey, ParticipantId


def pair_key(first: ParticipantId, second: ParticipantId) -> PairKey:
    """Order-free key for a pair of participants."""
    return frozenset({first, second})


@dataclass
class PairingLedger:
    """
    Tracks how often each participant sat out and each pair was grouped.

    Attributes
    ----------
    bye_counts : dict of int to int
        Number of byes received so far, per participant id. Participants
        without an entry have had no bye.
    pair_counts : dict of frozenset of int to int
        Number of times each unordered pair has been grouped: as a matchup
        in couples mode, as partners in round-robin mode.
    """

    bye_counts: Dict[ParticipantId, int] = field(default_factory=dict)
    pair_counts: Dict[PairKey, int] = field(default_factory=dict)

    def bye_count(self, participant_id: ParticipantId) -> int:
        """Byes received by a participant so far."""
        return self.bye_counts.get(participant_id, 0)

    def record_bye(self, participant_id: ParticipantId) -> None:
        """Count one more bye for a participant."""
        self.bye_counts[participant_id] = self.bye_count(participant_id) + 1

    def record_byes(self, participant_ids: Iterable[ParticipantId]) -> None:
        for participant_id in participant_ids:
            self.record_bye(participant_id)

    def pair_count(self, first: ParticipantId, second: ParticipantId) -> int:
        """Times two participants have been grouped together."""
        return self.pair_counts.get(pair_key(first, second), 0)

    def add_pairing(self, first: ParticipantId, second: ParticipantId) -> None:
        """Record that two participants have been grouped once more."""
        key = pair_key(first, second)
        self.pair_counts[key] = self.pair_counts.get(key, 0) + 1

    def have_paired(self, first: ParticipantId, second: ParticipantId) -> bool:
        """Check if two participants have been grouped before."""
        return self.pair_count(first, second) > 0

    def record_round(self, round_data: RoundData) -> None:
        """Add every scored pair of a finished round to the pair counts.

        Byes are not touched here; the bye allocator records them as it
        picks them.
        """
        for first, second in round_data.scored_pairs():
            self.add_pairing(first, second)

    def forget_round(self, round_data: RoundData) -> None:
        """Take a round's byes and scored pairs back off the counters."""
        for participant_id in round_data.byes:
            remaining = self.bye_count(participant_id) - 1
            if remaining > 0:
                self.bye_counts[participant_id] = remaining
            else:
                self.bye_counts.pop(participant_id, None)
        for first, second in round_data.scored_pairs():
            key = pair_key(first, second)
            remaining = self.pair_counts.get(key, 0) - 1
            if remaining > 0:
                self.pair_counts[key] = remaining
            else:
                self.pair_counts.pop(key, None)

    def clear(self) -> None:
        self.bye_counts.clear()
        self.pair_counts.clear()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the ledger to a dictionary."""
        return {
            "bye_counts": {str(k): v for k, v in sorted(self.bye_counts.items())},
            "pair_counts": [
                {"pair": sorted(pair), "count": count}
                for pair, count in sorted(
                    self.pair_counts.items(), key=lambda item: sorted(item[0])
                )
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingLedger":
        """Deserialize a ledger from a dictionary."""
        return cls(
            bye_counts={int(k): int(v) for k, v in data.get("bye_counts", {}).items()},
            pair_counts={
                frozenset(int(p) for p in entry["pair"]): int(entry["count"])
                for entry in data.get("pair_counts", [])
            },
        )
