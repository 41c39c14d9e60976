"""Partner selection for fixed-team round-robin courts."""

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

from typing import Sequence

from rallypairing.constants import REPEAT_WEIGHT
from rallypairing.exceptions import InvalidPairingException
from rallypairing.models.schedule.ledger import PairingLedger
from rallypairing.type_hints import Group, ParticipantId

# Index orders of the three ways to split four players into two partner
# pairs. Teams are always positions {0, 1} and {2, 3} of the result.
PARTNER_SPLITS = (
    (0, 1, 2, 3),
    (0, 2, 1, 3),
    (0, 3, 1, 2),
)


def partner_split_score(
    group: Sequence[ParticipantId],
    ledger: PairingLedger,
    repeat_weight: int = REPEAT_WEIGHT,
) -> int:
    """Repeat penalty of a four-player group's two partner pairs."""
    return repeat_weight * ledger.pair_count(
        group[0], group[1]
    ) + repeat_weight * ledger.pair_count(group[2], group[3])


def best_partner_split(
    four: Sequence[ParticipantId],
    ledger: PairingLedger,
    repeat_weight: int = REPEAT_WEIGHT,
) -> Group:
    """
    Reorder four players so the least repeated partnerships play together.

    Candidates are tried in the order of ``PARTNER_SPLITS`` and the first
    one with the lowest score wins. Who ends up opposite whom is not scored.

    Raises
    ------
        InvalidPairingException: If the group does not have four players
    """
    if len(four) != 4:
        raise InvalidPairingException(
            f"Round-robin courts need 4 players, got {len(four)}"
        )

    best: Group = []
    best_score = None
    for split in PARTNER_SPLITS:
        candidate = [four[i] for i in split]
        score = partner_split_score(candidate, ledger, repeat_weight)
        if best_score is None or score < best_score:
            best, best_score = candidate, score
    return best
