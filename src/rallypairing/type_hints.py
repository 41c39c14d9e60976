"""Type hints used in Rally Pairing."""

from typing import FrozenSet, List, Literal, Sequence, Tuple

# Pairing modes
Couples = Literal["couples"]
RoundRobin = Literal["round_robin"]
Mode = Literal["couples", "round_robin"]

# A participant is identified by its 1-based position in the pool
ParticipantId = int
Participants = List[ParticipantId]
# Participants sharing one court, in court order
Group = List[ParticipantId]
Groups = List[Group]
# Two participants grouped together (matchup or partners)
Pair = Tuple[ParticipantId, ParticipantId]
# Order-free ledger key for a pair
PairKey = FrozenSet[ParticipantId]
CourtNumbers = Sequence[int]

#  LocalWords:  RoundRobin
