import random
from collections import Counter

import pytest

from rallypairing import generate
from rallypairing.analysis import analyze
from rallypairing.constants import (
    ERROR_INVALID_COURT_LIST,
    ERROR_MISSING_COURT_LIST,
    ERROR_MISSING_GAME_COUNT,
    ERROR_MISSING_PARTICIPANT_COUNT,
    ERROR_UNKNOWN_MODE,
    MODE_COUPLES,
    MODE_ROUND_ROBIN,
    UNITS_PER_GROUP,
)
from rallypairing.models.schedule import ScheduleConfig


def _assert_partition(round_data, participant_count):
    on_court = round_data.participants()
    everyone = on_court + list(round_data.byes)
    assert len(everyone) == len(set(everyone))
    assert sorted(everyone) == list(range(1, participant_count + 1))


CASES = [
    (MODE_COUPLES, 14, [1, 2, 3, 4, 5, 6, 7, 8], 6),
    (MODE_COUPLES, 9, [2, 3, 5], 5),
    (MODE_COUPLES, 1, [1, 2], 2),
    (MODE_ROUND_ROBIN, 10, [1, 2], 6),
    (MODE_ROUND_ROBIN, 16, [4, 1, 7, 9], 4),
    (MODE_ROUND_ROBIN, 3, [1], 2),
]


@pytest.mark.parametrize("mode,participants,courts,games", CASES)
def test_every_round_partitions_participants(mode, participants, courts, games):
    result = generate(mode, participants, courts, games, rng=random.Random(11))

    assert result.error == ""
    assert len(result.rounds) == games
    for number, round_data in enumerate(result.rounds, start=1):
        assert round_data.round_number == number
        _assert_partition(round_data, participants)


@pytest.mark.parametrize("mode,participants,courts,games", CASES)
def test_group_sizes_and_court_order(mode, participants, courts, games):
    units = UNITS_PER_GROUP[mode]
    usable = min(len(courts), participants // units)

    result = generate(mode, participants, courts, games, rng=random.Random(5))

    for round_data in result.rounds:
        assert [a.court for a in round_data.courts] == courts[:usable]
        assert all(len(a.group) == units for a in round_data.courts)
        assert len(round_data.byes) == participants - usable * units


@pytest.mark.parametrize("mode,participants,courts", [
    (MODE_COUPLES, 11, [1, 2, 3]),
    (MODE_ROUND_ROBIN, 13, [1, 2]),
])
def test_bye_counts_stay_within_one(mode, participants, courts):
    result = generate(mode, participants, courts, 12, rng=random.Random(3))

    counts = Counter()
    for round_data in result.rounds:
        counts.update(round_data.byes)
        spread = [counts.get(p, 0) for p in range(1, participants + 1)]
        assert max(spread) - min(spread) <= 1


def test_ledger_matches_rounds():
    result = generate(MODE_ROUND_ROBIN, 9, [1, 2], 5, rng=random.Random(8))

    byes = Counter(p for r in result.rounds for p in r.byes)
    assert result.ledger.bye_counts == dict(byes)
    grouped = sum(result.ledger.pair_counts.values())
    assert grouped == sum(len(r.scored_pairs()) for r in result.rounds)


def test_scenario_single_court_couples_without_shuffling(no_shuffle_rng):
    result = generate(MODE_COUPLES, 4, [5], 1, rng=no_shuffle_rng)

    assert result.ok
    assert len(result.rounds) == 1
    round_data = result.rounds[0]
    assert len(round_data.courts) == 1
    assert round_data.courts[0].court == 5
    assert len(round_data.courts[0].group) == 2
    assert len(round_data.byes) == 2
    assert round_data.byes == [1, 2]
    assert round_data.courts[0].group == [3, 4]
    for participant in range(1, 5):
        assert result.ledger.bye_count(participant) in (0, 1)


def test_scenario_round_robin_two_full_courts(rng):
    result = generate(MODE_ROUND_ROBIN, 8, [1, 2], 1, rng=rng)

    round_data = result.rounds[0]
    assert round_data.byes == []
    assert [a.court for a in round_data.courts] == [1, 2]
    assert all(len(a.group) == 4 for a in round_data.courts)
    for assignment in round_data.courts:
        first, second = assignment.teams
        assert result.ledger.pair_count(*first) == 1
        assert result.ledger.pair_count(*second) == 1
    assert len(result.ledger.pair_counts) == 4


def test_scenario_more_participants_than_court_space(rng):
    result = generate(MODE_COUPLES, 10, [1], 1, rng=rng)

    round_data = result.rounds[0]
    assert len(round_data.courts) == 1
    assert len(round_data.courts[0].group) == 2
    assert len(round_data.byes) == 8


@pytest.mark.parametrize("courts,games", [([1], 1), ([], 0), ([1, 2], -3)])
def test_scenario_missing_participants(courts, games):
    result = generate(MODE_COUPLES, 0, courts, games)

    assert result.rounds == []
    assert result.error == ERROR_MISSING_PARTICIPANT_COUNT
    assert not result.ok


def test_scenario_unavoidable_repeat_is_reported(rng):
    result = generate(MODE_COUPLES, 4, [1], 3, rng=rng)

    stats = analyze(result.rounds, MODE_COUPLES)
    # rounds 1 and 3 must rest the same two couples, so the others meet twice
    assert stats.repeat_pair_count == 1
    assert stats.min_byes == 1
    assert stats.max_byes == 2
    assert result.rounds[2].repeats_used == 1
    assert result.rounds[0].repeats_used == 0


def test_search_avoids_repeats_when_room_exists():
    result = generate(MODE_COUPLES, 8, [1, 2, 3, 4], 3, rng=random.Random(2))

    stats = analyze(result.rounds, MODE_COUPLES)
    assert stats.repeat_pair_count == 0
    assert stats.min_byes == stats.max_byes == 0


@pytest.mark.parametrize(
    "mode,participants,courts,games,error",
    [
        (MODE_COUPLES, 4, [], 1, ERROR_MISSING_COURT_LIST),
        (MODE_COUPLES, 4, None, 1, ERROR_MISSING_COURT_LIST),
        (MODE_COUPLES, 4, [1, 1], 1, ERROR_INVALID_COURT_LIST),
        (MODE_COUPLES, 4, [0, 2], 1, ERROR_INVALID_COURT_LIST),
        (MODE_COUPLES, 4, [1], 0, ERROR_MISSING_GAME_COUNT),
        (MODE_COUPLES, -2, [1], 1, ERROR_MISSING_PARTICIPANT_COUNT),
        ("singles", 4, [1], 1, ERROR_UNKNOWN_MODE),
    ],
)
def test_invalid_requests_return_error_and_no_rounds(
    mode, participants, courts, games, error
):
    result = generate(mode, participants, courts, games)

    assert result.rounds == []
    assert result.error == error
    assert result.request is None


def test_same_seed_same_schedule():
    first = generate(MODE_ROUND_ROBIN, 11, [3, 1], 4, config=ScheduleConfig(seed=42))
    second = generate(MODE_ROUND_ROBIN, 11, [3, 1], 4, config=ScheduleConfig(seed=42))

    assert first.to_dict() == second.to_dict()


def test_request_is_returned_on_success(rng):
    result = generate(MODE_COUPLES, 7, [2, 4, 6, 8], 2, rng=rng)

    assert result.request.usable_courts == 3
    assert result.request.byes_needed == 1
    assert result.request.open_courts == [8]
