import copy

from rallypairing.analysis import SessionStatistics, analyze, bye_table, count_pairings
from rallypairing.constants import MODE_COUPLES, MODE_ROUND_ROBIN
from rallypairing.models.schedule import CourtAssignment, RoundData, pair_key


def _round(number, mode, groups, byes=()):
    return RoundData(
        round_number=number,
        mode=mode,
        courts=[CourtAssignment(court=i + 1, group=list(g)) for i, g in enumerate(groups)],
        byes=list(byes),
    )


def _couples_session():
    return [
        _round(1, MODE_COUPLES, [[1, 2], [3, 4]], byes=[5]),
        _round(2, MODE_COUPLES, [[1, 2], [3, 5]], byes=[4]),
        _round(3, MODE_COUPLES, [[2, 1], [3, 4]], byes=[5]),
    ]


def test_couples_repeats_count_excess_groupings():
    stats = analyze(_couples_session())

    # {1,2} three times adds 2, {3,4} twice adds 1
    assert stats.repeat_pair_count == 3
    assert stats.rounds == 3


def test_min_byes_ignores_participants_without_byes():
    stats = analyze(_couples_session())

    assert stats.min_byes == 1
    assert stats.max_byes == 2
    assert stats.bye_spread == 1


def test_no_byes_reports_zero_zero():
    rounds = [_round(1, MODE_COUPLES, [[1, 2], [3, 4]])]

    stats = analyze(rounds)

    assert stats == SessionStatistics(min_byes=0, max_byes=0, repeat_pair_count=0, rounds=1)


def test_empty_session():
    assert analyze([]) == SessionStatistics()


def test_round_robin_counts_partners_only():
    rounds = [
        _round(1, MODE_ROUND_ROBIN, [[1, 2, 3, 4]]),
        _round(2, MODE_ROUND_ROBIN, [[1, 3, 2, 4]]),
        _round(3, MODE_ROUND_ROBIN, [[2, 1, 4, 3]]),
    ]

    stats = analyze(rounds, MODE_ROUND_ROBIN)

    # 1 and 3 faced each other in round 1 and partnered in round 2: no repeat
    assert stats.repeat_pair_count == 2
    assert stats.min_byes == 0
    assert stats.max_byes == 0


def test_matchup_order_does_not_matter():
    rounds = [_round(1, MODE_COUPLES, [[1, 2]]), _round(2, MODE_COUPLES, [[2, 1]])]

    assert analyze(rounds).repeat_pair_count == 1
    assert analyze(rounds, MODE_COUPLES).repeat_pair_count == 1


def test_count_pairings_uses_unordered_keys():
    counts = count_pairings(_couples_session())

    assert counts[pair_key(2, 1)] == 3
    assert counts[pair_key(4, 3)] == 2
    assert counts[pair_key(3, 5)] == 1


def test_analyze_does_not_modify_rounds_and_is_repeatable():
    rounds = _couples_session()
    before = copy.deepcopy(rounds)

    first = analyze(rounds)
    second = analyze(rounds)

    assert first == second
    assert rounds == before


def test_bye_table_lists_everyone():
    table = bye_table(_couples_session(), 6)

    assert table == {1: 0, 2: 0, 3: 0, 4: 1, 5: 2, 6: 0}


def test_statistics_to_dict():
    stats = analyze(_couples_session())

    assert stats.to_dict() == {
        "min_byes": 1,
        "max_byes": 2,
        "repeat_pair_count": 3,
        "rounds": 3,
    }
