import pytest

from rallypairing.constants import MODE_COUPLES, MODE_ROUND_ROBIN
from rallypairing.exceptions import InvalidPairingException
from rallypairing.models.schedule import PairingLedger
from rallypairing.pairing import form_groups, score_groups, search_groups


def _ledger_with_pairs(*pairs, times=1):
    ledger = PairingLedger()
    for first, second in pairs:
        for _ in range(times):
            ledger.add_pairing(first, second)
    return ledger


def test_couples_groups_have_two_members(rng):
    groups = form_groups(list(range(1, 11)), 5, MODE_COUPLES, PairingLedger(), rng)

    assert len(groups) == 5
    assert all(len(group) == 2 for group in groups)
    assert sorted(p for group in groups for p in group) == list(range(1, 11))


def test_only_the_first_needed_participants_are_used(rng):
    groups = form_groups([1, 2, 3, 4, 5, 6], 2, MODE_COUPLES, PairingLedger(), rng)

    assert sorted(p for group in groups for p in group) == [1, 2, 3, 4]


def test_round_robin_groups_have_four_members(rng):
    groups = form_groups(list(range(1, 13)), 3, MODE_ROUND_ROBIN, PairingLedger(), rng)

    assert len(groups) == 3
    assert all(len(group) == 4 for group in groups)
    assert sorted(p for group in groups for p in group) == list(range(1, 13))


def test_zero_courts_form_no_groups(rng):
    assert form_groups([1, 2, 3], 0, MODE_ROUND_ROBIN, PairingLedger(), rng) == []


def test_too_few_participants_for_courts_raises(rng):
    with pytest.raises(InvalidPairingException):
        form_groups([1, 2, 3], 1, MODE_ROUND_ROBIN, PairingLedger(), rng)


def test_non_positive_attempt_budget_raises(rng):
    with pytest.raises(InvalidPairingException):
        form_groups([1, 2], 1, MODE_COUPLES, PairingLedger(), rng, attempts=0)


def test_repeated_matchup_avoided(rng):
    ledger = _ledger_with_pairs((1, 2), times=5)
    for _ in range(20):
        groups = form_groups([1, 2, 3, 4], 2, MODE_COUPLES, ledger, rng)
        assert sorted(sorted(g) for g in groups) != [[1, 2], [3, 4]]
        assert score_groups(groups, MODE_COUPLES, ledger) == 0


def test_search_stops_at_first_repeat_free_grouping(rng):
    result = search_groups(list(range(1, 9)), 4, MODE_COUPLES, PairingLedger(), rng)

    assert result.score == 0
    assert result.attempts_used == 1


def test_search_uses_whole_budget_when_repeats_unavoidable(rng):
    ledger = _ledger_with_pairs((1, 2))

    result = search_groups([1, 2], 1, MODE_COUPLES, ledger, rng, attempts=25)

    assert result.groups in ([[1, 2]], [[2, 1]])
    assert result.score == 10
    assert result.attempts_used == 25


def test_repeat_weight_scales_score():
    ledger = _ledger_with_pairs((1, 2), times=3)

    assert score_groups([[1, 2]], MODE_COUPLES, ledger) == 30
    assert score_groups([[2, 1]], MODE_COUPLES, ledger, repeat_weight=1) == 3


def test_round_robin_scores_partners_not_opponents():
    # 1-3 and 2-4 only ever faced each other
    ledger = _ledger_with_pairs((1, 3), (2, 4), times=4)

    assert score_groups([[1, 2, 3, 4]], MODE_ROUND_ROBIN, ledger) == 0
    assert score_groups([[1, 3, 2, 4]], MODE_ROUND_ROBIN, ledger) == 80


def test_round_robin_search_avoids_partner_repeats(rng):
    ledger = _ledger_with_pairs((1, 2), (3, 4), (5, 6), (7, 8), times=2)

    groups = form_groups(list(range(1, 9)), 2, MODE_ROUND_ROBIN, ledger, rng)

    assert score_groups(groups, MODE_ROUND_ROBIN, ledger) == 0
    for group in groups:
        partners = {frozenset(group[:2]), frozenset(group[2:])}
        assert frozenset({1, 2}) not in partners
        assert frozenset({3, 4}) not in partners


def test_search_does_not_touch_ledger(rng):
    ledger = _ledger_with_pairs((1, 2))
    before = ledger.to_dict()

    form_groups([1, 2, 3, 4], 2, MODE_COUPLES, ledger, rng)

    assert ledger.to_dict() == before
