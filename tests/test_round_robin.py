import pytest

from rallypairing.exceptions import InvalidPairingException
from rallypairing.models.schedule import PairingLedger
from rallypairing.pairing import best_partner_split, partner_split_score


def test_empty_history_keeps_first_candidate():
    assert best_partner_split([1, 2, 3, 4], PairingLedger()) == [1, 2, 3, 4]


def test_switches_to_second_split_when_first_repeats():
    ledger = PairingLedger()
    ledger.add_pairing(1, 2)

    assert best_partner_split([1, 2, 3, 4], ledger) == [1, 3, 2, 4]


def test_third_split_when_first_two_repeat():
    ledger = PairingLedger()
    for first, second in [(1, 2), (3, 4), (1, 3), (2, 4)]:
        ledger.add_pairing(first, second)

    assert best_partner_split([1, 2, 3, 4], ledger) == [1, 4, 2, 3]


def test_lowest_total_wins_over_order():
    ledger = PairingLedger()
    for _ in range(3):
        ledger.add_pairing(1, 2)
    ledger.add_pairing(1, 3)
    ledger.add_pairing(2, 3)
    ledger.add_pairing(1, 4)

    # scores: 30, 10, 20
    assert best_partner_split([1, 2, 3, 4], ledger) == [1, 3, 2, 4]


def test_opponent_history_is_ignored():
    ledger = PairingLedger()
    ledger.add_pairing(1, 3)
    ledger.add_pairing(2, 4)

    # 1-3 and 2-4 are opponents in the first split, so it stays
    assert best_partner_split([1, 2, 3, 4], ledger) == [1, 2, 3, 4]


def test_split_uses_the_given_order():
    ledger = PairingLedger()
    ledger.add_pairing(7, 5)

    assert best_partner_split([7, 5, 9, 2], ledger) == [7, 9, 5, 2]


def test_partner_split_score():
    ledger = PairingLedger()
    ledger.add_pairing(1, 2)
    ledger.add_pairing(4, 3)
    ledger.add_pairing(4, 3)

    assert partner_split_score([1, 2, 3, 4], ledger) == 30
    assert partner_split_score([1, 2, 3, 4], ledger, repeat_weight=1) == 3


@pytest.mark.parametrize("group", [[1, 2, 3], [1, 2, 3, 4, 5]])
def test_wrong_group_size_raises(group):
    with pytest.raises(InvalidPairingException):
        best_partner_split(group, PairingLedger())
