import random

from rallypairing.models.schedule import PairingLedger
from rallypairing.pairing import select_byes


def _ledger_with_byes(counts):
    ledger = PairingLedger()
    ledger.bye_counts.update(counts)
    return ledger


def test_no_byes_needed_returns_full_pool_untouched(rng):
    ledger = _ledger_with_byes({1: 2})
    byes, remaining = select_byes([1, 2, 3, 4], ledger, 0, [1], rng)

    assert byes == []
    assert remaining == [1, 2, 3, 4]
    assert ledger.bye_counts == {1: 2}


def test_lowest_bye_counts_sit_out_first(rng):
    ledger = _ledger_with_byes({1: 2, 2: 0, 3: 1, 4: 0})
    byes, remaining = select_byes([1, 2, 3, 4], ledger, 2, None, rng)

    assert sorted(byes) == [2, 4]
    assert sorted(remaining) == [1, 3]
    assert ledger.bye_counts == {1: 2, 2: 1, 3: 1, 4: 1}


def test_remaining_keeps_pool_order(rng):
    byes, remaining = select_byes([5, 1, 4, 2, 3], PairingLedger(), 2, None, rng)

    expected = [p for p in [5, 1, 4, 2, 3] if p not in byes]
    assert remaining == expected


def test_previous_byes_avoided_when_alternatives_exist(rng):
    for _ in range(50):
        byes, _ = select_byes([1, 2, 3, 4], PairingLedger(), 2, [1, 2], rng)
        assert sorted(byes) == [3, 4]


def test_previous_byes_only_reorder_inside_a_bucket(rng):
    # 3 sat out last round but still has fewer byes than 5
    ledger = _ledger_with_byes({1: 0, 2: 0, 3: 1, 4: 1, 5: 2})
    for _ in range(50):
        trial = PairingLedger(bye_counts=dict(ledger.bye_counts))
        byes, _ = select_byes([1, 2, 3, 4, 5], trial, 3, [3], rng)
        assert sorted(byes) == [1, 2, 4]


def test_previous_bye_repeats_when_no_alternative(no_shuffle_rng):
    byes, _ = select_byes([1, 2, 3], PairingLedger(), 3, [1, 2, 3], no_shuffle_rng)

    assert sorted(byes) == [1, 2, 3]


def test_chosen_never_have_more_byes_than_players():
    rng = random.Random(7)
    pool = list(range(1, 13))
    for _ in range(200):
        start = {p: rng.randint(0, 3) for p in pool}
        ledger = _ledger_with_byes(start)
        needed = rng.randint(1, len(pool) - 1)

        byes, remaining = select_byes(pool, ledger, needed, rng.sample(pool, 3), rng)

        assert len(byes) == needed
        assert max(start[p] for p in byes) <= min(start[p] for p in remaining)
        for participant in pool:
            bumped = 1 if participant in byes else 0
            assert ledger.bye_count(participant) == start[participant] + bumped


def test_no_shuffle_takes_pool_order(no_shuffle_rng):
    byes, remaining = select_byes([1, 2, 3, 4], PairingLedger(), 2, None, no_shuffle_rng)

    assert byes == [1, 2]
    assert remaining == [3, 4]
