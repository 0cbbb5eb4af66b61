import pytest

from roulette_table.settlement.engine import BLACK, GREEN, RED, colour, is_hit, settle
from roulette_table.types import (
    Basket, Bet, Columns, Corner, Doubleline, Dozens, EvenOdd, Highlow, Redblack, Split, Straight,
    Street, Topline,
)


def test_colours():
    assert colour(0) == GREEN
    codes = [colour(n) for n in range(1, 37)]
    assert codes.count(RED) == 18
    assert codes.count(BLACK) == 18
    assert colour(1) == RED
    assert colour(2) == BLACK
    assert colour(36) == RED


def test_full_table_on_two():
    wager = 10
    bets = [
        Bet(Straight(1), wager),
        Bet(Split([1, 2]), wager),
        Bet(Street([1, 2, 3]), wager),
        Bet(Basket([0, 1, 2]), wager),
        Bet(Topline([0, 1, 2, 3]), wager),
        Bet(Corner([1, 2, 4, 5]), wager),
        Bet(Doubleline([1, 2, 3, 4, 5, 6]), wager),
        Bet(Dozens(1), wager),
        Bet(Columns(1), wager),
        Bet(EvenOdd(0), wager),
        Bet(Highlow(0), wager),
        Bet(Redblack(1), wager),
    ]
    results = settle(2, bets)
    assert [r.win for r in results] == [0, 180, 120, 120, 90, 90, 60, 30, 0, 20, 20, 20]
    assert sum(r.win for r in results) == 750
    assert [r.index for r in results] == list(range(len(bets)))
    assert all(r.bet is b for r, b in zip(results, bets))


def test_zero_loses_outside_bets():
    for shape in (Redblack(0), Redblack(1), Dozens(1), Columns(3), Highlow(0), Highlow(1)):
        assert not is_hit(shape, 0)
    assert is_hit(Straight(0), 0)
    assert is_hit(Basket([0, 2, 3]), 0)


def test_dozens_boundaries():
    assert is_hit(Dozens(1), 12)
    assert not is_hit(Dozens(1), 13)
    assert is_hit(Dozens(2), 13)
    assert is_hit(Dozens(3), 36)


def test_columns():
    assert is_hit(Columns(1), 34)
    assert is_hit(Columns(2), 35)
    assert is_hit(Columns(3), 36)
    assert not is_hit(Columns(3), 35)


def test_highlow_boundaries():
    assert is_hit(Highlow(0), 18)
    assert not is_hit(Highlow(0), 19)
    assert is_hit(Highlow(1), 19)


def test_no_partial_credit():
    for n in range(37):
        for r in settle(n, [Bet(Corner([1, 2, 4, 5]), 3)]):
            assert r.win == (27 if n in (1, 2, 4, 5) else 0)


def test_illegal_shape_still_evaluated():
    [r] = settle(7, [Bet(Split([7, 30]), 1)])
    assert r.win == 18


def test_empty_batch():
    assert settle(5, []) == []


def test_out_of_range_number():
    with pytest.raises(ValueError):
        settle(37, [])
