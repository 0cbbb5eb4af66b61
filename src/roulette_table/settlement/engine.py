from __future__ import annotations
from typing import Iterable

from roulette_table.types import (
    Bet,
    BetResult,
    BetShape,
    Columns,
    Dozens,
    EvenOdd,
    Highlow,
    Redblack,
    Straight,
    NumbersShape,
)

RED, BLACK, GREEN = 0, 1, 2

RED_NUMBERS = frozenset({1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36})


def colour(number: int) -> int:
    if number == 0:
        return GREEN
    return RED if number in RED_NUMBERS else BLACK


def is_hit(shape: BetShape, winning_number: int, colour_code: int | None = None) -> bool:
    w = winning_number
    match shape:
        case Straight(number=n):
            return n == w
        case Dozens(index=i):
            # zero sits in no dozen
            return w > 0 and (w - 1) // 12 == i - 1
        case Columns(index=i):
            return w > 0 and w % 3 == i % 3
        case EvenOdd(flag=f):
            return w % 2 == f
        case Highlow(flag=f):
            return (f == 0 and 1 <= w <= 18) or (f == 1 and 19 <= w <= 36)
        case Redblack(flag=f):
            # GREEN never equals a legal flag, so zero loses red and black alike
            return f == (colour(w) if colour_code is None else colour_code)
        case NumbersShape(numbers=nums):
            return w in nums
    raise TypeError(f"Unknown bet shape: {shape!r}")


def settle(winning_number: int, bets: Iterable[Bet]) -> list[BetResult]:
    if not 0 <= winning_number <= 36:
        raise ValueError(f"Winning number out of range: {winning_number}")
    c = colour(winning_number)
    results: list[BetResult] = []
    for i, bet in enumerate(bets):
        hit = is_hit(bet.shape, winning_number, c)
        results.append(BetResult(bet=bet, index=i, win=bet.win_value() if hit else 0))
    return results
