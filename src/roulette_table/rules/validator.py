"""
Structural legality of bet shapes on a single-zero felt.

Layout: 0 on top, then twelve rows of three (1-2-3, 4-5-6, ... 34-35-36).
Every rule on an array shape is written as offsets from its first number,
so the numbers must be given in ascending order. Nothing here sorts them.
"""
from __future__ import annotations

from roulette_table.types import (
    Basket,
    BetShape,
    Columns,
    Corner,
    Doubleline,
    Dozens,
    EvenOdd,
    Highlow,
    Redblack,
    Split,
    Straight,
    Street,
    Topline,
)

MAX_NUMBER = 36


def split_is_legal(a: int, b: int, strict: bool = True) -> bool:
    """
    Two adjacent pockets.

    strict=True applies the duplicate/range guard to every clause.
    strict=False keeps the legacy grouping, where the guard only gates the
    zero clause; the grid and bottom-row clauses then stand on their own
    (e.g. 36/37 passes).
    """
    guard = a != b and a <= 35 and b <= MAX_NUMBER and b > a
    with_zero = a == 0 and b in (1, 2, 3)
    grid = 0 < a <= 33 and (
        (b - a == 1 and (b % 3 == 0 or a % 3 == 1)) or b - a == 3
    )
    bottom_row = a >= 34 and b - a == 1
    if strict:
        return guard and (with_zero or grid or bottom_row)
    return (guard and with_zero) or grid or bottom_row


def street_is_legal(a: int, b: int, c: int) -> bool:
    return 0 < a <= 34 and (a - 1) % 3 == 0 and b - a == 1 and c - b == 1


def corner_is_legal(a: int, b: int, c: int, d: int) -> bool:
    return a > 0 and a % 3 != 0 and b - a == 1 and c - a == 3 and d - a == 4


def doubleline_is_legal(numbers: tuple[int, ...], adjacent: bool = False) -> bool:
    first, second = numbers[:3], numbers[3:]
    if not (street_is_legal(*first) and street_is_legal(*second)):
        return False
    return not adjacent or second[0] - first[0] == 3


def is_legal(shape: BetShape, *, strict_split: bool = True, adjacent_doubleline: bool = False) -> bool:
    match shape:
        case Straight(number=n):
            return 0 <= n <= MAX_NUMBER
        case Split(numbers=(a, b)):
            return split_is_legal(a, b, strict=strict_split)
        case Street(numbers=(a, b, c)):
            return street_is_legal(a, b, c)
        case Basket(numbers=(a, b, c)):
            return a == 0 and (b, c) in ((1, 2), (2, 3))
        case Topline(numbers=nums):
            return nums == (0, 1, 2, 3)
        case Corner(numbers=(a, b, c, d)):
            return corner_is_legal(a, b, c, d)
        case Doubleline(numbers=nums):
            return doubleline_is_legal(nums, adjacent=adjacent_doubleline)
        case Dozens(index=i) | Columns(index=i):
            return 1 <= i <= 3
        case EvenOdd(flag=f) | Highlow(flag=f) | Redblack(flag=f):
            return f in (0, 1)
    raise TypeError(f"Unknown bet shape: {shape!r}")
