from __future__ import annotations

from roulette_table.types import (
    Basket,
    Bet,
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

NUMBER_SHAPES = {
    "split": Split,
    "street": Street,
    "basket": Basket,
    "topline": Topline,
    "corner": Corner,
    "doubleline": Doubleline,
}

SCALAR_SHAPES = {
    "straight": Straight,
    "dozens": Dozens,
    "columns": Columns,
    "evenodd": EvenOdd,
    "highlow": Highlow,
    "redblack": Redblack,
}

ALIASES: dict[str, BetShape] = {
    "red": Redblack(0),
    "black": Redblack(1),
    "even": EvenOdd(0),
    "odd": EvenOdd(1),
    "low": Highlow(0),
    "high": Highlow(1),
}


def parse_ints(s: str) -> list[int]:
    xs = [x.strip() for x in str(s).split(",") if x.strip()]
    for x in xs:
        if not x.lstrip("-").isdigit():
            raise ValueError(f"Not numeric: {x}")
    return [int(x) for x in xs]


def parse_shape(text: str) -> BetShape:
    """`straight:17`, `split:1,2`, `corner:1,2,4,5`, or an alias like `red`."""
    s = text.strip().lower()
    if s in ALIASES:
        return ALIASES[s]
    kind, sep, values = s.partition(":")
    if not sep:
        raise ValueError(f"Expected kind:values, got {text!r}")
    kind = kind.strip()
    nums = parse_ints(values)
    if kind in NUMBER_SHAPES:
        return NUMBER_SHAPES[kind](nums)
    if kind in SCALAR_SHAPES:
        if len(nums) != 1:
            raise ValueError(f"{kind} takes one value, got {text!r}")
        return SCALAR_SHAPES[kind](nums[0])
    raise ValueError(f"Unknown bet kind {kind!r} in {text!r}")


def parse_bet(text: str) -> Bet:
    """`<shape>@<wager>`, e.g. `split:1,2@10`."""
    shape_s, sep, wager_s = text.rpartition("@")
    if not sep:
        raise ValueError(f"Missing @wager in {text!r}")
    wager = wager_s.strip()
    if not wager.isdigit():
        raise ValueError(f"Wager must be a non-negative integer in {text!r}")
    return Bet(parse_shape(shape_s), int(wager))
