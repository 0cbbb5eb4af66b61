from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Iterable, Union

from roulette_table.pricing.payouts import win_value


@dataclass(frozen=True)
class NumbersShape:
    """Shape covering an explicit group of pockets, given in ascending order."""

    kind: ClassVar[str]
    size: ClassVar[int]
    numbers: tuple[int, ...]

    def __init__(self, numbers: Iterable[int]) -> None:
        nums = tuple(int(x) for x in numbers)
        if len(nums) != self.size:
            raise ValueError(f"{type(self).__name__} takes {self.size} numbers, got {len(nums)}: {nums}")
        object.__setattr__(self, "numbers", nums)

    def __str__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(n) for n in self.numbers)})"


@dataclass(frozen=True)
class FlagShape:
    kind: ClassVar[str]
    labels: ClassVar[tuple[str, str]]
    flag: int

    def __str__(self) -> str:
        label = self.labels[self.flag] if self.flag in (0, 1) else "INVALID"
        return f"{type(self).__name__}({label})"


@dataclass(frozen=True)
class Straight:
    kind: ClassVar[str] = "straight"
    number: int

    def __str__(self) -> str:
        return f"Straight({self.number})"


class Split(NumbersShape):
    kind = "split"
    size = 2


class Street(NumbersShape):
    kind = "street"
    size = 3


class Basket(NumbersShape):
    """0-1-2 or 0-2-3."""

    kind = "basket"
    size = 3


class Topline(NumbersShape):
    kind = "topline"
    size = 4


class Corner(NumbersShape):
    kind = "corner"
    size = 4


class Doubleline(NumbersShape):
    """Two streets, six numbers."""

    kind = "doubleline"
    size = 6


@dataclass(frozen=True)
class Dozens:
    """1 for 1-12, 2 for 13-24, 3 for 25-36."""

    kind: ClassVar[str] = "dozens"
    index: int

    def __str__(self) -> str:
        return f"Dozens({self.index})"


@dataclass(frozen=True)
class Columns:
    """Column named by its lowest number (1, 2 or 3)."""

    kind: ClassVar[str] = "columns"
    index: int

    def __str__(self) -> str:
        return f"Columns({self.index})"


class EvenOdd(FlagShape):
    kind = "evenodd"
    labels = ("even", "odd")


class Highlow(FlagShape):
    kind = "highlow"
    labels = ("1-18", "19-36")


class Redblack(FlagShape):
    kind = "redblack"
    labels = ("red", "black")


BetShape = Union[
    Straight, Split, Street, Basket, Topline, Corner, Doubleline,
    Dozens, Columns, EvenOdd, Highlow, Redblack,
]

SHAPES: tuple[type, ...] = (
    Straight, Split, Street, Basket, Topline, Corner, Doubleline,
    Dozens, Columns, EvenOdd, Highlow, Redblack,
)


@dataclass(frozen=True)
class Bet:
    shape: BetShape
    wager: int

    def __post_init__(self) -> None:
        if self.wager < 0:
            raise ValueError(f"Wager must be non-negative, got {self.wager}")

    def win_value(self) -> int:
        return win_value(self)

    def __str__(self) -> str:
        return f"type: {self.shape}, wager: {self.wager}"


@dataclass(frozen=True)
class BetResult:
    """Outcome of one bet; `index` is its position in the submitted batch."""

    bet: Bet
    index: int
    win: int

    @property
    def won(self) -> bool:
        return self.win > 0
