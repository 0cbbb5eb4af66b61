from __future__ import annotations
from typing import NamedTuple, Sequence

from roulette_table.config import CFG
from roulette_table.errors import BetsRejected, InvalidBetOption, MinBetNotSatisfied, PlaceBetError
from roulette_table.logging import get_logger, log_rejected, log_spin
from roulette_table.pricing.payouts import min_stake_factor
from roulette_table.random_source import RandomSource, SystemRandomSource
from roulette_table.rules.validator import is_legal
from roulette_table.settlement.engine import settle
from roulette_table.types import Bet, BetResult, BetShape

logger = get_logger(__name__)


class SpinOutcome(NamedTuple):
    number: int
    results: list[BetResult]


class Table:
    """
    One roulette table: the spin history, the minimum bet unit and the wheel.

    Not thread-safe. Callers sharing a table must serialize access to it.
    """

    def __init__(
        self,
        min_bet_unit: int = CFG.min_bet_unit,
        rng: RandomSource | None = None,
        strict_split: bool = CFG.strict_split,
        adjacent_doubleline: bool = CFG.adjacent_doubleline,
    ) -> None:
        if min_bet_unit < 1:
            raise ValueError(f"min_bet_unit must be >= 1, got {min_bet_unit}")
        self.min_bet_unit = min_bet_unit
        self.rng = rng if rng is not None else SystemRandomSource()
        self.strict_split = strict_split
        self.adjacent_doubleline = adjacent_doubleline
        self._history: list[int] = []

    @property
    def history(self) -> tuple[int, ...]:
        return tuple(self._history)

    def is_legal(self, shape: BetShape) -> bool:
        return is_legal(shape, strict_split=self.strict_split, adjacent_doubleline=self.adjacent_doubleline)

    def min_bet_for(self, shape: BetShape) -> int:
        return self.min_bet_unit * min_stake_factor(shape)

    def validate(self, bets: Sequence[Bet]) -> list[PlaceBetError]:
        errors: list[PlaceBetError] = []
        for bet in bets:
            if not self.is_legal(bet.shape):
                errors.append(InvalidBetOption(bet))
            elif bet.wager < self.min_bet_for(bet.shape):
                errors.append(MinBetNotSatisfied(bet, self.min_bet_for(bet.shape)))
        return errors

    def spin(self, bets: Sequence[Bet]) -> SpinOutcome:
        bets = list(bets)
        errors = self.validate(bets)
        if errors:
            log_rejected(logger, errors, len(bets))
            raise BetsRejected(errors)

        number = self.rng.draw()
        if not 0 <= number <= 36:
            raise ValueError(f"Random source drew {number}, outside 0..36")
        self._history.append(number)

        results = settle(number, bets)
        log_spin(logger, len(self._history), number, results)
        return SpinOutcome(number, results)
