from __future__ import annotations
from dataclasses import dataclass

from roulette_table.types import Bet


@dataclass(frozen=True)
class PlaceBetError:
    bet: Bet


@dataclass(frozen=True)
class InvalidBetOption(PlaceBetError):
    def __str__(self) -> str:
        return f"Invalid Bet Option: {self.bet}"


@dataclass(frozen=True)
class MinBetNotSatisfied(PlaceBetError):
    minimum: int

    def __str__(self) -> str:
        return f"Minimum ({self.minimum}) not met for option {self.bet}"


@dataclass(frozen=True)
class MaxBetOnOption(PlaceBetError):
    # Reserved for a per-option ceiling; no current rule produces it.
    maximum: int

    def __str__(self) -> str:
        return f"Max bet of {self.maximum} reached on option {self.bet}"


class BetsRejected(ValueError):
    """Raised by Table.spin when any bet in the batch fails admission."""

    def __init__(self, errors: list[PlaceBetError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))
