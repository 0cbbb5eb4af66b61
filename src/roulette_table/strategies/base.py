from __future__ import annotations
from abc import ABC, abstractmethod
from roulette_table.types import Bet


class Strategy(ABC):
    name: str

    @abstractmethod
    def generate_bets(self, budget: int) -> list[Bet]:
        raise NotImplementedError
