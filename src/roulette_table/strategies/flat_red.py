from __future__ import annotations
from roulette_table.strategies.base import Strategy
from roulette_table.types import Bet, Redblack

class FlatRed(Strategy):
    name = "flat_red"

    def generate_bets(self, budget: int) -> list[Bet]:
        n = max(0, int(budget))
        return [Bet(Redblack(0), n)] if n else []
