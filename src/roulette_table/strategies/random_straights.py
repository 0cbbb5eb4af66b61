from __future__ import annotations
import random
from roulette_table.strategies.base import Strategy
from roulette_table.types import Bet, Straight

class RandomStraights(Strategy):
    name = "random_straights"

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def generate_bets(self, budget: int) -> list[Bet]:
        n = max(0, int(budget))
        nums = self.rng.sample(range(37), k=min(n, 37))
        return [Bet(Straight(x), 1) for x in sorted(nums)]
