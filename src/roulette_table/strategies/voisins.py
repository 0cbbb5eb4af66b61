from __future__ import annotations
from roulette_table.strategies.base import Strategy
from roulette_table.types import Basket, Bet, BetShape, Corner, Split

# Voisins du zero: 17 pockets either side of zero on the wheel, nine chips.
# The basket and the corner carry two chips each.
VOISINS: list[tuple[BetShape, int]] = [
    (Basket([0, 2, 3]), 2),
    (Split([4, 7]), 1),
    (Split([12, 15]), 1),
    (Split([18, 21]), 1),
    (Split([19, 22]), 1),
    (Split([32, 35]), 1),
    (Corner([25, 26, 28, 29]), 2),
]

CHIPS = sum(c for _, c in VOISINS)


class Voisins(Strategy):
    name = "voisins"

    def generate_bets(self, budget: int) -> list[Bet]:
        unit = max(1, int(budget) // CHIPS)
        return [Bet(shape, chips * unit) for shape, chips in VOISINS]
