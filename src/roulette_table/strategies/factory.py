from __future__ import annotations
from roulette_table.strategies.base import Strategy
from roulette_table.strategies.flat_red import FlatRed
from roulette_table.strategies.random_straights import RandomStraights
from roulette_table.strategies.voisins import Voisins


def create_strategy(name: str, seed: int = 0) -> Strategy:
    n = name.strip().lower()
    if n == "flat_red":
        return FlatRed()
    if n == "random_straights":
        return RandomStraights(seed=seed)
    if n == "voisins":
        return Voisins()
    raise ValueError(f"Unknown strategy: {name}")
