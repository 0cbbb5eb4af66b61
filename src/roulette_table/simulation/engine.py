from __future__ import annotations
from dataclasses import dataclass

import pandas as pd

from roulette_table.settlement.engine import colour
from roulette_table.strategies.base import Strategy
from roulette_table.table import Table

COLOUR_NAMES = {0: "red", 1: "black", 2: "green"}


@dataclass(frozen=True)
class SimulationConfig:
    spins: int
    budget: int


def run_simulation(table: Table, strategy: Strategy, cfg: SimulationConfig) -> pd.DataFrame:
    if cfg.spins < 1:
        raise ValueError("spins must be >= 1")

    rows = []
    for i in range(cfg.spins):
        bets = strategy.generate_bets(cfg.budget)
        number, results = table.spin(bets)

        stake = sum(b.wager for b in bets)
        payout = sum(r.win for r in results)
        rows.append(
            {
                "spin": i + 1,
                "number": number,
                "colour": COLOUR_NAMES[colour(number)],
                "stake": stake,
                "payout": payout,
                "profit": payout - stake,
                "hit": int(payout > 0),
            }
        )
    return pd.DataFrame(rows)
