from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roulette_table.types import Bet, BetShape

# Total returned on a winning bet, stake included, per unit wagered.
PAYOUT_MULTIPLIER: dict[str, int] = {
    "straight": 36,
    "split": 18,
    "street": 12,
    "basket": 12,
    "topline": 9,
    "corner": 9,
    "doubleline": 6,
    "dozens": 3,
    "columns": 3,
    "evenodd": 2,
    "highlow": 2,
    "redblack": 2,
}

# Scales the table's minimum bet unit per kind.
MIN_STAKE_FACTOR: dict[str, int] = {kind: 1 for kind in PAYOUT_MULTIPLIER}


def multiplier(shape: BetShape) -> int:
    return PAYOUT_MULTIPLIER[shape.kind]


def min_stake_factor(shape: BetShape) -> int:
    return MIN_STAKE_FACTOR[shape.kind]


def win_value(bet: Bet) -> int:
    return bet.wager * multiplier(bet.shape)
