from __future__ import annotations
import pandas as pd

def longest_losing_streak(hit: pd.Series) -> int:
    """Most consecutive spins that paid nothing."""
    lost = hit.astype(int).eq(0).reset_index(drop=True)
    if not lost.any():
        return 0
    # a new run id starts at every winning spin
    runs = (~lost).cumsum()
    return int(lost.groupby(runs).sum().max())

def summarize(per_spin: pd.DataFrame) -> dict:
    stake = int(per_spin["stake"].sum())
    payout = int(per_spin["payout"].sum())
    rtp = payout / stake if stake else 0.0
    return {
        "spins": int(len(per_spin)),
        "stake_total": stake,
        "payout_total": payout,
        "profit_total": int(per_spin["profit"].sum()),
        "rtp": float(rtp),
        "hit_rate": float((per_spin["hit"] > 0).mean()),
        "longest_losing_streak": longest_losing_streak(per_spin["hit"]),
    }
