from __future__ import annotations
from typing import Sequence

import numpy as np
from scipy.stats import chisquare

from roulette_table.random_source import POCKETS


def pocket_counts(history: Sequence[int]) -> np.ndarray:
    arr = np.asarray(history, dtype=np.int64)
    if arr.size and (arr.min() < 0 or arr.max() >= POCKETS):
        raise ValueError("History holds numbers outside 0..36")
    return np.bincount(arr, minlength=POCKETS)


def chi_square_uniformity(history: Sequence[int]) -> dict:
    """
    Pearson chi-square of the drawn numbers against a uniform 37-pocket wheel.

    A small p-value says the wheel looks biased. Needs at least one draw; with
    fewer than ~5 draws per pocket the approximation is rough.
    """
    counts = pocket_counts(history)
    n = int(counts.sum())
    if n == 0:
        raise ValueError("Empty history")
    res = chisquare(counts)
    return {
        "draws": n,
        "chi2": float(res.statistic),
        "p_value": float(res.pvalue),
        "counts": [int(c) for c in counts],
    }
