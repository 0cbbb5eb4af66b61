from __future__ import annotations
import logging
import sys
from typing import Sequence

from roulette_table.config import CFG
from roulette_table.errors import PlaceBetError
from roulette_table.types import BetResult

ROOT = "roulette_table"
FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Loggers live under `roulette_table`; only that root gets a handler."""
    root = logging.getLogger(ROOT)
    if not root.handlers:
        root.setLevel(getattr(logging, CFG.log_level.upper(), logging.INFO))
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(h)
        root.propagate = False
    if name == ROOT or name.startswith(ROOT + "."):
        return logging.getLogger(name)
    return root.getChild(name)


def log_rejected(logger: logging.Logger, errors: Sequence[PlaceBetError], batch_size: int) -> None:
    logger.warning("Rejected %s of %s bets, no spin", len(errors), batch_size)
    for e in errors:
        logger.debug("  %s", e)


def log_spin(logger: logging.Logger, spin_no: int, number: int, results: Sequence[BetResult]) -> None:
    winners = sum(1 for r in results if r.won)
    logger.debug(
        "Spin %s -> %s (bets=%s, winners=%s, paid=%s)",
        spin_no, number, len(results), winners, sum(r.win for r in results),
    )
