import logging

from roulette_table.logging import ROOT, get_logger, log_rejected, log_spin
from roulette_table.errors import InvalidBetOption
from roulette_table.types import Bet, BetResult, Split, Straight


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_loggers_share_one_root_handler():
    a = get_logger("roulette_table.table")
    b = get_logger("elsewhere")
    assert a.name == "roulette_table.table"
    assert b.name == f"{ROOT}.elsewhere"
    assert len(logging.getLogger(ROOT).handlers) == 1
    assert not a.handlers and not b.handlers


def test_spin_and_rejection_lines():
    logger = get_logger("roulette_table.test_lines")
    h = ListHandler()
    logger.addHandler(h)
    logger.setLevel(logging.DEBUG)
    try:
        bet = Bet(Split([1, 2]), 10)
        log_spin(logger, 3, 2, [BetResult(bet, 0, 180), BetResult(Bet(Straight(9), 1), 1, 0)])
        log_rejected(logger, [InvalidBetOption(Bet(Split([0, 4]), 1))], 2)
    finally:
        logger.removeHandler(h)
    assert h.messages[0] == "Spin 3 -> 2 (bets=2, winners=1, paid=180)"
    assert h.messages[1] == "Rejected 1 of 2 bets, no spin"
    assert "Invalid Bet Option" in h.messages[2]
