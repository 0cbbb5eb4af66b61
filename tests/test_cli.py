from __future__ import annotations
from pathlib import Path

from typer.testing import CliRunner

from roulette_table.cli.main import app

runner = CliRunner()


def test_spin_command():
    res = runner.invoke(app, ["spin", "split:1,2@10", "red@5", "--seed", "4"])
    assert res.exit_code == 0, res.output
    assert "number" in res.output


def test_spin_rejects_bad_bets():
    res = runner.invoke(app, ["spin", "split:0,4@10", "straight:3@0"])
    assert res.exit_code == 1
    assert "Invalid Bet Option" in res.output
    assert "Minimum (1) not met" in res.output


def test_check_command():
    assert runner.invoke(app, ["check", "corner:1,2,4,5@1"]).exit_code == 0
    assert runner.invoke(app, ["check", "corner:3,4,6,7@1"]).exit_code == 1


def test_bad_notation():
    res = runner.invoke(app, ["check", "corner"])
    assert res.exit_code != 0


def test_simulate_command(tmp_path: Path):
    res = runner.invoke(
        app,
        ["simulate", "--strategy", "voisins", "--spins", "20", "--budget", "9", "--report-dir", str(tmp_path)],
    )
    assert res.exit_code == 0, res.output
    assert list(tmp_path.glob("*/summary.json"))


def test_payouts_command():
    res = runner.invoke(app, ["payouts"])
    assert res.exit_code == 0
    assert "straight" in res.output


def test_min_bet_below_one_is_a_usage_error():
    res = runner.invoke(app, ["check", "red@1", "--min-bet", "0"])
    assert res.exit_code == 2
    assert not isinstance(res.exception, ValueError)
    res = runner.invoke(app, ["spin", "red@1", "--min-bet", "0"])
    assert res.exit_code == 2


def test_simulate_needs_a_spin(tmp_path: Path):
    res = runner.invoke(app, ["simulate", "--spins", "0", "--report-dir", str(tmp_path)])
    assert res.exit_code == 2
    assert not isinstance(res.exception, ValueError)
    assert not list(tmp_path.iterdir())
