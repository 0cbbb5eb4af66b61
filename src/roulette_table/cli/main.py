from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from roulette_table.config import CFG
from roulette_table.errors import BetsRejected
from roulette_table.pricing.payouts import MIN_STAKE_FACTOR, PAYOUT_MULTIPLIER
from roulette_table.random_source import SeededRandomSource, SystemRandomSource
from roulette_table.simulation.engine import COLOUR_NAMES, SimulationConfig, run_simulation
from roulette_table.simulation.report import write_reports
from roulette_table.settlement.engine import colour
from roulette_table.strategies.factory import create_strategy
from roulette_table.table import Table
from roulette_table.types import Bet
from roulette_table.utils.parsing import parse_bet

app = typer.Typer(add_completion=False)


def _parse_bets(items: list[str]) -> list[Bet]:
    try:
        return [parse_bet(x) for x in items]
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _table(seed: int | None, min_bet: int) -> Table:
    rng = SeededRandomSource(seed) if seed is not None else SystemRandomSource()
    try:
        return Table(min_bet_unit=min_bet, rng=rng)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command("spin")
def cmd_spin(
    bets: list[str] = typer.Argument(None, help="Bets as kind:values@wager, e.g. split:1,2@10 red@5"),
    seed: int | None = typer.Option(None, help="Seed for a reproducible draw"),
    min_bet: int = typer.Option(CFG.min_bet_unit, help="Table minimum bet unit"),
):
    parsed = _parse_bets(bets or [])
    table = _table(seed, min_bet)
    try:
        number, results = table.spin(parsed)
    except BetsRejected as e:
        print({"ok": False, "errors": [str(x) for x in e.errors]})
        raise typer.Exit(code=1)

    print(
        {
            "ok": True,
            "number": number,
            "colour": COLOUR_NAMES[colour(number)],
            "results": [{"bet": str(r.bet), "win": r.win} for r in results],
            "total_win": sum(r.win for r in results),
        }
    )


@app.command("check")
def cmd_check(
    bets: list[str] = typer.Argument(..., help="Bets as kind:values@wager"),
    min_bet: int = typer.Option(CFG.min_bet_unit),
):
    parsed = _parse_bets(bets)
    errors = _table(None, min_bet).validate(parsed)
    print({"ok": not errors, "errors": [str(x) for x in errors]})
    if errors:
        raise typer.Exit(code=1)


@app.command("simulate")
def cmd_simulate(
    strategy: str = typer.Option("flat_red", help="flat_red | random_straights | voisins"),
    spins: int = typer.Option(1000),
    budget: int = typer.Option(10),
    seed: int = typer.Option(0),
    min_bet: int = typer.Option(CFG.min_bet_unit),
    report_dir: Path = typer.Option(CFG.report_dir),
):
    try:
        strat = create_strategy(strategy, seed=seed)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    table = _table(seed, min_bet)
    try:
        per_spin = run_simulation(table, strat, SimulationConfig(spins=spins, budget=budget))
    except BetsRejected as e:
        print({"ok": False, "errors": [str(x) for x in e.errors]})
        raise typer.Exit(code=1)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    out = write_reports(per_spin, report_dir / f"{strat.name}_budget{budget}_spins{spins}_seed{seed}")
    print(out["summary_obj"])


@app.command("payouts")
def cmd_payouts():
    print({k: {"multiplier": v, "min_stake_factor": MIN_STAKE_FACTOR[k]} for k, v in PAYOUT_MULTIPLIER.items()})


if __name__ == "__main__":
    app()
