from __future__ import annotations
import json
from pathlib import Path
import pandas as pd
from roulette_table.simulation.fairness import chi_square_uniformity
from roulette_table.simulation.metrics import summarize


def write_reports(per_spin: pd.DataFrame, out_dir: Path) -> dict:
    out_dir.mkdir(parents=True, exist_ok=True)
    summary = summarize(per_spin)
    summary["fairness"] = chi_square_uniformity(per_spin["number"].tolist())
    per_spin_path = out_dir / "per_spin.csv"
    summary_path = out_dir / "summary.json"
    per_spin.to_csv(per_spin_path, index=False)
    summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")
    return {"per_spin": per_spin_path, "summary": summary_path, "summary_obj": summary}
