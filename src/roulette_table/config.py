from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

def _env(key: str, default: str) -> str:
    v = os.getenv(key)
    return default if v is None or v == "" else v

def _env_bool(key: str, default: bool) -> bool:
    return _env(key, "1" if default else "0").strip().lower() in {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class Config:
    min_bet_unit: int = int(_env("ROULETTE_MIN_BET_UNIT", "1"))
    strict_split: bool = _env_bool("ROULETTE_STRICT_SPLIT", True)
    adjacent_doubleline: bool = _env_bool("ROULETTE_ADJACENT_DOUBLELINE", False)

    report_dir: Path = Path(_env("ROULETTE_REPORT_DIR", "reports"))
    log_level: str = _env("ROULETTE_LOG_LEVEL", "INFO")

CFG = Config()
