"""
Configuration and environment loading for RaiChess.

- Loads settings.yml (YAML) from repo root if present; falls back to environment variables.
- Exposes SETTINGS with keys used across the project (engine path, starting rating, analysis knobs).
"""
from dataclasses import dataclass
import os
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

# .env values become ordinary environment variables; settings.yml still wins
load_dotenv()


def _repo_root() -> str:
    # this file: src/raichess/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    try:
        if os.path.isfile(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                if isinstance(data, dict):
                    return data
    except (OSError, yaml.YAMLError):
        return {}
    return {}


_cfg = _load_yaml(os.path.join(_repo_root(), "settings.yml"))


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    if name in _cfg:
        val = _cfg[name]
        return cast(val) if cast else val
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    # Engine
    stockfish_path: str | None

    # Rating
    starting_elo: int
    stats_path: str

    # Game / analysis knobs
    analysis_depth: int
    max_plies: int


SETTINGS = Settings(
    stockfish_path=_get("RAICHESS_STOCKFISH_PATH", _get("STOCKFISH_PATH", None)),
    starting_elo=int(_get("RAICHESS_STARTING_ELO", 1200, cast=int)),
    stats_path=_get("RAICHESS_STATS_PATH", os.path.join(_repo_root(), "elo_stats.json")),
    analysis_depth=int(_get("RAICHESS_ANALYSIS_DEPTH", 10, cast=int)),
    max_plies=int(_get("RAICHESS_MAX_PLIES", 240, cast=int)),
)
