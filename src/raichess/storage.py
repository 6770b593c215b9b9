"""JSON load/save of EloStats. Only the stored integer fields are written."""
from __future__ import annotations
import json, logging, os, tempfile
from .history import EloStats

log = logging.getLogger("storage")


def load_stats(path: str, starting_elo: int | None = None) -> EloStats:
    """Load stats from `path`; a missing file yields a fresh profile."""
    if not os.path.isfile(path):
        log.info("No stats at %s; starting fresh", path)
        return EloStats.initial(starting_elo) if starting_elo is not None else EloStats.initial()
    with open(path, "r", encoding="utf-8") as f:
        return EloStats.from_dict(json.load(f))


def save_stats(stats: EloStats, path: str) -> None:
    dir_path = os.path.dirname(path) or "."
    os.makedirs(dir_path, exist_ok=True)
    # atomic replace: readers see the old file or the new one
    fd, tmp = tempfile.mkstemp(prefix=".elo_stats_", suffix=".json", dir=dir_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(stats.to_dict(), f, indent=2)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise
    log.info("Wrote stats to %s", path)
