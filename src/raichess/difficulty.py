"""
Difficulty profiles for the Stockfish opponent.

- DifficultyProfile: target rating plus search depth, Skill Level and thinking time.
- DifficultyProfile.for_elo(): fixed rating bands (upper-exclusive thresholds, first match wins).
- recommended_opponent_elo(): opponent strength for the player's next game, slightly above the player.
- uci_commands()/engine_options(): render a profile for a UCI engine.

"""
from __future__ import annotations
from dataclasses import dataclass
import chess.engine

# (upper-exclusive threshold, depth, skill level, thinking time ms); last entry is the catch-all
_BANDS: list[tuple[int | None, int, int, int]] = [
    (1000, 1, 0, 500),
    (1200, 2, 3, 800),
    (1400, 3, 6, 1000),
    (1600, 5, 9, 1500),
    (1800, 8, 12, 2000),
    (2000, 10, 15, 3000),
    (2200, 12, 18, 4000),
    (2400, 15, 20, 5000),
    (2600, 18, 20, 7000),
    (None, 20, 20, 10000),
]

# Stockfish's UCI_Elo only accepts a limited range, so the edge bands pin the target.
_LOW_BAND_RANGE = (800, 999)
_TOP_BAND_RANGE = (2600, 3000)

RECOMMENDED_OFFSET = 50
RECOMMENDED_MIN = 800
RECOMMENDED_MAX = 2800


@dataclass(frozen=True)
class DifficultyProfile:
    target_elo: int
    depth: int
    skill_level: int
    thinking_time_ms: int

    @classmethod
    def for_elo(cls, elo: int) -> "DifficultyProfile":
        *bands, (_, top_depth, top_skill, top_ms) = _BANDS
        for idx, (threshold, depth, skill, think_ms) in enumerate(bands):
            if elo < threshold:
                target = max(_LOW_BAND_RANGE[0], min(_LOW_BAND_RANGE[1], elo)) if idx == 0 else elo
                return cls(target_elo=target, depth=depth, skill_level=skill, thinking_time_ms=think_ms)
        target = max(_TOP_BAND_RANGE[0], min(_TOP_BAND_RANGE[1], elo))
        return cls(target_elo=target, depth=top_depth, skill_level=top_skill, thinking_time_ms=top_ms)

    def uci_commands(self) -> list[str]:
        """UCI commands to configure the engine. Strength limiting must come first."""
        return [
            "setoption name UCI_LimitStrength value true",
            f"setoption name UCI_Elo value {self.target_elo}",
            f"setoption name Skill Level value {self.skill_level}",
        ]

    def engine_options(self) -> dict:
        """Same settings as uci_commands(), shaped for python-chess engine.configure()."""
        return {
            "UCI_LimitStrength": True,
            "UCI_Elo": self.target_elo,
            "Skill Level": self.skill_level,
        }

    def limit(self) -> chess.engine.Limit:
        return chess.engine.Limit(depth=self.depth, time=self.thinking_time_ms / 1000)


def profile_for_rating(elo: int) -> DifficultyProfile:
    return DifficultyProfile.for_elo(elo)


def recommended_opponent_elo(player_elo: int) -> int:
    """Opponent rating for the player's next game: a little stronger, to push improvement."""
    return max(RECOMMENDED_MIN, min(RECOMMENDED_MAX, player_elo + RECOMMENDED_OFFSET))
