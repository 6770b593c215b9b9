"""
Rating history: cumulative Elo statistics for one player.

- EloStats: immutable snapshot (current/peak rating, game counts, confidence band).
- EloStats.initial(): fresh profile at the starting rating.
- with_game_result(): folds one finished game in and returns the next snapshot.
- to_dict()/from_dict(): stored shape for an external store; win/draw/loss rates are
  derived and never persisted.

"""
from __future__ import annotations
from dataclasses import dataclass, replace, asdict
from .elo import DEFAULT_STARTING_ELO, GameResult, get_confidence_interval


@dataclass(frozen=True)
class EloStats:
    current_elo: int
    peak_elo: int
    games_played: int
    wins: int
    losses: int
    draws: int
    confidence_interval: int

    @classmethod
    def initial(cls, starting_elo: int = DEFAULT_STARTING_ELO) -> "EloStats":
        return cls(
            current_elo=starting_elo,
            peak_elo=starting_elo,
            games_played=0,
            wins=0,
            losses=0,
            draws=0,
            confidence_interval=get_confidence_interval(0),
        )

    @property
    def win_rate(self) -> float:
        return self._rate(self.wins)

    @property
    def draw_rate(self) -> float:
        return self._rate(self.draws)

    @property
    def loss_rate(self) -> float:
        return self._rate(self.losses)

    def _rate(self, count: int) -> float:
        if self.games_played <= 0:
            return 0.0
        return count / self.games_played * 100.0

    def with_game_result(self, new_elo: int, result: GameResult) -> "EloStats":
        """Return the snapshot after one more game; self is left untouched."""
        games = self.games_played + 1
        return replace(
            self,
            current_elo=new_elo,
            peak_elo=max(self.peak_elo, new_elo),
            games_played=games,
            wins=self.wins + (1 if result is GameResult.WIN else 0),
            losses=self.losses + (1 if result is GameResult.LOSS else 0),
            draws=self.draws + (1 if result is GameResult.DRAW else 0),
            confidence_interval=get_confidence_interval(games),
        )

    # shorter name used by session code
    advance = with_game_result

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "EloStats":
        """Rebuild a snapshot from stored fields; missing keys fall back to a fresh profile."""
        base = cls.initial(int(data.get("current_elo", DEFAULT_STARTING_ELO)))
        fields = {k: int(data[k]) for k in base.to_dict() if data.get(k) is not None}
        fields.setdefault("confidence_interval", get_confidence_interval(fields.get("games_played", 0)))
        return replace(base, **fields)
