"""
AdaptiveSession: the rating feedback loop across a sequence of games.

For each game:
  1. recommended_opponent_elo(current) -> DifficultyProfile -> engine strength
  2. play the game (GameRunner) and read the result from the player's side
  3. score the player's move accuracy (AccuracyAnalyzer)
  4. calculate_new_elo() and fold the game into EloStats.with_game_result()

Games are strictly sequential: the next profile is only chosen after the previous game's rating
has been folded in. record_game() exposes step 4 alone, for results that come from
elsewhere (e.g. a game played in another client).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from .accuracy import NEUTRAL_ACCURACY, AccuracyAnalyzer
from .difficulty import DifficultyProfile, recommended_opponent_elo
from .elo import GameResult, calculate_new_elo, get_win_probability
from .game import GameConfig, GameRunner
from .history import EloStats


@dataclass(frozen=True)
class GameRecord:
    """One finished game as seen by the rating loop."""
    opponent_elo: int
    result: GameResult
    move_accuracy: float
    elo_before: int
    elo_after: int
    pgn: str | None = None

    @property
    def elo_change(self) -> int:
        return self.elo_after - self.elo_before


class AdaptiveSession:
    def __init__(self, stats: EloStats | None = None, engine_opponent=None, analyzer: AccuracyAnalyzer | None = None,
                 game_cfg: GameConfig | None = None):
        self.log = logging.getLogger("AdaptiveSession")
        self.stats = stats or EloStats.initial()
        self.engine_opponent = engine_opponent
        self.analyzer = analyzer
        self.game_cfg = game_cfg or GameConfig()
        self.records: list[GameRecord] = []

    def next_profile(self) -> DifficultyProfile:
        """Engine profile for the next game, derived from the current rating only."""
        return DifficultyProfile.for_elo(recommended_opponent_elo(self.stats.current_elo))

    def record_game(self, opponent_elo: int, result: GameResult, move_accuracy: float, pgn: str | None = None) -> GameRecord:
        before = self.stats.current_elo
        after = calculate_new_elo(before, opponent_elo, result, move_accuracy)
        self.stats = self.stats.with_game_result(after, result)
        rec = GameRecord(opponent_elo=opponent_elo, result=result, move_accuracy=move_accuracy,
                         elo_before=before, elo_after=after, pgn=pgn)
        self.records.append(rec)
        self.log.info("Game %d: %s vs %d accuracy=%.1f elo %d -> %d (%+d) ci=±%d",
                      self.stats.games_played, result.value, opponent_elo, move_accuracy,
                      before, after, rec.elo_change, self.stats.confidence_interval)
        return rec

    def play_game(self, player) -> GameRecord:
        """Play one game of `player` against the engine at the recommended strength."""
        if self.engine_opponent is None:
            raise RuntimeError("AdaptiveSession.play_game requires an engine opponent")
        profile = self.next_profile()
        self.engine_opponent.apply_profile(profile)
        self.log.info("Next game: player elo=%d opponent elo=%d win_probability=%.1f%%",
                      self.stats.current_elo, profile.target_elo,
                      get_win_probability(self.stats.current_elo, profile.target_elo))
        runner = GameRunner(player, self.engine_opponent, cfg=self.game_cfg,
                            player_elo=self.stats.current_elo, opponent_elo=profile.target_elo)
        runner.play()
        result = runner.result_for_player()
        if self.analyzer is not None:
            accuracy = self.analyzer.accuracy(runner.ref.board, runner.player_color)
        else:
            accuracy = NEUTRAL_ACCURACY
        return self.record_game(profile.target_elo, result, accuracy, pgn=runner.ref.pgn())

    def play(self, player, games: int) -> list[GameRecord]:
        return [self.play_game(player) for _ in range(games)]
