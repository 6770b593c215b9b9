"""
Elo rating calculator.

- calculate_new_elo(): standard Elo update with a move-accuracy blend, so a well played
  loss costs less and a sloppy win earns less.
- calculate_expected_score()/get_win_probability(): logistic expectation helpers.
- get_confidence_interval(): +/- band that narrows as more games are recorded.
- GameResult/PlayerColor: outcome and side enums, with PGN result parsing.

"""
from __future__ import annotations
from enum import Enum
import chess

K_FACTOR = 32
DEFAULT_STARTING_ELO = 1200
MIN_ELO = 400
MAX_ELO = 3000

# weight of the accuracy signal blended into the literal game score
ACCURACY_WEIGHT = 0.3


def _clamp(value, lo, hi):
    return max(lo, min(hi, value))


class PlayerColor(Enum):
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "PlayerColor":
        return PlayerColor.BLACK if self is PlayerColor.WHITE else PlayerColor.WHITE

    def as_chess(self) -> chess.Color:
        return chess.WHITE if self is PlayerColor.WHITE else chess.BLACK

    @classmethod
    def from_chess(cls, color: chess.Color) -> "PlayerColor":
        return cls.WHITE if color == chess.WHITE else cls.BLACK

    @classmethod
    def parse(cls, value: str) -> "PlayerColor":
        """Accept 'white'/'black' (any case) from config files and CLI flags."""
        v = str(value).strip().lower()
        if v in ("white", "w"):
            return cls.WHITE
        if v in ("black", "b"):
            return cls.BLACK
        raise ValueError(f"Unknown color '{value}'. Expected 'white' or 'black'.")


class GameResult(Enum):
    """Game result from the tracked player's perspective."""
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    @property
    def score(self) -> float:
        if self is GameResult.WIN:
            return 1.0
        if self is GameResult.DRAW:
            return 0.5
        return 0.0

    @classmethod
    def from_pgn_result(cls, result: str, player_color: PlayerColor) -> "GameResult":
        if result == "1-0":
            return cls.WIN if player_color is PlayerColor.WHITE else cls.LOSS
        if result == "0-1":
            return cls.WIN if player_color is PlayerColor.BLACK else cls.LOSS
        # "1/2-1/2" and unfinished games ("*") both count as a draw
        return cls.DRAW


def calculate_expected_score(player_elo: int, opponent_elo: int) -> float:
    """Expected score (0.0 to 1.0) of the player against the opponent."""
    try:
        return 1.0 / (1.0 + 10.0 ** ((opponent_elo - player_elo) / 400.0))
    except OverflowError:
        # rating gap too large for a float: the player is hopelessly outmatched
        return 0.0


def get_win_probability(player_elo: int, opponent_elo: int) -> float:
    return calculate_expected_score(player_elo, opponent_elo) * 100.0


def calculate_new_elo(current_elo: int, opponent_elo: int, result: GameResult, move_accuracy: float) -> int:
    """Calculate the player's new rating after a game.

    Args:
        current_elo: player's rating before the game
        opponent_elo: rating the engine opponent was configured to
        result: outcome from the player's perspective
        move_accuracy: player's move accuracy percentage (0.0 - 100.0); clamped, never rejected

    Returns:
        New rating in [MIN_ELO, MAX_ELO].
    """
    expected = calculate_expected_score(current_elo, opponent_elo)
    # -0.5 at 0% accuracy, +0.5 at 100%
    accuracy_bonus = _clamp((move_accuracy - 50) / 100.0, -0.5, 0.5)
    adjusted = _clamp(result.score + accuracy_bonus * ACCURACY_WEIGHT, 0.0, 1.0)
    # int() truncates toward zero: -7.8 -> -7
    change = int(K_FACTOR * (adjusted - expected))
    return _clamp(current_elo + change, MIN_ELO, MAX_ELO)


def get_confidence_interval(games_played: int) -> int:
    """+/- rating uncertainty; first games carry the widest band."""
    if games_played < 5:
        return 150
    if games_played < 10:
        return 100
    if games_played < 20:
        return 50
    if games_played < 50:
        return 25
    return 0
