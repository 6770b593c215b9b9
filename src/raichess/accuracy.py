"""
Move accuracy for one side of a finished game.

Each of the player's moves is scored by centipawn loss (CPL): the engine evaluation before the move
minus the evaluation after it, from the mover's point of view. The average CPL is mapped to a
0-100 accuracy percentage with the Lichess curve:

    accuracy = 103.1668 * exp(-0.004354 * acpl) - 3.1668

A game in which the player made no moves scores NEUTRAL_ACCURACY, which carries no rating bonus.
"""
from __future__ import annotations
import logging, math, statistics
import chess, chess.engine
from .elo import PlayerColor

MATE_SCORE_CP = 30000
EVAL_CAP_CP = 1000
MOVE_CPL_CAP_CP = 1000
NEUTRAL_ACCURACY = 50.0

ACCURACY_A = 103.1668
ACCURACY_B = -0.004354
ACCURACY_C = -3.1668


def score_to_cp(score: chess.engine.PovScore, color: chess.Color) -> int:
    """Centipawns from `color`'s side, mates folded to +/-MATE_SCORE_CP and capped to +/-EVAL_CAP_CP."""
    cp = score.pov(color).score(mate_score=MATE_SCORE_CP)
    return max(-EVAL_CAP_CP, min(EVAL_CAP_CP, cp))


def centipawn_loss(cp_before: int, cp_after: int) -> int:
    """Evaluation drop caused by a move; both values from the mover's side. Never negative."""
    return min(MOVE_CPL_CAP_CP, max(0, cp_before - cp_after))


def accuracy_from_acpl(acpl: float) -> float:
    acc = ACCURACY_A * math.exp(ACCURACY_B * acpl) + ACCURACY_C
    return max(0.0, min(100.0, acc))


class AccuracyAnalyzer:
    """Replays a game with an analysis engine and scores one side's moves."""

    def __init__(self, engine: chess.engine.SimpleEngine, depth: int = 10):
        self.log = logging.getLogger("AccuracyAnalyzer")
        self.engine = engine
        self.limit = chess.engine.Limit(depth=depth)

    def _evaluate(self, board: chess.Board, color: chess.Color) -> int:
        # terminal positions are scored directly; engines disagree on how to report them
        if board.is_checkmate():
            cp = -MATE_SCORE_CP if board.turn == color else MATE_SCORE_CP
            return max(-EVAL_CAP_CP, min(EVAL_CAP_CP, cp))
        if board.is_game_over():
            return 0
        info = self.engine.analyse(board, self.limit)
        return score_to_cp(info["score"], color)

    def move_losses(self, board: chess.Board, player: PlayerColor) -> list[int]:
        """Centipawn loss for each of `player`'s moves in board.move_stack."""
        color = player.as_chess()
        replay = board.root()
        losses: list[int] = []
        for mv in board.move_stack:
            if replay.turn != color:
                replay.push(mv)
                continue
            before = self._evaluate(replay, color)
            replay.push(mv)
            after = self._evaluate(replay, color)
            losses.append(centipawn_loss(before, after))
        return losses

    def accuracy(self, board: chess.Board, player: PlayerColor) -> float:
        losses = self.move_losses(board, player)
        if not losses:
            return NEUTRAL_ACCURACY
        acpl = statistics.mean(losses)
        acc = accuracy_from_acpl(acpl)
        self.log.debug("Accuracy for %s: moves=%d acpl=%.1f accuracy=%.1f", player.value, len(losses), acpl, acc)
        return acc
