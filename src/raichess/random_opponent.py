"""
RandomOpponent: picks a uniformly random legal move.

- Stands in for the human player in simulated sessions and tests.
- No engine resources; choose() samples from board.legal_moves; close() is a no-op.

"""
from __future__ import annotations
import random
import chess


class RandomOpponent:
    """Simple mover that picks a uniformly random legal move.
    Pass `seed` for a reproducible move sequence.
    """
    name: str = "Random"

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def choose(self, board: chess.Board) -> chess.Move:
        legal = list(board.legal_moves)
        return self._rng.choice(legal) if legal else chess.Move.null()

    def close(self):
        # No engine resources to release
        pass
