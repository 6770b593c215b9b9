from __future__ import annotations
"""Interactive human player that only allows legal moves."""
import chess


class UserOpponent:
    name = "Human"

    def __init__(self, input_fn=input, output_fn=print):
        self._input = input_fn
        self._print = output_fn

    def choose(self, board: chess.Board):
        """Prompt the user for a legal move; repeat until valid."""
        while True:
            self._print("\nYour turn. Board FEN:", board.fen())
            self._print(board)
            raw = self._input("Enter your move in SAN or UCI (e.g., e4 or e2e4): ").strip()
            if not raw:
                continue
            try:
                mv = chess.Move.from_uci(raw) if len(raw) >= 4 else None
            except ValueError:
                mv = None
            if not mv:
                try:
                    mv = board.parse_san(raw)
                except ValueError:
                    mv = None
            if mv and mv in board.legal_moves:
                return mv
            self._print("Illegal move. Please try again with a legal move.")

    def close(self):
        return
