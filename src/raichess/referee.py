"""
Referee: centralized game state and PGN/export utilities.

- Owns a python-chess Board and applies moves chosen by the player or the engine.
- Manages PGN headers, result overrides, and optional termination comment.
- status() gives the current PGN result token; result_for() turns it into a GameResult
  from one side's perspective.

Used by GameRunner to track state, record outcomes, and emit PGN.

"""
from __future__ import annotations
import chess, chess.pgn, datetime
from typing import Optional
from .elo import GameResult, PlayerColor


class Referee:
    """Plain chess referee around python-chess Board and PGN export."""
    def __init__(self, starting_fen: str | None = None):
        self.board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        self._headers: dict[str, str] = {}
        self._result_override: Optional[str] = None
        self._termination_comment: Optional[str] = None

    # ---------------- Header / Result Management -----------------
    def set_headers(self, event: str = "RaiChess Training", site: str = "?", date: Optional[str] = None,
                    round_: str = "?", white: str = "?", black: str = "?",
                    white_elo: int | None = None, black_elo: int | None = None) -> None:
        date = date or datetime.date.today().strftime("%Y.%m.%d")
        self._headers.update({
            "Event": event,
            "Site": site,
            "Date": date,
            "Round": round_,
            "White": white,
            "Black": black,
        })
        if white_elo is not None:
            self._headers["WhiteElo"] = str(white_elo)
        if black_elo is not None:
            self._headers["BlackElo"] = str(black_elo)

    def set_result(self, result: str, termination_reason: Optional[str] = None) -> None:
        self._result_override = result
        if termination_reason:
            self._termination_comment = f"Termination: {termination_reason}"

    # ---------------- Move Application -----------------
    def engine_apply(self, mv: chess.Move) -> str:
        san = self.board.san(mv)
        self.board.push(mv)
        return san

    # ---------------- PGN / Status -----------------
    def pgn(self) -> str:
        game = chess.pgn.Game()
        for k, v in self._headers.items():
            game.headers[k] = v
        game.headers["Result"] = self.status()
        node = game
        for mv in list(self.board.move_stack):
            node = node.add_variation(mv)
        if self._termination_comment:
            game.comment = self._termination_comment
        exporter = chess.pgn.StringExporter(headers=True, variations=False, comments=bool(self._termination_comment))
        return game.accept(exporter)

    def status(self) -> str:
        if self._result_override:
            return self._result_override
        if self.board.is_game_over():
            return self.board.result()
        return "*"

    def result_for(self, color: PlayerColor) -> GameResult:
        """Outcome from `color`'s side; an unfinished game counts as a draw."""
        return GameResult.from_pgn_result(self.status(), color)
