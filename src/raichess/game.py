"""
Single-game runner and config.

- GameConfig: knobs for max plies, the player's side, and console logging.
- GameRunner: orchestrates one game between the player (human or simulated) and an opponent
  (usually the strength-limited engine) using python-chess.
  - Applies moves through Referee; an illegal move from either side forfeits the game.
  - Reaching max_plies ends the game as a draw by truncation.
  - Exposes result_for_player() and metrics() for the rating loop.

"""
from __future__ import annotations
import time, logging
from dataclasses import dataclass
from .elo import GameResult, PlayerColor
from .referee import Referee


@dataclass
class GameConfig:
    max_plies: int = 240
    # Player's side: 'white' | 'black'
    color: str = "white"
    # Console logging of moves as they happen
    game_log: bool = False
    event: str = "RaiChess Training"
    round_: str = "?"


class GameRunner:
    def __init__(self, player, opponent, cfg: GameConfig | None = None,
                 player_elo: int | None = None, opponent_elo: int | None = None):
        self.log = logging.getLogger("GameRunner")
        self.player = player
        self.opp = opponent
        self.cfg = cfg or GameConfig()
        self.player_color = PlayerColor.parse(self.cfg.color)
        self.ref = Referee()
        names = (getattr(player, "name", "Player"), getattr(opponent, "name", "Opponent"))
        elos = (player_elo, opponent_elo)
        if self.player_color is PlayerColor.BLACK:
            names, elos = names[::-1], elos[::-1]
        self.ref.set_headers(event=self.cfg.event, round_=self.cfg.round_, white=names[0], black=names[1],
                             white_elo=elos[0], black_elo=elos[1])
        self.records: list[dict] = []  # list of dicts per ply
        self.termination_reason: str | None = None
        self.start_ts = time.time()

    def _player_turn(self) -> bool:
        return self.ref.board.turn == self.player_color.as_chess()

    def _forfeit(self, loser: PlayerColor, reason: str) -> None:
        self.termination_reason = reason
        self.ref.set_result("0-1" if loser is PlayerColor.WHITE else "1-0", reason)

    def step(self) -> bool:
        """Play one ply. Returns False if the move was illegal (and the game forfeited)."""
        is_player = self._player_turn()
        actor = "PLAYER" if is_player else "OPP"
        mover = self.player if is_player else self.opp
        t0 = time.time()
        mv = mover.choose(self.ref.board)
        ms = int((time.time() - t0) * 1000)
        ok = bool(mv) and mv in self.ref.board.legal_moves
        san = self.ref.engine_apply(mv) if ok else None
        uci = mv.uci() if mv else None
        self.records.append({"actor": actor, "uci": uci, "ok": ok, "san": san, "ms": ms})
        ply = len(self.records)
        if self.cfg.game_log:
            self.log.info("[ply %d] %s: move=%s (%s) time_ms=%d", ply, actor, san or uci, uci, ms)
        else:
            self.log.debug("Ply %d %s move %s ok=%s san=%s", ply, actor, uci, ok, san)
        if not ok:
            side = self.player_color if is_player else self.player_color.opposite()
            self._forfeit(side, "illegal_player_move" if is_player else "illegal_opponent_move")
            self.log.error("Terminating due to illegal %s move at ply %d", actor, ply)
        return ok

    def play(self) -> str:
        while self.ref.status() == "*" and len(self.records) < self.cfg.max_plies:
            if not self.step():
                break
        result = self.ref.status()
        if result == "*":
            self.termination_reason = "max_plies_reached"
            self.ref.set_result("1/2-1/2", self.termination_reason)  # declare draw by truncation
            result = "1/2-1/2"
        elif not self.termination_reason:
            self.termination_reason = "normal_game_end"
            self.ref.set_result(result, self.termination_reason)
        self.log.info("Game finished result=%s reason=%s plies=%d", result, self.termination_reason, len(self.records))
        return result

    def result_for_player(self) -> GameResult:
        return self.ref.result_for(self.player_color)

    # ---------------- Metrics -----------------
    def metrics(self) -> dict:
        player_moves = [r for r in self.records if r["actor"] == "PLAYER"]
        opp_moves = [r for r in self.records if r["actor"] == "OPP"]
        return {
            "plies_total": len(self.records),
            "plies_player": len(player_moves),
            "plies_opponent": len(opp_moves),
            "player_color": self.player_color.value,
            "result": self.ref.status(),
            "player_result": self.result_for_player().value,
            "termination_reason": self.termination_reason,
            "duration_s": round(time.time() - self.start_ts, 2),
            "opponent_label": getattr(self.opp, "name", "Opponent"),
        }
