"""
Stockfish-backed opponent with adjustable strength.

- Resolves engine binary path from: explicit parameter, SETTINGS.stockfish_path/env, or system PATH.
- apply_profile(): pushes a DifficultyProfile into the engine (UCI_LimitStrength, UCI_Elo, Skill Level)
  and adopts its depth/thinking-time search limit.
- choose(): queries the engine with the current limit to return a chess.Move.
- close(): terminates the engine process.

"""
from __future__ import annotations
import logging, os, shutil, chess, chess.engine
from .config import SETTINGS
from .difficulty import DifficultyProfile


def resolve_engine_path(engine_path: str | None = None) -> str:
    """Locate a Stockfish binary. Raises RuntimeError with guidance if not found."""
    candidate = engine_path or SETTINGS.stockfish_path or "stockfish"
    resolved = shutil.which(candidate) or (candidate if os.path.isfile(candidate) else None)
    if not resolved:
        auto = shutil.which("stockfish")
        if auto:
            resolved = auto
        else:
            raise RuntimeError(
                f"Stockfish engine not found (candidate='{candidate}'). Install via 'brew install stockfish' on macOS, "
                "or set environment variable STOCKFISH_PATH to the binary path, or pass --engine-path."
            )
    return resolved


def open_engine(engine_path: str | None = None) -> chess.engine.SimpleEngine:
    path = resolve_engine_path(engine_path)
    try:
        return chess.engine.SimpleEngine.popen_uci(path)
    except FileNotFoundError as e:
        raise RuntimeError(f"Failed launching engine at '{path}': {e}") from e


class EngineOpponent:
    name: str = "Stockfish"

    def __init__(self, profile: DifficultyProfile | None = None, engine_path: str | None = None,
                 engine: chess.engine.SimpleEngine | None = None):
        """Initialize engine opponent.

        An already-open `engine` may be passed in (tests, shared processes); otherwise one is
        launched from `engine_path` (see resolve_engine_path for precedence).
        """
        self.log = logging.getLogger("EngineOpponent")
        self.engine = engine if engine is not None else open_engine(engine_path)
        self.profile: DifficultyProfile | None = None
        self.limit = chess.engine.Limit(depth=6)
        if profile is not None:
            self.apply_profile(profile)

    def _fit_options(self, options: dict) -> dict:
        """Drop options the engine doesn't declare and clamp numeric ones into its advertised range."""
        declared = self.engine.options
        fitted = {}
        for key, value in options.items():
            opt = declared.get(key)
            if opt is None:
                self.log.warning("Engine has no option '%s'; skipping", key)
                continue
            if isinstance(value, int) and not isinstance(value, bool) and opt.min is not None and opt.max is not None:
                clamped = max(opt.min, min(opt.max, value))
                if clamped != value:
                    self.log.info("Option %s=%d outside engine range [%d, %d]; using %d", key, value, opt.min, opt.max, clamped)
                value = clamped
            fitted[key] = value
        return fitted

    def apply_profile(self, profile: DifficultyProfile) -> None:
        options = self._fit_options(profile.engine_options())
        self.log.debug("Configuring engine: %s", "; ".join(profile.uci_commands()))
        self.engine.configure(options)
        self.profile = profile
        self.limit = profile.limit()
        self.log.info("Engine strength set: elo=%d skill=%d depth=%d time_ms=%d",
                      profile.target_elo, profile.skill_level, profile.depth, profile.thinking_time_ms)

    @property
    def elo(self) -> int | None:
        return self.profile.target_elo if self.profile else None

    def choose(self, board: chess.Board) -> chess.Move:
        res = self.engine.play(board, self.limit)
        return res.move

    def close(self):
        self.engine.quit()
