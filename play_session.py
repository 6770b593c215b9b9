import argparse
import json
import logging
from src.raichess.accuracy import AccuracyAnalyzer
from src.raichess.config import SETTINGS
from src.raichess.engine_opponent import EngineOpponent, open_engine
from src.raichess.game import GameConfig
from src.raichess.random_opponent import RandomOpponent
from src.raichess.session import AdaptiveSession
from src.raichess.storage import load_stats, save_stats
from src.raichess.user_opponent import UserOpponent


def load_json_config(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logging.getLogger("play_session").error("Failed to read config %s: %s", path, e)
        return {}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a series of games against a Stockfish opponent that adapts to your rating.")
    ap.add_argument("--config", default=None, help="Optional JSON config file to load defaults from.")
    ap.add_argument("--games", type=int, default=None, help="Number of games to play")
    ap.add_argument("--player", choices=["human", "random"], default=None, help="Who plays against the engine")
    ap.add_argument("--color", choices=["white", "black"], default=None, help="Which side the player takes")
    ap.add_argument("--alternate-colors", action="store_true", help="Swap sides after every game")
    ap.add_argument("--stats", default=None, help="Path to the Elo stats JSON file (loaded and saved)")
    ap.add_argument("--engine-path", default=None, help="Stockfish binary (defaults to STOCKFISH_PATH / PATH)")
    ap.add_argument("--analysis-depth", type=int, default=None, help="Engine depth for move-accuracy analysis")
    ap.add_argument("--no-analysis", action="store_true", help="Skip accuracy analysis (accuracy counts as neutral)")
    ap.add_argument("--max-plies", type=int, default=None)
    ap.add_argument("--game-log", action="store_true", help="Log every move as it is played")
    ap.add_argument("--pgn-out", default=None, help="Optional path to append each game's PGN to")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    return ap


def pick_option(args: argparse.Namespace, cfg_dict: dict, *keys, default=None):
    """Resolve values with precedence: CLI arg if provided -> config -> default."""
    for k in keys:
        v = getattr(args, k, None)
        if v is not None:
            return v
        if k in cfg_dict and cfg_dict[k] is not None:
            return cfg_dict[k]
    return default


if __name__ == "__main__":
    args = build_parser().parse_args()

    cfg_dict = load_json_config(args.config) if args.config else {}

    def pick(*keys, default=None):
        return pick_option(args, cfg_dict, *keys, default=default)

    log_level = pick("log_level", default="INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("play_session")

    games = int(pick("games", default=1))
    player_type = pick("player", default="human")
    color = pick("color", default="white")
    alternate = args.alternate_colors or bool(cfg_dict.get("alternate_colors", False))
    stats_path = pick("stats", default=SETTINGS.stats_path)
    engine_path = pick("engine_path", default=SETTINGS.stockfish_path)
    analysis_depth = int(pick("analysis_depth", default=SETTINGS.analysis_depth))
    no_analysis = args.no_analysis or bool(cfg_dict.get("no_analysis", False))
    max_plies = int(pick("max_plies", default=SETTINGS.max_plies))
    game_log = args.game_log or bool(cfg_dict.get("game_log", False))
    pgn_out = pick("pgn_out", default=None)

    stats = load_stats(stats_path, starting_elo=SETTINGS.starting_elo)
    log.info("Loaded stats: elo=%d games=%d (W%d/D%d/L%d) ci=±%d",
             stats.current_elo, stats.games_played, stats.wins, stats.draws, stats.losses, stats.confidence_interval)

    player = RandomOpponent() if player_type == "random" else UserOpponent()
    opp = EngineOpponent(engine_path=engine_path)
    # separate engine process: the opponent's strength limit must not leak into analysis
    analysis_engine = None if no_analysis else open_engine(engine_path)
    analyzer = AccuracyAnalyzer(analysis_engine, depth=analysis_depth) if analysis_engine else None

    gcfg = GameConfig(max_plies=max_plies, color=color, game_log=game_log)
    session = AdaptiveSession(stats=stats, engine_opponent=opp, analyzer=analyzer, game_cfg=gcfg)
    try:
        for i in range(games):
            gcfg.round_ = str(stats.games_played + i + 1)
            rec = session.play_game(player)
            print(f"Game {i + 1}: {rec.result.value} vs {rec.opponent_elo}  accuracy={rec.move_accuracy:.1f}%  "
                  f"elo {rec.elo_before} -> {rec.elo_after} ({rec.elo_change:+d})")
            save_stats(session.stats, stats_path)
            if pgn_out and rec.pgn:
                with open(pgn_out, "a", encoding="utf-8") as f:
                    f.write(rec.pgn + "\n\n")
            if alternate:
                gcfg.color = "black" if gcfg.color == "white" else "white"
    finally:
        opp.close()
        if analysis_engine:
            analysis_engine.quit()

    s = session.stats
    print(f"Rating: {s.current_elo} ±{s.confidence_interval} (peak {s.peak_elo})")
    print(f"Games: {s.games_played}  W/D/L: {s.win_rate:.1f}% / {s.draw_rate:.1f}% / {s.loss_rate:.1f}%")
