import unittest
from unittest.mock import MagicMock

import chess

from src.raichess.elo import GameResult
from src.raichess.game import GameConfig
from src.raichess.history import EloStats
from src.raichess.session import AdaptiveSession


class ScriptedMover:
    def __init__(self, ucis, name="Scripted"):
        self._moves = list(ucis)
        self.name = name
        self.profiles = []

    def apply_profile(self, profile):
        self.profiles.append(profile)

    def choose(self, board: chess.Board) -> chess.Move:
        return chess.Move.from_uci(self._moves.pop(0))

    def close(self):
        pass


class AdaptiveSessionTests(unittest.TestCase):
    def test_next_profile_from_initial_rating(self):
        p = AdaptiveSession().next_profile()
        self.assertEqual((p.target_elo, p.depth, p.skill_level, p.thinking_time_ms), (1250, 3, 6, 1000))

    def test_record_game_folds_rating(self):
        session = AdaptiveSession()
        rec = session.record_game(1250, GameResult.WIN, 100.0)
        self.assertEqual((rec.elo_before, rec.elo_after, rec.elo_change), (1200, 1218, 18))
        self.assertEqual(session.stats.current_elo, 1218)
        self.assertEqual(session.stats.games_played, 1)
        self.assertEqual(session.records, [rec])
        # next opponent follows the new rating
        self.assertEqual(session.next_profile().target_elo, 1268)

    def test_record_game_keeps_previous_snapshots(self):
        start = EloStats.initial(1500)
        session = AdaptiveSession(stats=start)
        session.record_game(1550, GameResult.LOSS, 20.0)
        session.record_game(1550, GameResult.DRAW, 60.0)
        self.assertEqual(start, EloStats.initial(1500))
        self.assertEqual(session.stats.games_played, 2)
        self.assertEqual(session.stats.peak_elo, 1500)

    def test_play_game_configures_engine_and_updates(self):
        engine = ScriptedMover(["f2f3", "g2g4"], name="Stockfish")
        session = AdaptiveSession(engine_opponent=engine, game_cfg=GameConfig(color="black"))
        rec = session.play_game(ScriptedMover(["e7e5", "d8h4"], name="Player"))
        self.assertEqual([p.target_elo for p in engine.profiles], [1250])
        self.assertIs(rec.result, GameResult.WIN)
        self.assertEqual(rec.move_accuracy, 50.0)
        self.assertEqual(rec.elo_after, 1218)
        self.assertIn('[Result "0-1"]', rec.pgn)
        self.assertEqual(session.stats.wins, 1)

    def test_play_game_uses_analyzer(self):
        analyzer = MagicMock()
        analyzer.accuracy.return_value = 0.0
        engine = ScriptedMover(["f2f3", "g2g4"])
        session = AdaptiveSession(engine_opponent=engine, analyzer=analyzer, game_cfg=GameConfig(color="black"))
        rec = session.play_game(ScriptedMover(["e7e5", "d8h4"]))
        analyzer.accuracy.assert_called_once()
        # win with 0% accuracy: 32 * (0.85 - 0.4285) = 13.49 -> 13
        self.assertEqual(rec.elo_after, 1213)

    def test_play_game_requires_engine(self):
        with self.assertRaises(RuntimeError):
            AdaptiveSession().play_game(ScriptedMover([]))


if __name__ == "__main__":
    unittest.main()
