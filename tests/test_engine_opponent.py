import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import chess

from src.raichess.difficulty import DifficultyProfile
from src.raichess.engine_opponent import EngineOpponent, resolve_engine_path


def _fake_engine(options: dict) -> MagicMock:
    engine = MagicMock()
    engine.options = options
    engine.play.return_value = SimpleNamespace(move=chess.Move.from_uci("e2e4"))
    return engine


class EngineOpponentTests(unittest.TestCase):
    def test_apply_profile_configures_strength(self):
        engine = _fake_engine({
            "UCI_LimitStrength": SimpleNamespace(min=None, max=None),
            "UCI_Elo": SimpleNamespace(min=1320, max=3190),
            "Skill Level": SimpleNamespace(min=0, max=20),
        })
        opp = EngineOpponent(profile=DifficultyProfile.for_elo(1500), engine=engine)
        engine.configure.assert_called_once_with({"UCI_LimitStrength": True, "UCI_Elo": 1500, "Skill Level": 9})
        self.assertEqual(opp.elo, 1500)
        self.assertEqual((opp.limit.depth, opp.limit.time), (5, 1.5))

    def test_options_fitted_to_engine(self):
        engine = _fake_engine({
            "UCI_LimitStrength": SimpleNamespace(min=None, max=None),
            "UCI_Elo": SimpleNamespace(min=1320, max=3190),
        })
        opp = EngineOpponent(engine=engine)
        opp.apply_profile(DifficultyProfile.for_elo(900))
        engine.configure.assert_called_once_with({"UCI_LimitStrength": True, "UCI_Elo": 1320})
        # the profile itself keeps its own target
        self.assertEqual(opp.elo, 900)

    def test_choose_and_close(self):
        engine = _fake_engine({})
        opp = EngineOpponent(engine=engine)
        self.assertIsNone(opp.elo)
        board = chess.Board()
        self.assertEqual(opp.choose(board), chess.Move.from_uci("e2e4"))
        engine.play.assert_called_once_with(board, opp.limit)
        opp.close()
        engine.quit.assert_called_once()

    def test_missing_engine_raises(self):
        with patch("src.raichess.engine_opponent.shutil.which", return_value=None), \
             patch("src.raichess.engine_opponent.os.path.isfile", return_value=False):
            with self.assertRaises(RuntimeError):
                resolve_engine_path("/nowhere/stockfish")


if __name__ == "__main__":
    unittest.main()
