import json
import os
import tempfile
import unittest

from src.raichess.elo import GameResult
from src.raichess.history import EloStats
from src.raichess.storage import load_stats, save_stats


class StorageTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "nested", "stats.json")

    def tearDown(self):
        self._tmp.cleanup()

    def test_missing_file_is_fresh_profile(self):
        self.assertEqual(load_stats(self.path), EloStats.initial())
        self.assertEqual(load_stats(self.path, starting_elo=1500).current_elo, 1500)

    def test_save_then_load(self):
        stats = EloStats.initial().with_game_result(1216, GameResult.WIN).with_game_result(1200, GameResult.LOSS)
        save_stats(stats, self.path)
        self.assertEqual(load_stats(self.path), stats)
        with open(self.path, encoding="utf-8") as f:
            stored = json.load(f)
        self.assertNotIn("win_rate", stored)
        self.assertEqual(stored["games_played"], 2)
        self.assertEqual(os.listdir(os.path.dirname(self.path)), ["stats.json"])


if __name__ == "__main__":
    unittest.main()
