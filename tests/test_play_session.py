import json
import os
import tempfile
import unittest

from play_session import build_parser, load_json_config, pick_option


class OptionResolutionTests(unittest.TestCase):
    def test_pgn_out_read_from_config(self):
        args = build_parser().parse_args([])
        self.assertEqual(pick_option(args, {"pgn_out": "games.pgn"}, "pgn_out"), "games.pgn")

    def test_cli_beats_config_beats_default(self):
        args = build_parser().parse_args(["--pgn-out", "cli.pgn", "--games", "3"])
        cfg = {"pgn_out": "cfg.pgn", "games": 9, "color": "black"}
        self.assertEqual(pick_option(args, cfg, "pgn_out"), "cli.pgn")
        self.assertEqual(pick_option(args, cfg, "games", default=1), 3)
        self.assertEqual(pick_option(args, cfg, "color", default="white"), "black")
        self.assertEqual(pick_option(args, {}, "color", default="white"), "white")
        self.assertIsNone(pick_option(args, {"max_plies": None}, "max_plies"))

    def test_load_json_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            good = os.path.join(tmp, "session.json")
            with open(good, "w", encoding="utf-8") as f:
                json.dump({"pgn_out": "games.pgn"}, f)
            self.assertEqual(load_json_config(good), {"pgn_out": "games.pgn"})
            with self.assertLogs("play_session", level="ERROR"):
                self.assertEqual(load_json_config(os.path.join(tmp, "missing.json")), {})


if __name__ == "__main__":
    unittest.main()
