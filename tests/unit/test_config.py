import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from imprev_core.config import AppConfig, load_config


class ConfigTests(unittest.TestCase):
    def test_defaults_without_path(self):
        cfg = load_config(None)
        self.assertIsInstance(cfg, AppConfig)
        self.assertEqual(cfg.render.height_scale, 0.5)
        self.assertEqual(cfg.render.exit_hint, "Press Ctrl-C to Exit")
        self.assertTrue(cfg.render.clear_on_resize)
        self.assertEqual(cfg.logging.level, "WARNING")

    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertEqual(cfg.render.height_scale, 0.5)

    def test_load_and_normalize(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "imprev.json"
            path.write_text(
                json.dumps(
                    {
                        "render": {"height_scale": 9, "exit_hint": "q to quit", "unknown": 1},
                        "logging": {"level": "debug", "json": True},
                        "extra": {"ignored": True},
                    }
                ),
                encoding="utf-8",
            )
            cfg = load_config(path)
            self.assertEqual(cfg.render.height_scale, 4.0)
            self.assertEqual(cfg.render.exit_hint, "q to quit")
            self.assertFalse(hasattr(cfg.render, "unknown"))
            self.assertEqual(cfg.logging.level, "DEBUG")
            self.assertTrue(cfg.logging.json)

    def test_bad_values_fall_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "imprev.json"
            path.write_text(json.dumps({"render": {"height_scale": "tall"}, "logging": {"level": "loud"}}), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.height_scale, 0.5)
            self.assertEqual(cfg.logging.level, "WARNING")

    def test_unparsable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "imprev.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())


if __name__ == "__main__":
    unittest.main()
