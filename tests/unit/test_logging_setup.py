import io
import json
import logging
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "core"))

from imprev_core.logging_setup import JsonFormatter, configure_logging, get_logger


class LoggingTests(unittest.TestCase):
    def test_json_formatter_carries_event(self):
        record = logging.LogRecord("imprev", logging.ERROR, __file__, 1, "pass skipped", None, None)
        record.event = "render_skipped"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "ERROR")
        self.assertEqual(payload["msg"], "pass skipped")
        self.assertEqual(payload["event"], "render_skipped")
        self.assertIn("ts_utc", payload)

    def test_configure_is_idempotent_and_updates_level(self):
        logger = get_logger()
        saved = list(logger.handlers)
        for handler in saved:
            logger.removeHandler(handler)
        try:
            stream = io.StringIO()
            configure_logging(level="INFO", stream=stream)
            configure_logging(level="error", stream=io.StringIO())
            self.assertEqual(len(logger.handlers), 1)
            self.assertEqual(logger.level, logging.ERROR)
            logger.error("terminal query failed")
            self.assertEqual(stream.getvalue(), "ERROR terminal query failed\n")
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            for handler in saved:
                logger.addHandler(handler)


if __name__ == "__main__":
    unittest.main()
