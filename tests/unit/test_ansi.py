import io
import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from imprev_renderer.ansi import CLEAR_SCREEN, clear_screen, format_frame, write_frame
from imprev_renderer.models import FrameGrid


def grid(rows):
    cells = np.array(rows, dtype=np.uint8)
    return FrameGrid(width=cells.shape[1], height=cells.shape[0], cells=cells)


class AnsiTests(unittest.TestCase):
    def test_row_major_cells_and_hint(self):
        out = format_frame(grid([[1, 2], [3, 255]]))
        expected = (
            "\x1b[48;5;1m \x1b[0m\x1b[48;5;2m \x1b[0m\n"
            "\x1b[48;5;3m \x1b[0m\x1b[48;5;255m \x1b[0m\n"
            "Press Ctrl-C to Exit\n"
        )
        self.assertEqual(out, expected)

    def test_custom_or_missing_hint(self):
        self.assertTrue(format_frame(grid([[16]]), exit_hint="bye").endswith("\x1b[0m\nbye\n"))
        self.assertEqual(format_frame(grid([[16]]), exit_hint=None), "\x1b[48;5;16m \x1b[0m\n")

    def test_write_frame_single_write(self):
        buf = io.StringIO()
        frame = grid([[196, 196, 196]])
        write_frame(frame, buf)
        self.assertEqual(buf.getvalue(), format_frame(frame))

    def test_clear_screen(self):
        buf = io.StringIO()
        clear_screen(buf)
        self.assertEqual(buf.getvalue(), "\x1b[2J\x1b[1;1H")
        self.assertEqual(CLEAR_SCREEN, "\x1b[2J\x1b[1;1H")


if __name__ == "__main__":
    unittest.main()
