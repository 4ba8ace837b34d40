"""ANSI 256-color block output."""

from __future__ import annotations

import sys
from typing import TextIO

from .models import FrameGrid


ESC = "\x1b"
RESET = f"{ESC}[0m"
CLEAR_SCREEN = f"{ESC}[2J{ESC}[1;1H"
EXIT_HINT = "Press Ctrl-C to Exit"


def cell(index: int) -> str:
    return f"{ESC}[48;5;{index}m {RESET}"


def format_frame(grid: FrameGrid, exit_hint: str | None = EXIT_HINT) -> str:
    lines = ["".join(cell(index) for index in row) for row in grid.rows()]
    out = "".join(line + "\n" for line in lines)
    if exit_hint:
        out += exit_hint + "\n"
    return out


def write_frame(grid: FrameGrid, file: TextIO | None = None, exit_hint: str | None = EXIT_HINT) -> None:
    file = file or sys.stdout
    file.write(format_frame(grid, exit_hint=exit_hint))
    file.flush()


def clear_screen(file: TextIO | None = None) -> None:
    file = file or sys.stdout
    file.write(CLEAR_SCREEN)
    file.flush()
