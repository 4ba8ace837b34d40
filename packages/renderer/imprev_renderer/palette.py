"""RGB888 to xterm 256-color palette quantization."""

from __future__ import annotations

import numpy as np


CUBE_BASE = 16
CUBE_WHITE = 231
GRAY_BASE = 232
GRAY_STEPS = 24
# Levels below/above these map to the cube corners; some terminals render 232 as non-black.
GRAY_LOW = 8
GRAY_HIGH = 248
CUBE_DIVISOR = 51
# (value - 8) * 24 // 247 spreads 8..248 over ramp steps 0..23.
GRAY_SPAN = 247


def _gray_index(value: int) -> int:
    if value < GRAY_LOW:
        return CUBE_BASE
    if value > GRAY_HIGH:
        return CUBE_WHITE
    return GRAY_BASE + ((value - GRAY_LOW) * GRAY_STEPS) // GRAY_SPAN


def rgb_to_256(r: int, g: int, b: int) -> int:
    r, g, b = int(r), int(g), int(b)
    if r == g == b:
        return _gray_index(r)
    return CUBE_BASE + 36 * (r // CUBE_DIVISOR) + 6 * (g // CUBE_DIVISOR) + b // CUBE_DIVISOR


def quantize_rgb_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized ``rgb_to_256`` over an ``(..., 3)`` uint8 array."""
    if rgb.ndim < 1 or rgb.shape[-1] != 3:
        raise ValueError("RGB data must have 3 channels in the last axis")
    arr = rgb.astype(np.int32)
    r = arr[..., 0]
    g = arr[..., 1]
    b = arr[..., 2]

    cube = CUBE_BASE + 36 * (r // CUBE_DIVISOR) + 6 * (g // CUBE_DIVISOR) + b // CUBE_DIVISOR
    ramp = GRAY_BASE + ((r - GRAY_LOW) * GRAY_STEPS) // GRAY_SPAN
    gray = np.where(r < GRAY_LOW, CUBE_BASE, np.where(r > GRAY_HIGH, CUBE_WHITE, ramp))

    is_gray = (r == g) & (g == b)
    return np.where(is_gray, gray, cube).astype(np.uint8)
