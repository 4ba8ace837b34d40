"""Aspect-preserving fit of an image into a terminal character grid."""

from __future__ import annotations

from .models import TargetDimensions, TerminalGeometry


DEFAULT_HEIGHT_SCALE = 0.5


def fit_to_terminal(
    terminal: TerminalGeometry,
    image_size: tuple[int, int],
    height_scale: float = DEFAULT_HEIGHT_SCALE,
) -> TargetDimensions:
    """Largest cell grid that fits ``terminal`` while keeping the image's look.

    Character cells are taller than they are wide, so the image height is
    divided by ``height_scale`` before comparing aspect ratios. Exactly one
    axis of the result equals its terminal bound.
    """
    width, height = image_size
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if terminal.columns <= 0 or terminal.rows <= 0:
        raise ValueError(f"Terminal dimensions must be positive, got {terminal.columns}x{terminal.rows}")
    if height_scale <= 0:
        raise ValueError("height_scale must be positive")

    image_aspect = width / (height / height_scale)
    terminal_aspect = terminal.columns / terminal.rows

    if image_aspect > terminal_aspect:
        return TargetDimensions(
            width=terminal.columns,
            height=max(1, round(terminal.columns / image_aspect)),
        )
    return TargetDimensions(
        width=max(1, round(terminal.rows * image_aspect)),
        height=terminal.rows,
    )
