"""Resample a source image to a cell grid and quantize it to palette indices."""

from __future__ import annotations

import numpy as np
from PIL import Image

from .errors import FrameBuildError
from .models import FrameGrid, SourceImage, TargetDimensions
from .palette import quantize_rgb_array


def resample(image: SourceImage, target: TargetDimensions) -> np.ndarray:
    rgb = np.array(image.rgb(), dtype=np.uint8, order="C")
    resized = Image.fromarray(rgb).resize(
        (target.width, target.height),
        resample=Image.Resampling.BILINEAR,
    )
    if resized.size != (target.width, target.height):
        raise FrameBuildError(f"Resampler returned {resized.size}, expected {target.width}x{target.height}")
    return np.asarray(resized, dtype=np.uint8)


def build_frame(image: SourceImage, target: TargetDimensions) -> FrameGrid:
    """Build the palette-index grid for one render pass.

    Any failure aborts the whole frame; callers never see a partial grid.
    """
    if target.width < 1 or target.height < 1:
        raise FrameBuildError(f"Invalid frame size {target.width}x{target.height}")
    try:
        cells = quantize_rgb_array(resample(image, target))
    except FrameBuildError:
        raise
    except (ValueError, TypeError, OSError, MemoryError) as exc:
        raise FrameBuildError(f"Could not build {target.width}x{target.height} frame: {exc}") from exc

    cells.setflags(write=False)
    return FrameGrid(width=target.width, height=target.height, cells=cells)
