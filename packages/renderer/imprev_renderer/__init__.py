"""Renderer package: palette quantization, terminal fitting, and ANSI frames."""

from .ansi import CLEAR_SCREEN, EXIT_HINT, clear_screen, format_frame, write_frame
from .errors import (
    ArgumentError,
    DecodeError,
    EmptyImageError,
    FrameBuildError,
    ImprevError,
    TerminalQueryError,
)
from .fit import DEFAULT_HEIGHT_SCALE, fit_to_terminal
from .frame import build_frame
from .models import FrameGrid, SourceImage, TargetDimensions, TerminalGeometry
from .palette import quantize_rgb_array, rgb_to_256
from .source import image_to_source, load_image

__all__ = [
    "ArgumentError",
    "CLEAR_SCREEN",
    "DEFAULT_HEIGHT_SCALE",
    "DecodeError",
    "EXIT_HINT",
    "EmptyImageError",
    "FrameBuildError",
    "FrameGrid",
    "ImprevError",
    "SourceImage",
    "TargetDimensions",
    "TerminalGeometry",
    "TerminalQueryError",
    "build_frame",
    "clear_screen",
    "fit_to_terminal",
    "format_frame",
    "image_to_source",
    "load_image",
    "quantize_rgb_array",
    "rgb_to_256",
    "write_frame",
]
