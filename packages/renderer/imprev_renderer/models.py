"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


CHANNEL_ORDERS = ("RGB", "BGR")


@dataclass(frozen=True)
class SourceImage:
    width: int
    height: int
    pixels: np.ndarray
    channel_order: str = "RGB"

    def __post_init__(self) -> None:
        if self.channel_order not in CHANNEL_ORDERS:
            raise ValueError(f"Unknown channel order: {self.channel_order}")
        if self.pixels.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Pixel array shape {self.pixels.shape} does not match {self.width}x{self.height}x3"
            )
        # Shared by every render pass; nobody may write through it.
        self.pixels.setflags(write=False)

    @classmethod
    def from_array(cls, pixels: np.ndarray, channel_order: str = "RGB") -> "SourceImage":
        arr = np.array(pixels, dtype=np.uint8, copy=True)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError("Pixel array must be shaped (height, width, 3)")
        return cls(width=int(arr.shape[1]), height=int(arr.shape[0]), pixels=arr, channel_order=channel_order)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def rgb(self) -> np.ndarray:
        """Pixels in red-green-blue order, whatever the decoder delivered."""
        if self.channel_order == "BGR":
            return self.pixels[..., ::-1]
        return self.pixels


@dataclass(frozen=True)
class TerminalGeometry:
    columns: int
    rows: int


@dataclass(frozen=True)
class TargetDimensions:
    width: int
    height: int


@dataclass(frozen=True)
class FrameGrid:
    width: int
    height: int
    cells: np.ndarray

    def rows(self) -> list[list[int]]:
        return self.cells.tolist()
