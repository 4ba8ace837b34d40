"""Decode an image file once into a shared, read-only SourceImage."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, EmptyImageError
from .models import SourceImage


def image_to_source(image: Image.Image) -> SourceImage:
    if image.width == 0 or image.height == 0:
        raise EmptyImageError(f"Image has no pixels ({image.width}x{image.height})")
    if image.mode != "RGB":
        image = image.convert("RGB")
    return SourceImage.from_array(np.asarray(image, dtype=np.uint8), channel_order="RGB")


def load_image(path: str | Path) -> SourceImage:
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            return image_to_source(img)
    except EmptyImageError:
        raise
    except FileNotFoundError as exc:
        raise DecodeError(f"Could not read the image: {path} (file not found)") from exc
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise DecodeError(f"Could not read the image: {path} ({exc})") from exc
