"""Pixel canvas — numpy RGB buffer with a Pillow-backed file sink."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from flagrant.engine.color import Color, NamedColor

logger = logging.getLogger(__name__)


class PixelCanvas:
    """H x W x 3 uint8 buffer. Fills overwrite every covered pixel."""

    def __init__(self, width: int, height: int, background: Color = NamedColor.BLACK) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must be non-negative, got {width}x{height}")
        self.pixels: NDArray[np.uint8] = np.empty((height, width, 3), dtype=np.uint8)
        self.pixels[:, :] = background.rgb

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def fill_rectangle(self, left: int, top: int, width: int, height: int, color: Color) -> None:
        if width <= 0 or height <= 0:
            return
        # Slicing clips to the buffer
        self.pixels[top : top + height, left : left + width] = color.rgb

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_image().save(buf, format="PNG")
        return buf.getvalue()

    def save(self, path: str | Path) -> Path:
        """Write the canvas as an image; format follows the extension (PNG if none)."""
        path = Path(path)
        image = self.to_image()
        if path.suffix:
            image.save(path)
        else:
            image.save(path, format="PNG")
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
        return path
