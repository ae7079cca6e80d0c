"""Shared pytest fixtures."""

from __future__ import annotations

import io
from typing import Callable

import numpy as np
import pytest
from PIL import Image


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt, **({"quality": 95} if fmt == "JPEG" else {}))
    return buf.getvalue()


def solid(size: tuple[int, int], color: tuple[int, ...], mode: str = "RGB") -> Image.Image:
    return Image.new(mode, size, color)


def striped(width: int = 500, height: int = 300, band: int = 100) -> Image.Image:
    """Red | green | blue vertical stripes; the green band is the centered square."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    arr[:, :band] = (255, 0, 0)
    arr[:, band : width - band] = (0, 255, 0)
    arr[:, width - band :] = (0, 0, 255)
    return Image.fromarray(arr, mode="RGB")


@pytest.fixture
def png_bytes() -> Callable[..., bytes]:
    def _make(size: tuple[int, int] = (64, 64), color: tuple[int, ...] = (0, 0, 255)) -> bytes:
        return encode(solid(size, color))

    return _make


@pytest.fixture
def sample_png(png_bytes) -> bytes:
    return png_bytes((300, 300), (30, 120, 200))
