from __future__ import annotations

import io
import math

from PIL import Image, ImageOps, UnidentifiedImageError

from faviconkit.errors import ImageDecodeError
from faviconkit.options import Fit, Options, clamp_padding

BASE_SIZE = 1024
RESAMPLE = Image.Resampling.LANCZOS


def decode_image(raw: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(raw))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"invalid image content: {e}") from e
    # Honor camera orientation so the artwork lands upright.
    return ImageOps.exif_transpose(image)


def _round(value: float) -> int:
    # Half-up, so .5 offsets land the same way on every platform.
    return math.floor(value + 0.5)


def inner_size(padding_pct: float, base_size: int = BASE_SIZE) -> int:
    return _round(base_size * (1 - 2 * clamp_padding(padding_pct)))


def fit_artwork(source: Image.Image, fit: Fit, box: int) -> Image.Image:
    """Resize `source` into a `box`-sided square area. Returns a new RGBA image."""
    rgba = source.convert("RGBA")
    if fit == Fit.COVER:
        # Centered square crop of side min(w, h), scaled to fill the box.
        return ImageOps.fit(rgba, (box, box), method=RESAMPLE, centering=(0.5, 0.5))
    return ImageOps.contain(rgba, (box, box), method=RESAMPLE)


def build_composite(source: Image.Image, options: Options, base_size: int = BASE_SIZE) -> Image.Image:
    box = inner_size(options.padding_pct, base_size)
    canvas = Image.new("RGBA", (base_size, base_size), options.background_rgba())

    artwork = fit_artwork(source, options.fit, box)
    rw, rh = artwork.size
    left = _round((base_size - rw) / 2)
    top = _round((base_size - rh) / 2)

    layer = Image.new("RGBA", (base_size, base_size), (0, 0, 0, 0))
    layer.paste(artwork, (left, top))
    return Image.alpha_composite(canvas, layer)
