from __future__ import annotations

import io
from typing import Mapping

from PIL import Image

from faviconkit.errors import IcoEncodeError

ICO_SIZES: tuple[int, ...] = (16, 32, 48)


def _open_png(data: bytes) -> Image.Image:
    with Image.open(io.BytesIO(data)) as im:
        return im.convert("RGBA")


def build_ico(pngs: Mapping[int, bytes], sizes: tuple[int, ...] = ICO_SIZES) -> bytes:
    """Bundle the exported PNGs for `sizes` into one ICO, entries in `sizes` order.

    Each size is supplied through `append_images`, so Pillow stores that
    raster as-is instead of shrinking the largest one.
    """
    missing = [s for s in sizes if s not in pngs]
    if missing:
        raise IcoEncodeError(f"missing ico sizes: {missing}")

    images = [_open_png(pngs[s]) for s in sizes]
    # Pillow drops sizes larger than the image it saves from, so save from the largest.
    base = max(images, key=lambda im: im.width)
    buf = io.BytesIO()
    base.save(
        buf,
        format="ICO",
        sizes=[(s, s) for s in sizes],
        append_images=[im for im in images if im is not base],
    )
    return buf.getvalue()


def ico_sizes(ico: bytes) -> list[int]:
    """Edge sizes stored in an ICO, smallest first."""
    with Image.open(io.BytesIO(ico)) as im:
        if im.format != "ICO":
            raise ValueError("not an icon file")
        return sorted(w for w, _h in im.info["sizes"])
