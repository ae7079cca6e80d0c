from __future__ import annotations

import io
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from PIL import Image

from faviconkit.compositor import RESAMPLE

logger = logging.getLogger(__name__)

EXPORT_SIZES: tuple[int, ...] = (16, 32, 48, 180, 192, 512)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    # optimize=True makes Pillow search filter strategies at maximum zlib effort.
    image.save(buf, format="PNG", optimize=True, compress_level=9)
    return buf.getvalue()


def export_size(composite: Image.Image, size: int) -> bytes:
    return encode_png(composite.resize((size, size), RESAMPLE))


def export_sizes(
    composite: Image.Image,
    sizes: Iterable[int] = EXPORT_SIZES,
    workers: int = 1,
) -> dict[int, bytes]:
    """Derive every size from the one composite.

    Each size only reads the composite and produces its own bytes, so they run
    side by side on a per-call thread pool. The first failure propagates.
    """
    sizes = tuple(sizes)
    if workers <= 1:
        return {size: export_size(composite, size) for size in sizes}

    with ThreadPoolExecutor(max_workers=min(workers, len(sizes)), thread_name_prefix="fk-export") as ex:
        futs = {size: ex.submit(export_size, composite, size) for size in sizes}
        out = {size: fut.result() for size, fut in futs.items()}
    logger.debug("exported sizes=%s threads=%d", list(out), min(workers, len(sizes)))
    return out
