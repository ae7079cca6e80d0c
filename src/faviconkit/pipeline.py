from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from PIL import Image

from faviconkit.compositor import build_composite, decode_image
from faviconkit.config import settings
from faviconkit.errors import FaviconKitError, InternalError
from faviconkit.exporter import EXPORT_SIZES, export_sizes
from faviconkit.ico import build_ico
from faviconkit.options import Options, parse_and_validate_options
from faviconkit.packager import IconSet, build_zip
from faviconkit.upload import validate_upload
from faviconkit.util.memory import format_rss, get_rss_mb

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KitResult:
    content: bytes
    options: Options
    filename: str = "faviconkit.zip"
    media_type: str = "application/zip"

    @property
    def size(self) -> int:
        return len(self.content)


def generate_icons(source: Image.Image, options: Options) -> IconSet:
    composite = build_composite(source, options, base_size=settings.base_size)
    pngs = export_sizes(composite, EXPORT_SIZES, workers=settings.export_workers)
    return IconSet(pngs=pngs, ico=build_ico(pngs))


def generate_kit(
    raw_image: bytes,
    raw_options: Any = None,
    *,
    filename: str | None = None,
    content_type: str | None = None,
) -> KitResult:
    """Validate, render and package one upload into a zip.

    Raises `ValidationError` / `FileTooLargeError` for client input and
    `InternalError` (no detail) for anything that fails after validation.
    """
    validate_upload(filename, content_type, len(raw_image))
    options = parse_and_validate_options(raw_options)

    started = time.perf_counter()
    rss_before = get_rss_mb() if settings.log_rss else None
    try:
        source = decode_image(raw_image)
        icons = generate_icons(source, options)
        archive = build_zip(icons, options)
    except FaviconKitError:
        raise
    except Exception as e:
        logger.exception("icon generation failed: %s", e)
        raise InternalError() from e

    logger.info(
        "generated preset=%s fit=%s source=%dx%d zip_bytes=%d elapsed_ms=%.1f",
        options.preset.value,
        options.fit.value,
        source.width,
        source.height,
        len(archive),
        (time.perf_counter() - started) * 1000.0,
    )
    rss = format_rss(rss_before, get_rss_mb()) if settings.log_rss else None
    if rss:
        logger.info("generate %s", rss)

    return KitResult(content=archive, options=options, filename=settings.archive_filename)
