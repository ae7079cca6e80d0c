from __future__ import annotations

import argparse
import logging
import mimetypes
import zipfile
from io import BytesIO
from pathlib import Path

from faviconkit.config import settings
from faviconkit.errors import FaviconKitError
from faviconkit.ico import ico_sizes
from faviconkit.pipeline import generate_kit


def read_options(value: str | None) -> str | None:
    # "@path/to/options.json" reads the payload from a file.
    if value and value.startswith("@"):
        return Path(value[1:]).read_text(encoding="utf-8")
    return value


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a favicon kit zip from one PNG/JPEG")
    parser.add_argument("--image", type=Path, required=True)
    parser.add_argument("--options", default=None, help='JSON text or @file, e.g. \'{"preset": "nextjs-app-router"}\'')
    parser.add_argument("--out", type=Path, default=Path(settings.archive_filename))
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    if not args.image.exists():
        raise SystemExit(f"Missing source image: {args.image}")

    raw = args.image.read_bytes()
    content_type, _ = mimetypes.guess_type(args.image.name)
    try:
        result = generate_kit(raw, read_options(args.options), filename=args.image.name, content_type=content_type)
    except FaviconKitError as e:
        raise SystemExit(f"{e.code.value}: {e.detail or 'see log'}") from e

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(result.content)

    with zipfile.ZipFile(BytesIO(result.content)) as zf:
        for name in zf.namelist():
            line = f"  {name}"
            if name.endswith(".ico"):
                line += f" sizes={ico_sizes(zf.read(name))}"
            print(line)
    print(f"Wrote: {args.out} ({result.size} bytes, preset={result.options.preset.value})")


if __name__ == "__main__":
    main()
