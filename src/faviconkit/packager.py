from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass
from typing import Callable, Mapping

from faviconkit.config import settings
from faviconkit.manifest import render_head_snippet, render_manifest_module, render_readme, render_web_manifest
from faviconkit.options import Options, Preset

ICO = "ico"

# Fixed entry timestamp: identical inputs give byte-identical archives.
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


@dataclass(frozen=True)
class IconSet:
    pngs: Mapping[int, bytes]
    ico: bytes

    def asset(self, selector: int | str) -> bytes:
        if selector == ICO:
            return self.ico
        return self.pngs[selector]


TEXT_ASSETS: dict[str, Callable[[Options], str]] = {
    "web-manifest": render_web_manifest,
    "manifest-module": render_manifest_module,
    "head-snippet": render_head_snippet,
    "readme": lambda options: render_readme(options.preset),
}


@dataclass(frozen=True)
class LayoutEntry:
    asset: int | str  # png size, ICO, or a TEXT_ASSETS key
    path: str


PRESET_LAYOUTS: dict[Preset, tuple[LayoutEntry, ...]] = {
    Preset.CLASSIC_WEB: (
        LayoutEntry(ICO, "public/favicon.ico"),
        LayoutEntry(16, "public/favicon-16x16.png"),
        LayoutEntry(32, "public/favicon-32x32.png"),
        LayoutEntry(48, "public/favicon-48x48.png"),
        LayoutEntry(180, "public/apple-touch-icon.png"),
        LayoutEntry(192, "public/android-chrome-192x192.png"),
        LayoutEntry(512, "public/android-chrome-512x512.png"),
        LayoutEntry("web-manifest", "public/site.webmanifest"),
        LayoutEntry("head-snippet", "head-snippet.html"),
        LayoutEntry("readme", "README.md"),
    ),
    Preset.NEXTJS_APP_ROUTER: (
        LayoutEntry(ICO, "app/favicon.ico"),
        LayoutEntry(32, "app/icon.png"),
        LayoutEntry(180, "app/apple-icon.png"),
        LayoutEntry("manifest-module", "app/manifest.ts"),
        LayoutEntry(192, "public/android-chrome-192x192.png"),
        LayoutEntry(512, "public/android-chrome-512x512.png"),
        LayoutEntry("readme", "README.md"),
    ),
}


def layout_entries(icons: IconSet, options: Options) -> list[tuple[str, bytes]]:
    """(path, bytes) pairs for the preset, in table order."""
    out: list[tuple[str, bytes]] = []
    for entry in PRESET_LAYOUTS[Preset(options.preset)]:
        if isinstance(entry.asset, str) and entry.asset in TEXT_ASSETS:
            data = TEXT_ASSETS[entry.asset](options).encode("utf-8")
        else:
            data = icons.asset(entry.asset)
        out.append((entry.path, data))
    return out


def build_zip(icons: IconSet, options: Options, compress_level: int | None = None) -> bytes:
    level = settings.zip_compress_level if compress_level is None else compress_level
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=level) as zf:
        for path, data in layout_entries(icons, options):
            info = zipfile.ZipInfo(path, date_time=ZIP_EPOCH)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            zf.writestr(info, data, compresslevel=level)
    return buf.getvalue()
