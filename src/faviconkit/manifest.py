from __future__ import annotations

import json
from typing import Any

from faviconkit.options import Options, Preset

MANIFEST_ICONS: tuple[tuple[str, int], ...] = (
    ("/android-chrome-192x192.png", 192),
    ("/android-chrome-512x512.png", 512),
)


def manifest_fields(options: Options) -> dict[str, Any]:
    """Fields shared by site.webmanifest and app/manifest.ts."""
    fields: dict[str, Any] = {
        "name": options.app_name,
        "short_name": options.short_name,
        "icons": [{"src": src, "sizes": f"{size}x{size}", "type": "image/png"} for src, size in MANIFEST_ICONS],
    }
    if not options.is_transparent:
        fields["theme_color"] = options.background
        fields["background_color"] = options.background
    fields["display"] = "standalone"
    fields["start_url"] = "/"
    return fields


def render_web_manifest(options: Options) -> str:
    return json.dumps(manifest_fields(options), indent=2, ensure_ascii=False) + "\n"


def _ts_value(value: Any, indent: int) -> str:
    pad = "  " * indent
    if isinstance(value, dict):
        rows = [f"{pad}  {k}: {_ts_value(v, indent + 1)}," for k, v in value.items()]
        return "{\n" + "\n".join(rows) + f"\n{pad}}}"
    if isinstance(value, list):
        rows = [f"{pad}  {_ts_value(v, indent + 1)}," for v in value]
        return "[\n" + "\n".join(rows) + f"\n{pad}]"
    # JSON string literals are valid TypeScript string literals.
    return json.dumps(value, ensure_ascii=False)


def render_manifest_module(options: Options) -> str:
    body = _ts_value(manifest_fields(options), 1)
    return (
        'import type { MetadataRoute } from "next";\n'
        "\n"
        "export default function manifest(): MetadataRoute.Manifest {\n"
        f"  return {body};\n"
        "}\n"
    )


def render_head_snippet(options: Options) -> str:
    lines = [
        '<link rel="icon" href="/favicon.ico" sizes="48x48">',
        '<link rel="icon" type="image/png" sizes="32x32" href="/favicon-32x32.png">',
        '<link rel="icon" type="image/png" sizes="16x16" href="/favicon-16x16.png">',
        '<link rel="apple-touch-icon" sizes="180x180" href="/apple-touch-icon.png">',
        '<link rel="manifest" href="/site.webmanifest">',
    ]
    if not options.is_transparent:
        lines.append(f'<meta name="theme-color" content="{options.background}">')
    return "\n".join(lines) + "\n"


_README_CLASSIC = """# Favicon kit (classic web)

Copy everything in `public/` to the root your site is served from, then paste
the tags from `head-snippet.html` into the `<head>` of every page.

| File | Size | Used by |
| --- | --- | --- |
| `public/favicon.ico` | 16, 32, 48 | legacy browsers, Windows |
| `public/favicon-16x16.png` | 16 | browser tabs |
| `public/favicon-32x32.png` | 32 | browser tabs, HiDPI |
| `public/favicon-48x48.png` | 48 | Windows site tiles |
| `public/apple-touch-icon.png` | 180 | iOS home screen |
| `public/android-chrome-192x192.png` | 192 | Android, PWA |
| `public/android-chrome-512x512.png` | 512 | Android splash, PWA |
| `public/site.webmanifest` | | PWA manifest |
"""

_README_NEXTJS = """# Favicon kit (Next.js App Router)

Merge `app/` and `public/` into your project. Next.js picks up the files in
`app/` by convention and generates the matching `<link>` tags itself; no
head markup is needed.

| File | Size | Used by |
| --- | --- | --- |
| `app/favicon.ico` | 16, 32, 48 | `<link rel="icon">` |
| `app/icon.png` | 32 | `<link rel="icon">` |
| `app/apple-icon.png` | 180 | `<link rel="apple-touch-icon">` |
| `app/manifest.ts` | | `/manifest.webmanifest` |
| `public/android-chrome-192x192.png` | 192 | manifest icons |
| `public/android-chrome-512x512.png` | 512 | manifest icons |
"""


READMES: dict[Preset, str] = {
    Preset.CLASSIC_WEB: _README_CLASSIC,
    Preset.NEXTJS_APP_ROUTER: _README_NEXTJS,
}


def render_readme(preset: Preset) -> str:
    return READMES[Preset(preset)]
