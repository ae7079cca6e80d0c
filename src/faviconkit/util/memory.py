from __future__ import annotations

from pathlib import Path

_STATUS = Path("/proc/self/status")


def get_rss_mb() -> float | None:
    """Resident set size in MiB from /proc (Linux only). None elsewhere."""
    try:
        text = _STATUS.read_text(encoding="utf-8")
    except OSError:
        return None
    for line in text.splitlines():
        if line.startswith("VmRSS:"):
            parts = line.split()
            if len(parts) >= 2:
                return float(parts[1]) / 1024.0
    return None


def format_rss(before: float | None, after: float | None) -> str | None:
    if before is None or after is None:
        return None
    return f"rss_mb before={before:.2f} after={after:.2f} delta={after - before:.2f}"
