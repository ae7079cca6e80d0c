from __future__ import annotations

import json
import math
import re
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any

from faviconkit.errors import ValidationError


class Preset(str, Enum):
    CLASSIC_WEB = "classic-web"
    NEXTJS_APP_ROUTER = "nextjs-app-router"


class Fit(str, Enum):
    CONTAIN = "contain"
    COVER = "cover"


TRANSPARENT = "transparent"
MIN_PADDING = 0.0
MAX_PADDING = 0.2
HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")

# JSON key -> dataclass field, in the order fields are validated.
OPTION_KEYS: dict[str, str] = {
    "preset": "preset",
    "fit": "fit",
    "paddingPct": "padding_pct",
    "background": "background",
    "appName": "app_name",
    "shortName": "short_name",
}


@dataclass(frozen=True)
class Options:
    preset: Preset = Preset.CLASSIC_WEB
    fit: Fit = Fit.CONTAIN
    padding_pct: float = 0.0
    background: str = TRANSPARENT
    app_name: str = "My App"
    short_name: str = "MyApp"

    @property
    def is_transparent(self) -> bool:
        return self.background == TRANSPARENT

    def background_rgba(self) -> tuple[int, int, int, int]:
        if self.is_transparent:
            return (0, 0, 0, 0)
        h = self.background.lstrip("#")
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16), 255)

    def to_dict(self) -> dict[str, Any]:
        values = asdict(self)
        out = {key: values[field] for key, field in OPTION_KEYS.items()}
        out["preset"] = self.preset.value
        out["fit"] = self.fit.value
        return out


DEFAULT_OPTIONS = Options()


def clamp_padding(value: float) -> float:
    return max(MIN_PADDING, min(MAX_PADDING, value))


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity")
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _as_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        # Integers past float range behave like +/-Infinity and clamp.
        return math.copysign(math.inf, int(value))


def _to_number(value: Any) -> float | None:
    """Numeric coercion for paddingPct, JavaScript `Number()` style.

    Returns None when the value is not a number. Strings accept decimal and
    exponent forms, `Infinity`, and 0x/0o/0b literals; nothing else.
    """
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        number = _as_float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _RADIX_RE.fullmatch(text):
            number = _as_float(int(text, 0))
        elif _DECIMAL_RE.fullmatch(text):
            number = float(text.replace("Infinity", "inf"))
        else:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def _decode(raw: Any) -> dict[str, Any]:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError as e:  # JSONDecodeError, or an integer past the digit limit
            raise ValidationError("Invalid JSON in options.") from e
    else:
        parsed = raw
    if not isinstance(parsed, dict):
        raise ValidationError("Options must be a JSON object.")
    return parsed


def parse_and_validate_options(raw: Any) -> Options:
    """Turn a raw options payload into a fully populated `Options`.

    `raw` may be None, an empty string, JSON text or an already decoded dict.
    Unknown keys are rejected before any field is looked at; fields are then
    checked in declaration order and the first failure raises `ValidationError`.
    """
    if raw is None or raw == "" or raw == b"":
        return DEFAULT_OPTIONS

    parsed = _decode(raw)

    for key in parsed:
        if key not in OPTION_KEYS:
            raise ValidationError(f'Unknown option key: "{key}".')

    updates: dict[str, Any] = {}

    if "preset" in parsed:
        value = parsed["preset"]
        if not isinstance(value, str) or value not in {p.value for p in Preset}:
            raise ValidationError(f'Invalid preset: "{value}".')
        updates["preset"] = Preset(value)

    if "fit" in parsed:
        value = parsed["fit"]
        if not isinstance(value, str) or value not in {f.value for f in Fit}:
            raise ValidationError(f'Invalid fit: "{value}".')
        updates["fit"] = Fit(value)

    if "paddingPct" in parsed:
        number = _to_number(parsed["paddingPct"])
        if number is None:
            raise ValidationError("paddingPct must be a number.")
        updates["padding_pct"] = clamp_padding(number)

    if "background" in parsed:
        value = parsed["background"]
        if value != TRANSPARENT and (not isinstance(value, str) or not HEX_COLOR_RE.fullmatch(value)):
            raise ValidationError('background must be "transparent" or "#RRGGBB".')
        updates["background"] = value

    if "appName" in parsed:
        if not isinstance(parsed["appName"], str):
            raise ValidationError("appName must be a string.")
        updates["app_name"] = parsed["appName"]

    if "shortName" in parsed:
        if not isinstance(parsed["shortName"], str):
            raise ValidationError("shortName must be a string.")
        updates["short_name"] = parsed["shortName"]

    return replace(DEFAULT_OPTIONS, **updates)
