from __future__ import annotations

import math

from .constants import DEFAULT_PRIMARY_COLOR, DEFAULT_SECONDARY_COLOR
from .models.page import Hsl, ThemeTokens
from .models.profiles import BrandProfile


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _parse_channels(hex_color: str) -> tuple[int, int, int]:
    try:
        if len(hex_color) == 4:
            return tuple(int(digit * 2, 16) for digit in hex_color[1:4])  # type: ignore[return-value]
        if len(hex_color) == 7:
            return tuple(int(hex_color[i : i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]
    except ValueError:
        pass
    return 0, 0, 0


def hex_to_hsl(hex_color: str) -> Hsl:
    """Convert ``#rgb`` / ``#rrggbb`` into rounded integer HSL.

    Any other length, or non-hex digits, is read as black rather than raising.
    """
    r, g, b = (channel / 255 for channel in _parse_channels(hex_color or ""))
    high, low = max(r, g, b), min(r, g, b)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)
        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return Hsl(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def resolve_color(candidate: str | None, default: str) -> str:
    if candidate and candidate.strip() and candidate.startswith("#"):
        return candidate
    return default


def derive_theme(brand: BrandProfile) -> ThemeTokens:
    primary = resolve_color(brand.primary_color, DEFAULT_PRIMARY_COLOR)
    secondary = resolve_color(brand.secondary_color, DEFAULT_SECONDARY_COLOR)
    return ThemeTokens(
        primary_color=primary,
        secondary_color=secondary,
        primary_hsl=hex_to_hsl(primary),
        secondary_hsl=hex_to_hsl(secondary),
    )


__all__ = ["derive_theme", "hex_to_hsl", "resolve_color"]
