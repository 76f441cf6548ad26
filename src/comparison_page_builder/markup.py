from __future__ import annotations

import html
import json
from typing import Any, Mapping

from .constants import NEUTRAL_FILL_CLASS, NEUTRAL_ICON_CLASS
from .models.profiles import Party

_LOGO_SIZES = {
    "xs": ("w-6 h-6", "text-xs"),
    "sm": ("w-8 h-8", "text-sm"),
    "md": ("w-11 h-11", "text-lg"),
    "lg": ("w-16 h-16", "text-2xl"),
    "xl": ("w-16 h-16 md:w-20 md:h-20", "text-2xl md:text-3xl"),
}

CHECK_PATH = "M5 13l4 4L19 7"
CROSS_PATH = "M6 18L18 6M6 6l12 12"
ARROW_PATH = "M13 7l5 5m0 0l-5 5m5-5H6"
CHEVRON_PATH = "M19 9l-7 7-7-7"


def escape_html(text: str | None) -> str:
    """Escape the five reserved HTML characters. Apostrophes come out as ``&#039;``."""
    if text is None:
        return ""
    return html.escape(str(text), quote=True).replace("&#x27;", "&#039;")


def initial(name: str | None) -> str:
    stripped = (name or "").strip()
    return stripped[0].upper() if stripped else "?"


def fallback_fill(party: Party) -> str:
    return "bg-brand-icon" if party is Party.brand else NEUTRAL_FILL_CLASS


def icon(path: str, css_class: str, *, size: str = "w-5 h-5") -> str:
    return (
        f'<svg class="{size} {css_class} flex-shrink-0" fill="none" stroke="currentColor" '
        f'viewBox="0 0 24 24" aria-hidden="true">'
        f'<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{path}"/></svg>'
    )


def check_icon(party: Party, *, size: str = "w-5 h-5") -> str:
    """Affirmative tick: accent for the brand, neutral gray for the competitor."""
    css_class = "text-brand" if party is Party.brand else NEUTRAL_ICON_CLASS
    return icon(CHECK_PATH, css_class, size=size)


def cross_icon(*, size: str = "w-5 h-5") -> str:
    return icon(CROSS_PATH, "text-gray-400", size=size)


def logo_html(name: str, logo_url: str | None, party: Party, size: str = "md") -> str:
    """Render a party logo.

    With a ``logo_url`` the image is emitted together with a hidden fallback
    glyph that ``onerror`` reveals. Without one only the glyph is emitted: a
    square holding the capitalised first letter of ``name``, filled with the
    brand accent or neutral gray depending on ``party``.
    """
    box, text_size = _LOGO_SIZES.get(size, _LOGO_SIZES["md"])
    safe_name = escape_html(name)
    glyph_classes = f"{box} {fallback_fill(party)} rounded-lg items-center justify-center text-white font-bold {text_size}"

    if not logo_url:
        return f'<div class="{glyph_classes} flex" aria-label="{safe_name}">{escape_html(initial(name))}</div>'

    return (
        f'<img src="{escape_html(logo_url)}" alt="{safe_name} logo" '
        f'class="{box} rounded-lg object-contain bg-white" loading="lazy" '
        "onerror=\"this.style.display='none';this.nextElementSibling.style.display='flex';\">"
        f'<div class="{glyph_classes}" style="display:none" aria-label="{safe_name}">'
        f"{escape_html(initial(name))}</div>"
    )


def json_ld_script(data: Mapping[str, Any]) -> str:
    payload = json.dumps(data, indent=2, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">\n{payload}\n</script>'


__all__ = [
    "ARROW_PATH",
    "CHECK_PATH",
    "CHEVRON_PATH",
    "CROSS_PATH",
    "check_icon",
    "cross_icon",
    "escape_html",
    "fallback_fill",
    "icon",
    "initial",
    "json_ld_script",
    "logo_html",
]
