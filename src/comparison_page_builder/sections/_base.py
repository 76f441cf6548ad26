from __future__ import annotations

from typing import Any

from ..constants import SECTION_DEFINITIONS
from ..markup import escape_html
from ..models.sections import SectionId, SectionResult


def build_result(section_id: SectionId, html: str, message: str, **metadata: Any) -> SectionResult:
    return SectionResult(
        section_id=section_id,
        section_name=SECTION_DEFINITIONS[section_id].label,
        html=html,
        message=message,
        metadata=metadata,
    )


def section_header(badge: str, title: str, subtitle: str) -> str:
    """Centered badge / h2 / lead paragraph. Arguments are escaped here."""
    return f"""
      <div class="text-center mb-8 md:mb-12">
        <span class="badge mb-3 md:mb-4">{escape_html(badge)}</span>
        <h2 class="font-serif text-2xl md:text-3xl lg:text-4xl font-semibold text-gray-900 mb-3 md:mb-4">{escape_html(title)}</h2>
        <p class="text-sm md:text-base text-gray-600 max-w-2xl mx-auto">{escape_html(subtitle)}</p>
      </div>"""


def anchor(section_id: SectionId) -> str:
    return SECTION_DEFINITIONS[section_id].anchor


__all__ = ["anchor", "build_result", "section_header"]
