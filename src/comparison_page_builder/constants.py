from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Sequence

from .models.sections import SectionId


@dataclass(frozen=True)
class SectionDefinition:
    section_id: SectionId
    label: str
    tool_name: str
    anchor: str


SECTION_DEFINITIONS: Mapping[SectionId, SectionDefinition] = {
    SectionId.hero: SectionDefinition(
        section_id=SectionId.hero,
        label="Hero Section",
        tool_name="generate_hero_section",
        anchor="hero",
    ),
    SectionId.toc: SectionDefinition(
        section_id=SectionId.toc,
        label="Table of Contents",
        tool_name="generate_toc_section",
        anchor="toc",
    ),
    SectionId.verdict: SectionDefinition(
        section_id=SectionId.verdict,
        label="Quick Verdict Section",
        tool_name="generate_verdict_section",
        anchor="verdict",
    ),
    SectionId.screenshots: SectionDefinition(
        section_id=SectionId.screenshots,
        label="Interface Screenshots Section",
        tool_name="generate_screenshots_section",
        anchor="screenshots",
    ),
    SectionId.comparison: SectionDefinition(
        section_id=SectionId.comparison,
        label="Feature Comparison Table",
        tool_name="generate_comparison_table",
        anchor="comparison",
    ),
    SectionId.pricing: SectionDefinition(
        section_id=SectionId.pricing,
        label="Pricing Comparison Section",
        tool_name="generate_pricing_section",
        anchor="pricing",
    ),
    SectionId.pros_cons: SectionDefinition(
        section_id=SectionId.pros_cons,
        label="Pros & Cons Section",
        tool_name="generate_pros_cons_section",
        anchor="pros-cons",
    ),
    SectionId.use_cases: SectionDefinition(
        section_id=SectionId.use_cases,
        label="Use Cases Section",
        tool_name="generate_use_cases_section",
        anchor="use-cases",
    ),
    SectionId.faq: SectionDefinition(
        section_id=SectionId.faq,
        label="FAQ Section",
        tool_name="generate_faq_section",
        anchor="faq",
    ),
    SectionId.cta: SectionDefinition(
        section_id=SectionId.cta,
        label="CTA Section",
        tool_name="generate_cta_section",
        anchor="cta",
    ),
}


# Screenshots sit right after the verdict so the visual comparison comes early.
CANONICAL_SECTION_ORDER: Sequence[SectionId] = (
    SectionId.hero,
    SectionId.toc,
    SectionId.verdict,
    SectionId.screenshots,
    SectionId.comparison,
    SectionId.pricing,
    SectionId.pros_cons,
    SectionId.use_cases,
    SectionId.faq,
    SectionId.cta,
)

REQUIRED_SECTIONS: Sequence[SectionId] = (
    SectionId.hero,
    SectionId.verdict,
    SectionId.comparison,
    SectionId.faq,
    SectionId.cta,
)

RECOMMENDED_SECTIONS: Sequence[SectionId] = (
    SectionId.toc,
    SectionId.pricing,
    SectionId.pros_cons,
    SectionId.use_cases,
)


# Placeholder detection thresholds. Upstream generation is tuned against these.
MIN_SECTION_LENGTH = 50
# Both are applied with fullmatch on the stripped fragment.
ELLIPSIS_PATTERN = re.compile(r"\.{2,}")
BRACKET_PLACEHOLDER_PATTERN = re.compile(r"\[.*\]")


DEFAULT_PRIMARY_COLOR = "#0ea5e9"
DEFAULT_SECONDARY_COLOR = "#8b5cf6"

# Fallback glyph / icon colour for everything that belongs to the competitor.
NEUTRAL_FILL_CLASS = "bg-gray-600"
NEUTRAL_ICON_CLASS = "text-gray-400"

# Tokens that carry the brand accent colour. None may appear on competitor markup.
ACCENT_TOKENS: Sequence[str] = ("text-brand", "bg-brand", "bg-brand-icon", "btn-primary")


SCROLL_TOP_THRESHOLD_PX = 300
TOC_ACTIVE_OFFSET_PX = 100

THEME_PRESETS: Mapping[str, tuple[int, int]] = {
    "blue": (199, 89),
    "emerald": (160, 84),
    "violet": (263, 70),
}


__all__ = [
    "ACCENT_TOKENS",
    "BRACKET_PLACEHOLDER_PATTERN",
    "CANONICAL_SECTION_ORDER",
    "DEFAULT_PRIMARY_COLOR",
    "DEFAULT_SECONDARY_COLOR",
    "ELLIPSIS_PATTERN",
    "MIN_SECTION_LENGTH",
    "NEUTRAL_FILL_CLASS",
    "NEUTRAL_ICON_CLASS",
    "RECOMMENDED_SECTIONS",
    "REQUIRED_SECTIONS",
    "SCROLL_TOP_THRESHOLD_PX",
    "SECTION_DEFINITIONS",
    "SectionDefinition",
    "THEME_PRESETS",
    "TOC_ACTIVE_OFFSET_PX",
]
