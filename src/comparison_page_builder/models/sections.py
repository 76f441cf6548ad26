from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .profiles import BrandProfile, CallToAction, CompetitorProfile


class SectionId(str, Enum):
    hero = "hero"
    toc = "toc"
    verdict = "verdict"
    screenshots = "screenshots"
    comparison = "comparison"
    pricing = "pricing"
    pros_cons = "pros_cons"
    use_cases = "use_cases"
    faq = "faq"
    cta = "cta"


class FeatureStatus(str, Enum):
    """Render policy for one comparison cell."""

    yes = "yes"
    partial = "partial"
    no = "no"
    badge = "badge"


class _Params(BaseModel):
    model_config = ConfigDict(frozen=True)


# Hero


class Author(_Params):
    name: str = "Editorial Team"
    role: str | None = None


class HeroSectionParams(_Params):
    brand: BrandProfile
    competitor: CompetitorProfile
    seo_description: str | None = Field(default=None, description="Page meta description shown in the hero")
    cta_primary: CallToAction | None = None
    author: Author | None = None
    last_updated: date | None = None


# Table of contents


class TocEntry(_Params):
    id: str
    label: str
    emoji: str | None = None


class TocSectionParams(_Params):
    sections: Sequence[TocEntry]
    sticky: bool = True


# Verdict


class VerdictBrand(BrandProfile):
    highlights: Sequence[str] = Field(default_factory=list)
    best_for: str = ""
    cta_url: str = "/"


class VerdictCompetitor(CompetitorProfile):
    highlights: Sequence[str] = Field(default_factory=list)
    best_for: str = ""


class Verdict(_Params):
    headline: str
    summary: str


class Stat(_Params):
    value: str
    label: str


class VerdictSectionParams(_Params):
    brand: VerdictBrand
    competitor: VerdictCompetitor
    verdict: Verdict
    stats: Sequence[Stat] = Field(default_factory=list)
    bottom_line: str = ""


# Comparison table


class FeatureRow(_Params):
    name: str
    description: str | None = None
    brand_value: str
    brand_status: FeatureStatus
    competitor_value: str
    competitor_status: FeatureStatus


class ComparisonTableParams(_Params):
    brand: BrandProfile
    competitor: CompetitorProfile
    features: Sequence[FeatureRow]
    brand_wins: Sequence[str] = Field(default_factory=list)
    competitor_wins: Sequence[str] = Field(default_factory=list)


# Pricing


class PricingPlan(_Params):
    name: str
    price: str
    description: str = ""
    features: Sequence[str] = Field(default_factory=list)
    is_recommended: bool = False


class PricingDetails(_Params):
    free_tier: bool = False
    starting_price: str
    billing_note: str | None = None
    plans: Sequence[PricingPlan] = Field(default_factory=list)


class PricingBrand(BrandProfile):
    pricing: PricingDetails


class PricingCompetitor(CompetitorProfile):
    pricing: PricingDetails


class PricingSectionParams(_Params):
    brand: PricingBrand
    competitor: PricingCompetitor
    value_summary: str = ""


# Pros and cons


class ProsConsBrand(BrandProfile):
    pros: Sequence[str] = Field(default_factory=list)
    cons: Sequence[str] = Field(default_factory=list)


class ProsConsCompetitor(CompetitorProfile):
    pros: Sequence[str] = Field(default_factory=list)
    cons: Sequence[str] = Field(default_factory=list)


class ProsConsSectionParams(_Params):
    brand: ProsConsBrand
    competitor: ProsConsCompetitor


# Use cases


class UseCasesBrand(BrandProfile):
    use_cases: Sequence[str] = Field(default_factory=list)


class UseCasesCompetitor(CompetitorProfile):
    use_cases: Sequence[str] = Field(default_factory=list)


class UseCasesSectionParams(_Params):
    brand: UseCasesBrand
    competitor: UseCasesCompetitor
    pro_tip: str | None = None


# Screenshots


class ScreenshotBrand(BrandProfile):
    screenshot_url: str
    caption: str | None = None
    cta_url: str | None = None


class ScreenshotCompetitor(CompetitorProfile):
    screenshot_url: str
    caption: str | None = None


class ScreenshotsSectionParams(_Params):
    brand: ScreenshotBrand
    competitor: ScreenshotCompetitor
    section_title: str = "Interface Comparison"
    section_description: str | None = None


# FAQ


class FaqItem(_Params):
    question: str
    answer: str


class FaqSectionParams(_Params):
    brand_name: str
    competitor_name: str
    faqs: Sequence[FaqItem]


# Call to action


class CtaSectionParams(_Params):
    brand_name: str
    headline: str
    description: str
    primary_cta: CallToAction
    secondary_cta: CallToAction | None = None
    trust_badges: Sequence[str] = Field(default_factory=list)


# Output


class SectionFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_id: SectionId
    html: str


class SectionResult(BaseModel):
    success: bool = True
    section_id: SectionId
    section_name: str
    html: str
    message: str
    metadata: Mapping[str, Any] = Field(default_factory=dict)


__all__ = [
    "Author",
    "ComparisonTableParams",
    "CtaSectionParams",
    "FaqItem",
    "FaqSectionParams",
    "FeatureRow",
    "FeatureStatus",
    "HeroSectionParams",
    "PricingBrand",
    "PricingCompetitor",
    "PricingDetails",
    "PricingPlan",
    "PricingSectionParams",
    "ProsConsBrand",
    "ProsConsCompetitor",
    "ProsConsSectionParams",
    "ScreenshotBrand",
    "ScreenshotCompetitor",
    "ScreenshotsSectionParams",
    "SectionFragment",
    "SectionId",
    "SectionResult",
    "Stat",
    "TocEntry",
    "TocSectionParams",
    "UseCasesBrand",
    "UseCasesCompetitor",
    "UseCasesSectionParams",
    "Verdict",
    "VerdictBrand",
    "VerdictCompetitor",
    "VerdictSectionParams",
]
