from __future__ import annotations

from typing import Any, Callable, Mapping, NamedTuple

from pydantic import BaseModel

from ..models.sections import (
    ComparisonTableParams,
    CtaSectionParams,
    FaqSectionParams,
    HeroSectionParams,
    PricingSectionParams,
    ProsConsSectionParams,
    ScreenshotsSectionParams,
    SectionId,
    SectionResult,
    TocSectionParams,
    UseCasesSectionParams,
    VerdictSectionParams,
)
from .comparison import generate_comparison
from .cta import generate_cta
from .faq import generate_faq
from .hero import generate_hero
from .pricing import generate_pricing
from .pros_cons import generate_pros_cons
from .screenshots import generate_screenshots
from .toc import generate_toc
from .use_cases import generate_use_cases
from .verdict import generate_verdict


class SectionGenerator(NamedTuple):
    params_model: type[BaseModel]
    generate: Callable[[Any], SectionResult]


SECTION_GENERATORS: Mapping[SectionId, SectionGenerator] = {
    SectionId.hero: SectionGenerator(HeroSectionParams, generate_hero),
    SectionId.toc: SectionGenerator(TocSectionParams, generate_toc),
    SectionId.verdict: SectionGenerator(VerdictSectionParams, generate_verdict),
    SectionId.screenshots: SectionGenerator(ScreenshotsSectionParams, generate_screenshots),
    SectionId.comparison: SectionGenerator(ComparisonTableParams, generate_comparison),
    SectionId.pricing: SectionGenerator(PricingSectionParams, generate_pricing),
    SectionId.pros_cons: SectionGenerator(ProsConsSectionParams, generate_pros_cons),
    SectionId.use_cases: SectionGenerator(UseCasesSectionParams, generate_use_cases),
    SectionId.faq: SectionGenerator(FaqSectionParams, generate_faq),
    SectionId.cta: SectionGenerator(CtaSectionParams, generate_cta),
}


def generate_section(section_id: SectionId | str, payload: Mapping[str, Any]) -> SectionResult:
    """Validate a JSON-shaped payload against the section's params model and render it.

    Raises:
        ValueError: ``section_id`` is not a known section.
        pydantic.ValidationError: the payload does not match the params model.
    """
    generator = SECTION_GENERATORS[SectionId(section_id)]
    params = generator.params_model.model_validate(payload)
    return generator.generate(params)


__all__ = [
    "SECTION_GENERATORS",
    "SectionGenerator",
    "generate_comparison",
    "generate_cta",
    "generate_faq",
    "generate_hero",
    "generate_pricing",
    "generate_pros_cons",
    "generate_screenshots",
    "generate_section",
    "generate_toc",
    "generate_use_cases",
    "generate_verdict",
]
