from __future__ import annotations

from typing import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .profiles import BrandProfile
from .sections import SectionFragment, SectionId


class SeoMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    meta_description: str
    keywords: Sequence[str] = Field(default_factory=list)
    canonical_url: str | None = None
    og_image: str | None = None


class Hsl(BaseModel):
    model_config = ConfigDict(frozen=True)

    h: int
    s: int
    l: int


class ThemeTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary_color: str
    secondary_color: str
    primary_hsl: Hsl
    secondary_hsl: Hsl

    def css_variables(self) -> dict[str, str]:
        primary, secondary = self.primary_hsl, self.secondary_hsl
        return {
            "--brand-500": f"hsl({primary.h}, {primary.s}%, 50%)",
            "--brand-600": f"hsl({primary.h}, {primary.s}%, 45%)",
            "--brand-700": f"hsl({primary.h}, {primary.s}%, 38%)",
            "--secondary-500": f"hsl({secondary.h}, {secondary.s}%, 50%)",
            "--secondary-600": f"hsl({secondary.h}, {secondary.s}%, 45%)",
            "--secondary-700": f"hsl({secondary.h}, {secondary.s}%, 38%)",
        }


class SectionMap(BaseModel):
    """Section id to HTML fragment, as collected from the section generators."""

    # Unknown section keys are a validation error.
    model_config = ConfigDict(extra="forbid")

    hero: str | None = None
    toc: str | None = None
    verdict: str | None = None
    screenshots: str | None = None
    comparison: str | None = None
    pricing: str | None = None
    pros_cons: str | None = None
    use_cases: str | None = None
    faq: str | None = None
    cta: str | None = None
    custom: Sequence[str] = Field(default_factory=list)

    @classmethod
    def from_fragments(
        cls, fragments: Iterable[SectionFragment], *, custom: Sequence[str] = ()
    ) -> "SectionMap":
        # Later fragments for the same id replace earlier ones.
        values = {fragment.section_id.value: fragment.html for fragment in fragments}
        return cls(**values, custom=list(custom))

    def get(self, section_id: SectionId | str) -> str | None:
        return getattr(self, SectionId(section_id).value)

    def provided(self) -> list[str]:
        provided = [section_id.value for section_id in SectionId if self.get(section_id)]
        if any(self.custom):
            provided.append("custom")
        return provided


class AssemblyRequest(BaseModel):
    item_id: str
    page_title: str
    seo: SeoMeta
    brand: BrandProfile
    competitor_name: str
    sections: SectionMap
    theme_switcher: bool = False
    footer_html: str | None = None
    include_footer: bool = False


class ValidationReport(BaseModel):
    missing_required: list[str] = Field(default_factory=list)
    missing_recommended: list[str] = Field(default_factory=list)
    invalid: list[str] = Field(default_factory=list)

    @property
    def blocking(self) -> bool:
        return bool(self.missing_required or self.invalid)


class AssembledPage(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: str
    sections_included: Sequence[str]


class AssemblyResult(BaseModel):
    success: bool
    item_id: str
    message: str | None = None
    error: str | None = None
    html_length: int | None = None
    line_count: int | None = None
    sections_included: list[str] | None = None
    sections_provided: list[str] | None = None
    missing_required: list[str] | None = None
    missing_recommended: list[str] | None = None
    invalid_sections: list[str] | None = None
    html: str | None = Field(default=None, description="Composed page, returned only when persisting it failed")


__all__ = [
    "AssembledPage",
    "AssemblyRequest",
    "AssemblyResult",
    "Hsl",
    "SectionMap",
    "SeoMeta",
    "ThemeTokens",
    "ValidationReport",
]
