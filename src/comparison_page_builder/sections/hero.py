from __future__ import annotations

from datetime import date
from typing import Callable

from ..markup import escape_html, logo_html
from ..models.profiles import CallToAction, Party
from ..models.sections import Author, HeroSectionParams, SectionId, SectionResult
from ._base import anchor, build_result

_CHEVRON = (
    '<svg class="w-3 h-3 md:w-4 md:h-4 text-gray-400" fill="none" stroke="currentColor" viewBox="0 0 24 24">'
    '<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="M9 5l7 7-7 7"/></svg>'
)


def format_display_date(value: date) -> str:
    """``2024-03-05`` -> ``Mar 5, 2024``."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def generate_hero(params: HeroSectionParams, *, today: Callable[[], date] = date.today) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    cta = params.cta_primary or CallToAction(text=f"Try {brand.name}", url="/")
    author = params.author or Author(name="Editorial Team", role="Product Research")
    updated = params.last_updated or today()

    description = ""
    if params.seo_description:
        description = (
            '<p class="text-center text-base md:text-lg lg:text-xl text-gray-600 max-w-3xl mx-auto mb-8 md:mb-10 leading-relaxed">'
            f"{escape_html(params.seo_description)}</p>"
        )
    role = f", {escape_html(author.role)}" if author.role else ""

    html = f"""
  <section id="{anchor(SectionId.hero)}" class="relative overflow-hidden pt-8 md:pt-12 pb-16 md:pb-24 px-4 md:px-6 bg-white">
    <div class="relative max-w-5xl mx-auto">
      <nav class="flex items-center gap-2 text-xs md:text-sm text-gray-500 mb-6 md:mb-8" aria-label="Breadcrumb">
        <a href="/" class="hover:text-gray-900 transition-colors">Home</a>
        {_CHEVRON}
        <a href="/alternatives" class="hover:text-gray-900 transition-colors">Alternatives</a>
        {_CHEVRON}
        <span class="text-gray-700 font-medium">vs {escape_html(competitor.name)}</span>
      </nav>
      <div class="flex items-center justify-center gap-4 md:gap-6 mb-8 md:mb-10">
        <div class="flex flex-col items-center">
          {logo_html(brand.name, brand.logo_url, Party.brand, "xl")}
          <span class="mt-2 text-sm font-semibold text-gray-900">{escape_html(brand.name)}</span>
        </div>
        <span class="text-2xl md:text-3xl font-bold text-gray-300">VS</span>
        <div class="flex flex-col items-center">
          {logo_html(competitor.name, competitor.logo_url, Party.competitor, "xl")}
          <span class="mt-2 text-sm font-semibold text-gray-700">{escape_html(competitor.name)}</span>
        </div>
      </div>
      <h1 class="text-center text-3xl sm:text-4xl md:text-5xl lg:text-6xl font-bold text-gray-900 leading-tight mb-4 md:mb-6">
        <span class="text-brand">{escape_html(brand.name)}</span> vs {escape_html(competitor.name)}
      </h1>
      {description}
      <div class="flex items-center justify-center mb-6 md:mb-8">
        <a href="{escape_html(cta.url)}" class="btn-primary px-6 md:px-8 py-3 md:py-4 rounded-xl text-sm md:text-base text-center">{escape_html(cta.text)}</a>
      </div>
      <div class="flex flex-col sm:flex-row items-center justify-center gap-3 sm:gap-6 text-xs sm:text-sm text-gray-500">
        <span>By <strong class="text-gray-700">{escape_html(author.name)}</strong>{role}</span>
        <span>Updated <time datetime="{updated.isoformat()}">{format_display_date(updated)}</time></span>
      </div>
    </div>
  </section>"""

    return build_result(SectionId.hero, html, f"Generated hero section for {brand.name} vs {competitor.name}")


__all__ = ["format_display_date", "generate_hero"]
