from __future__ import annotations

from ..markup import check_icon, escape_html
from ..models.profiles import Party
from ..models.sections import CtaSectionParams, SectionId, SectionResult
from ._base import anchor, build_result


def generate_cta(params: CtaSectionParams) -> SectionResult:
    primary, secondary = params.primary_cta, params.secondary_cta

    secondary_html = ""
    if secondary:
        secondary_html = (
            f'<a href="{escape_html(secondary.url)}" class="w-full sm:w-auto px-6 md:px-8 py-3 md:py-4 bg-transparent '
            "text-white font-semibold rounded-xl text-sm md:text-base border border-white/20 hover:bg-white/10 "
            f'transition-all duration-200 text-center">{escape_html(secondary.text)}</a>'
        )

    badges_html = ""
    if params.trust_badges:
        badges = "".join(
            f'<div class="flex items-center gap-2">{check_icon(Party.brand, size="w-4 h-4")}<span>{escape_html(badge)}</span></div>'
            for badge in params.trust_badges
        )
        badges_html = f'<div class="flex flex-wrap items-center justify-center gap-4 text-xs md:text-sm text-gray-400">{badges}</div>'

    html = f"""
  <section id="{anchor(SectionId.cta)}" class="py-16 md:py-24 px-4 md:px-6 bg-gray-900 relative overflow-hidden">
    <div class="relative max-w-3xl mx-auto text-center">
      <h2 class="text-2xl md:text-3xl lg:text-4xl font-bold text-white mb-4 md:mb-6 leading-tight">{escape_html(params.headline)}</h2>
      <p class="text-base md:text-lg text-gray-400 mb-6 md:mb-8 max-w-2xl mx-auto leading-relaxed">{escape_html(params.description)}</p>
      <div class="flex flex-col sm:flex-row items-center justify-center gap-3 md:gap-4 mb-6">
        <a href="{escape_html(primary.url)}" class="w-full sm:w-auto btn-primary px-6 md:px-8 py-3 md:py-4 rounded-xl text-sm md:text-base text-center">{escape_html(primary.text)}</a>
        {secondary_html}
      </div>
      {badges_html}
    </div>
  </section>"""

    return build_result(SectionId.cta, html, f"Generated CTA section for {params.brand_name}")


__all__ = ["generate_cta"]
