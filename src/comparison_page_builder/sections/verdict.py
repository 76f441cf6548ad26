from __future__ import annotations

from typing import Sequence

from ..markup import ARROW_PATH, check_icon, escape_html, icon, logo_html
from ..models.profiles import Party
from ..models.sections import SectionId, SectionResult, Stat, VerdictSectionParams
from ._base import anchor, build_result, section_header


def _stats(stats: Sequence[Stat]) -> str:
    return "".join(
        '<div class="bg-white rounded-xl p-3 md:p-5 text-center shadow-md">'
        f'<div class="text-xl md:text-2xl lg:text-3xl font-bold text-gray-900 mb-1 md:mb-2">{escape_html(stat.value)}</div>'
        f'<div class="text-xs md:text-sm text-gray-500">{escape_html(stat.label)}</div></div>'
        for stat in stats
    )


def _highlights(items: Sequence[str], party: Party) -> str:
    return "".join(
        f'<div class="flex items-start gap-2 md:gap-3">{check_icon(party, size="w-4 h-4 md:w-5 md:h-5 mt-0.5")}'
        f'<span class="text-sm text-gray-700">{escape_html(item)}</span></div>'
        for item in items
    )


def _card_heading(name: str, logo_url: str | None, tagline: str | None, party: Party) -> str:
    tagline_html = f'<p class="text-xs md:text-sm text-gray-500">{escape_html(tagline)}</p>' if tagline else ""
    return f"""
          <div class="flex items-center gap-3 mb-4 md:mb-5">
            {logo_html(name, logo_url, party, "md")}
            <div>
              <h3 class="text-lg md:text-xl font-bold text-gray-900">{escape_html(name)}</h3>
              {tagline_html}
            </div>
          </div>"""


def generate_verdict(params: VerdictSectionParams) -> SectionResult:
    brand, competitor, verdict = params.brand, params.competitor, params.verdict
    columns = max(len(params.stats), 1)

    html = f"""
  <section id="{anchor(SectionId.verdict)}" class="py-12 md:py-20 px-4 md:px-6 bg-gray-50">
    <div class="max-w-5xl mx-auto">
      {section_header("TL;DR Summary", "Quick Verdict", "A 60-second summary to help you decide.")}
      <div class="bg-white rounded-2xl p-5 md:p-8 lg:p-10 mb-8 md:mb-12 shadow-lg">
        <div class="text-center mb-6 md:mb-8">
          <div class="inline-flex items-center gap-2 px-3 py-1.5 rounded-full bg-gray-100 text-gray-700 font-semibold text-xs md:text-sm mb-3 md:mb-4">Our Recommendation</div>
          <h3 class="text-xl md:text-2xl lg:text-3xl font-bold text-gray-900 mb-3 md:mb-4">{escape_html(verdict.headline)}</h3>
          <p class="text-sm md:text-base lg:text-lg text-gray-600 max-w-2xl mx-auto">{escape_html(verdict.summary)}</p>
        </div>
        <div class="grid grid-cols-2 md:grid-cols-{columns} gap-3 md:gap-4">{_stats(params.stats)}</div>
      </div>
      <div class="grid md:grid-cols-2 gap-4 md:gap-6">
        <div class="verdict-card bg-white rounded-xl border border-gray-200 p-5 md:p-6 shadow-md" data-party="brand">
          {_card_heading(brand.name, brand.logo_url, brand.tagline, Party.brand)}
          <div class="space-y-3 mb-6">{_highlights(brand.highlights, Party.brand)}</div>
          <div class="pt-4 border-t border-gray-100">
            <p class="text-sm text-gray-600 mb-4"><strong class="text-gray-900">Best for:</strong> {escape_html(brand.best_for)}</p>
            <a href="{escape_html(brand.cta_url or "/")}" class="inline-flex items-center gap-2 text-brand font-semibold hover:opacity-80 transition-opacity">
              Try {escape_html(brand.name)} {icon(ARROW_PATH, "", size="w-4 h-4")}
            </a>
          </div>
        </div>
        <div class="verdict-card bg-white rounded-xl border border-gray-200 p-5 md:p-6 shadow-md" data-party="competitor">
          {_card_heading(competitor.name, competitor.logo_url, competitor.tagline, Party.competitor)}
          <div class="space-y-3 mb-6">{_highlights(competitor.highlights, Party.competitor)}</div>
          <div class="pt-4 border-t border-gray-100">
            <p class="text-sm text-gray-600"><strong class="text-gray-900">Best for:</strong> {escape_html(competitor.best_for)}</p>
          </div>
        </div>
      </div>
      <div class="mt-8 md:mt-12 p-5 md:p-8 rounded-2xl bg-white border border-gray-200 shadow-md">
        <h4 class="font-semibold text-gray-900 mb-2 text-lg">The Bottom Line</h4>
        <p class="text-gray-700 leading-relaxed">{escape_html(params.bottom_line)}</p>
      </div>
    </div>
  </section>"""

    return build_result(
        SectionId.verdict,
        html,
        f"Generated verdict section comparing {brand.name} vs {competitor.name}",
    )


__all__ = ["generate_verdict"]
