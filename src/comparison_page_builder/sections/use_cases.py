from __future__ import annotations

from typing import Sequence

from ..markup import check_icon, escape_html, logo_html
from ..models.profiles import Party
from ..models.sections import SectionId, SectionResult, UseCasesSectionParams
from ._base import anchor, build_result, section_header


def _card(name: str, logo_url: str | None, use_cases: Sequence[str], party: Party) -> str:
    items = "".join(
        '<li class="flex items-start gap-3">'
        '<div class="w-6 h-6 rounded-full bg-gray-100 flex items-center justify-center mt-0.5 flex-shrink-0">'
        f'{check_icon(party, size="w-4 h-4")}</div>'
        f'<span class="text-sm text-gray-700">{escape_html(use_case)}</span></li>'
        for use_case in use_cases
    )
    return f"""
        <div class="use-case-card bg-white rounded-xl border border-gray-200 p-5 md:p-6 shadow-md" data-party="{party.value}">
          <div class="flex items-center gap-3 mb-5">
            {logo_html(name, logo_url, party, "md")}
            <h3 class="font-bold text-gray-900 text-lg">Choose {escape_html(name)} If...</h3>
          </div>
          <ul class="space-y-3">{items}</ul>
        </div>"""


def generate_use_cases(params: UseCasesSectionParams) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    header = section_header(
        "Decision Guide",
        "Who Should Use Which?",
        "Find the right tool based on your specific needs and situation.",
    )
    pro_tip = ""
    if params.pro_tip:
        pro_tip = f"""
      <div class="mt-6 md:mt-8 p-5 md:p-6 bg-white border border-gray-200 rounded-xl shadow-sm">
        <h4 class="font-semibold text-gray-900 mb-1">Pro Tip</h4>
        <p class="text-sm text-gray-700 leading-relaxed">{escape_html(params.pro_tip)}</p>
      </div>"""

    html = f"""
  <section id="{anchor(SectionId.use_cases)}" class="py-12 md:py-20 px-4 md:px-6 bg-gray-50">
    <div class="max-w-5xl mx-auto">
      {header}
      <div class="grid md:grid-cols-2 gap-6 md:gap-8">
        {_card(brand.name, brand.logo_url, brand.use_cases, Party.brand)}
        {_card(competitor.name, competitor.logo_url, competitor.use_cases, Party.competitor)}
      </div>{pro_tip}
    </div>
  </section>"""

    return build_result(
        SectionId.use_cases,
        html,
        f"Generated use cases section for {brand.name} vs {competitor.name}",
    )


__all__ = ["generate_use_cases"]
