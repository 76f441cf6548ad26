from __future__ import annotations

from typing import Sequence

from ..markup import check_icon, cross_icon, escape_html, logo_html
from ..models.profiles import Party
from ..models.sections import ProsConsSectionParams, SectionId, SectionResult
from ._base import anchor, build_result, section_header


def _items(items: Sequence[str], marker: str) -> str:
    return "".join(
        f'<li class="flex items-start gap-2">{marker}<span class="text-sm text-gray-700">{escape_html(item)}</span></li>'
        for item in items
    )


def _card(name: str, logo_url: str | None, pros: Sequence[str], cons: Sequence[str], party: Party) -> str:
    tick = check_icon(party, size="w-4 h-4 mt-0.5")
    cross = cross_icon(size="w-4 h-4 mt-0.5")
    return f"""
        <div class="pros-cons-card bg-gray-50 rounded-xl p-5 md:p-6 shadow-md" data-party="{party.value}">
          <div class="flex items-center gap-3 mb-5">
            {logo_html(name, logo_url, party, "md")}
            <h3 class="font-bold text-gray-900 text-lg">{escape_html(name)}</h3>
          </div>
          <div class="mb-5">
            <h4 class="font-semibold text-gray-900 mb-3 text-sm">Pros</h4>
            <ul class="space-y-2.5">{_items(pros, tick)}</ul>
          </div>
          <div>
            <h4 class="font-semibold text-gray-900 mb-3 text-sm">Cons</h4>
            <ul class="space-y-2.5">{_items(cons, cross)}</ul>
          </div>
        </div>"""


def generate_pros_cons(params: ProsConsSectionParams) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    header = section_header(
        "Honest Assessment",
        "Pros & Cons",
        "An honest look at what each platform does well and where they could improve.",
    )
    html = f"""
  <section id="{anchor(SectionId.pros_cons)}" class="py-12 md:py-20 px-4 md:px-6 bg-white">
    <div class="max-w-5xl mx-auto">
      {header}
      <div class="grid md:grid-cols-2 gap-6 md:gap-8">
        {_card(brand.name, brand.logo_url, brand.pros, brand.cons, Party.brand)}
        {_card(competitor.name, competitor.logo_url, competitor.pros, competitor.cons, Party.competitor)}
      </div>
    </div>
  </section>"""

    return build_result(
        SectionId.pros_cons,
        html,
        f"Generated pros and cons for {brand.name} vs {competitor.name}",
    )


__all__ = ["generate_pros_cons"]
