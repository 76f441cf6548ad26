from __future__ import annotations

from typing import Mapping, Sequence

from ..markup import check_icon, escape_html, logo_html
from ..models.profiles import Party
from ..models.sections import ComparisonTableParams, FeatureRow, FeatureStatus, SectionId, SectionResult
from ._base import anchor, build_result, section_header

# (text colour, show tick) per status. Ticks follow the colour discipline of the owning party.
_BRAND_CELLS: Mapping[FeatureStatus, tuple[str, bool]] = {
    FeatureStatus.yes: ("text-gray-900", True),
    FeatureStatus.partial: ("text-gray-600", False),
    FeatureStatus.no: ("text-gray-400", False),
    FeatureStatus.badge: ("text-gray-700", False),
}
_COMPETITOR_CELLS: Mapping[FeatureStatus, tuple[str, bool]] = {
    FeatureStatus.yes: ("text-gray-700", True),
    FeatureStatus.partial: ("text-gray-600", False),
    FeatureStatus.no: ("text-gray-400", False),
    FeatureStatus.badge: ("text-gray-600", False),
}

for _table in (_BRAND_CELLS, _COMPETITOR_CELLS):
    _unhandled = set(FeatureStatus) - set(_table)
    if _unhandled:
        raise RuntimeError(f"No cell style for feature status: {sorted(s.value for s in _unhandled)}")


def status_cell(value: str, status: FeatureStatus, party: Party) -> str:
    table = _BRAND_CELLS if party is Party.brand else _COMPETITOR_CELLS
    text_class, ticked = table[status]
    tick = check_icon(party, size="w-3 h-3") if ticked else ""
    return (
        f'<span data-status="{status.value}" class="inline-flex items-center gap-1 px-2 py-1 rounded-full bg-gray-100 '
        f'{text_class} text-xs font-medium">{tick}{escape_html(value)}</span>'
    )


def _row(feature: FeatureRow) -> str:
    description = (
        f'<div class="text-xs text-gray-500 mt-0.5 hidden md:block">{escape_html(feature.description)}</div>'
        if feature.description
        else ""
    )
    return f"""
            <tr class="table-row-alt border-b border-gray-100">
              <td class="px-3 md:px-5 py-3 md:py-4">
                <div class="font-medium text-gray-900 text-xs md:text-sm">{escape_html(feature.name)}</div>
                {description}
              </td>
              <td class="brand-cell px-2 md:px-4 py-3 md:py-4 text-center">{status_cell(feature.brand_value, feature.brand_status, Party.brand)}</td>
              <td class="competitor-cell px-2 md:px-4 py-3 md:py-4 text-center">{status_cell(feature.competitor_value, feature.competitor_status, Party.competitor)}</td>
            </tr>"""


def _wins(items: Sequence[str], party: Party) -> str:
    return "".join(
        f'<li class="flex items-start gap-2">{check_icon(party, size="w-4 h-4 mt-0.5")}<span>{escape_html(item)}</span></li>'
        for item in items
    )


def generate_comparison(params: ComparisonTableParams) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    brand_logo = logo_html(brand.name, brand.logo_url, Party.brand, "xs")
    competitor_logo = logo_html(competitor.name, competitor.logo_url, Party.competitor, "xs")
    # One row per input feature, caller order, duplicates included.
    rows = "".join(_row(feature) for feature in params.features)
    header = section_header(
        "Detailed Analysis",
        "Feature-by-Feature Comparison",
        f"How {brand.name} and {competitor.name} compare across key capabilities.",
    )

    html = f"""
  <section id="{anchor(SectionId.comparison)}" class="py-12 md:py-20 px-4 md:px-6 bg-white">
    <div class="max-w-5xl mx-auto">
      {header}
      <div class="overflow-x-auto rounded-xl border border-gray-200 shadow-md -mx-4 md:mx-0">
        <table class="w-full min-w-[500px]">
          <thead>
            <tr class="bg-gray-50 border-b border-gray-200">
              <th class="text-left px-3 md:px-5 py-3 md:py-4 font-semibold text-gray-900 text-xs md:text-sm w-2/5">Feature</th>
              <th class="text-center px-2 md:px-4 py-3 md:py-4 w-[30%]">
                <div class="flex items-center justify-center gap-2">{brand_logo}<span class="font-semibold text-gray-900 text-xs md:text-sm">{escape_html(brand.name)}</span></div>
              </th>
              <th class="text-center px-2 md:px-4 py-3 md:py-4 w-[30%]">
                <div class="flex items-center justify-center gap-2">{competitor_logo}<span class="font-semibold text-gray-600 text-xs md:text-sm">{escape_html(competitor.name)}</span></div>
              </th>
            </tr>
          </thead>
          <tbody>{rows}
          </tbody>
        </table>
      </div>
      <div class="mt-6 md:mt-8 grid md:grid-cols-2 gap-4 md:gap-6">
        <div class="wins-card p-4 md:p-5 bg-white rounded-xl border border-gray-200 shadow-sm" data-party="brand">
          <h4 class="font-semibold text-gray-900 mb-2 md:mb-3 flex items-center gap-2 text-sm md:text-base">{brand_logo} {escape_html(brand.name)} Advantages</h4>
          <ul class="space-y-1.5 text-xs md:text-sm text-gray-700">{_wins(params.brand_wins, Party.brand)}</ul>
        </div>
        <div class="wins-card p-4 md:p-5 bg-white rounded-xl border border-gray-200 shadow-sm" data-party="competitor">
          <h4 class="font-semibold text-gray-700 mb-2 md:mb-3 flex items-center gap-2 text-sm md:text-base">{competitor_logo} {escape_html(competitor.name)} Advantages</h4>
          <ul class="space-y-1.5 text-xs md:text-sm text-gray-600">{_wins(params.competitor_wins, Party.competitor)}</ul>
        </div>
      </div>
    </div>
  </section>"""

    count = len(params.features)
    return build_result(
        SectionId.comparison,
        html,
        f"Generated comparison table with {count} features",
        feature_count=count,
    )


__all__ = ["generate_comparison", "status_cell"]
