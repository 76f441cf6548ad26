from __future__ import annotations

from ..markup import check_icon, escape_html, logo_html
from ..models.profiles import Party
from ..models.sections import PricingDetails, PricingPlan, PricingSectionParams, SectionId, SectionResult
from ._base import anchor, build_result, section_header

_RECOMMENDED_BADGES = {
    Party.brand: ("bg-brand", "Recommended"),
    Party.competitor: ("bg-gray-500", "Popular"),
}


def _plan_card(plan: PricingPlan, party: Party) -> str:
    border = "border-gray-300 border-2 shadow-md" if plan.is_recommended else "border-gray-200"
    badge = ""
    if plan.is_recommended:
        fill, label = _RECOMMENDED_BADGES[party]
        badge = (
            f'<span class="absolute -top-2.5 left-1/2 -translate-x-1/2 px-3 py-0.5 {fill} text-white '
            f'text-xs font-semibold rounded-full">{label}</span>'
        )
    features = "".join(
        f'<li class="flex items-start gap-2">{check_icon(party, size="w-4 h-4 mt-0.5")}<span>{escape_html(feature)}</span></li>'
        for feature in plan.features
    )
    return f"""
            <div class="plan-card bg-white rounded-xl border {border} p-4 md:p-5 relative">
              {badge}
              <div class="text-center mb-4">
                <h4 class="font-semibold text-gray-900 text-sm md:text-base">{escape_html(plan.name)}</h4>
                <div class="text-xl md:text-2xl font-bold text-gray-900 mt-1">{escape_html(plan.price)}</div>
                <p class="text-xs text-gray-500 mt-1">{escape_html(plan.description)}</p>
              </div>
              <ul class="space-y-2 text-xs md:text-sm text-gray-600">{features}</ul>
            </div>"""


def _party_column(name: str, logo_url: str | None, pricing: PricingDetails, party: Party) -> str:
    note = f" &bull; {escape_html(pricing.billing_note)}" if pricing.billing_note else ""
    free_tier = (
        '<span class="px-2 py-1 bg-gray-200 text-gray-700 text-xs font-semibold rounded">Free Tier</span>'
        if pricing.free_tier
        else ""
    )
    plans = "".join(_plan_card(plan, party) for plan in pricing.plans)
    return f"""
        <div class="pricing-column bg-gray-50 rounded-2xl p-5 md:p-6 shadow-md" data-party="{party.value}">
          <div class="flex items-center gap-3 mb-5">
            {logo_html(name, logo_url, party, "md")}
            <div class="flex-1 min-w-0">
              <h3 class="font-bold text-gray-900">{escape_html(name)}</h3>
              <p class="text-xs text-gray-500">Starting from {escape_html(pricing.starting_price)}{note}</p>
            </div>
            {free_tier}
          </div>
          <div class="space-y-4">{plans}</div>
        </div>"""


def generate_pricing(params: PricingSectionParams) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    header = section_header(
        "Value Analysis",
        "Pricing Comparison",
        "Understanding the cost and value each platform offers.",
    )
    html = f"""
  <section id="{anchor(SectionId.pricing)}" class="py-12 md:py-20 px-4 md:px-6 bg-white">
    <div class="max-w-5xl mx-auto">
      {header}
      <div class="grid md:grid-cols-2 gap-6 md:gap-8">
        {_party_column(brand.name, brand.logo_url, brand.pricing, Party.brand)}
        {_party_column(competitor.name, competitor.logo_url, competitor.pricing, Party.competitor)}
      </div>
      <div class="mt-6 md:mt-8 p-5 md:p-6 bg-gray-50 rounded-xl shadow-md">
        <h4 class="font-semibold text-gray-900 mb-2">Value Analysis</h4>
        <p class="text-sm text-gray-700 leading-relaxed">{escape_html(params.value_summary)}</p>
      </div>
    </div>
  </section>"""

    plan_count = len(brand.pricing.plans) + len(competitor.pricing.plans)
    return build_result(
        SectionId.pricing,
        html,
        f"Generated pricing comparison between {brand.name} and {competitor.name}",
        plan_count=plan_count,
    )


__all__ = ["generate_pricing"]
