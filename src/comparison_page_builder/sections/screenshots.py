from __future__ import annotations

import re

from ..markup import escape_html
from ..models.sections import ScreenshotsSectionParams, SectionId, SectionResult
from ._base import anchor, build_result, section_header

_WHITESPACE = re.compile(r"\s+")


def browser_domain(name: str) -> str:
    return f"{_WHITESPACE.sub('', name.lower())}.com"


def _frame(name: str, screenshot_url: str, overlay: str) -> str:
    return f"""
          <div class="bg-white rounded-2xl border border-gray-200 overflow-hidden shadow-md">
            <div class="bg-gray-50 border-b border-gray-200 px-4 py-2 flex items-center gap-3">
              <div class="flex gap-1.5">
                <div class="w-2.5 h-2.5 rounded-full bg-gray-300"></div>
                <div class="w-2.5 h-2.5 rounded-full bg-gray-300"></div>
                <div class="w-2.5 h-2.5 rounded-full bg-gray-300"></div>
              </div>
              <div class="flex-1 bg-white rounded px-3 py-1 text-xs text-gray-500 font-mono truncate">{escape_html(browser_domain(name))}</div>
            </div>
            <div class="relative aspect-video bg-gray-100 overflow-hidden">
              <img src="{escape_html(screenshot_url)}" alt="{escape_html(name)} interface screenshot" class="w-full h-full object-cover object-top" loading="lazy" onerror="this.style.display='none';this.nextElementSibling.style.display='flex';">
              <div class="items-center justify-center h-full text-gray-400" style="display:none"><span>Screenshot unavailable</span></div>{overlay}
            </div>
          </div>"""


def generate_screenshots(params: ScreenshotsSectionParams) -> SectionResult:
    brand, competitor = params.brand, params.competitor
    description = params.section_description or (
        f"See how {brand.name} and {competitor.name} compare visually. "
        "The interface design reflects each product's approach to user experience."
    )
    header = section_header("Visual Comparison", params.section_title or "Interface Comparison", description)

    # Only the brand screenshot carries a call to action.
    overlay = f"""
              <div class="absolute inset-0 bg-gradient-to-t from-black/60 via-transparent to-transparent opacity-0 group-hover:opacity-100 transition-opacity duration-300 flex items-end p-4">
                <a href="{escape_html(brand.cta_url or "/")}" class="btn-primary px-4 py-2 rounded-lg text-sm">Try {escape_html(brand.name)}</a>
              </div>"""
    brand_caption = f'<p class="text-sm text-gray-600">{escape_html(brand.caption)}</p>' if brand.caption else ""
    competitor_caption = (
        f'<p class="text-sm text-gray-500">{escape_html(competitor.caption)}</p>' if competitor.caption else ""
    )
    brand_style = escape_html(brand.caption or "a clean, modern design approach")
    competitor_style = escape_html(competitor.caption or "takes a different visual approach")

    html = f"""
  <section id="{anchor(SectionId.screenshots)}" class="py-12 md:py-20 px-4 md:px-6 bg-gray-50">
    <div class="max-w-6xl mx-auto">
      {header}
      <div class="grid md:grid-cols-2 gap-6 md:gap-8">
        <div class="screenshot group" data-party="brand">{_frame(brand.name, brand.screenshot_url, overlay)}
          <div class="mt-4 text-center">
            <h3 class="font-semibold text-gray-900 mb-1">{escape_html(brand.name)}</h3>
            {brand_caption}
          </div>
        </div>
        <div class="screenshot group" data-party="competitor">{_frame(competitor.name, competitor.screenshot_url, "")}
          <div class="mt-4 text-center">
            <h3 class="font-semibold text-gray-700 mb-1">{escape_html(competitor.name)}</h3>
            {competitor_caption}
          </div>
        </div>
      </div>
      <div class="mt-8 md:mt-12 p-5 md:p-6 bg-white rounded-xl border border-gray-200 shadow-sm">
        <h4 class="font-semibold text-gray-900 mb-1">Visual Design Philosophy</h4>
        <p class="text-sm text-gray-600 leading-relaxed">
          {escape_html(brand.name)}&#039;s interface emphasizes {brand_style}.
          Meanwhile, {escape_html(competitor.name)} {competitor_style}.
          Both tools have invested in their user experience, but the design choices reflect their target audiences.
        </p>
      </div>
    </div>
  </section>"""

    return build_result(
        SectionId.screenshots,
        html,
        f"Generated screenshots comparison section for {brand.name} vs {competitor.name}",
    )


__all__ = ["browser_domain", "generate_screenshots"]
