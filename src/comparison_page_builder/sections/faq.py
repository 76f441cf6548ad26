from __future__ import annotations

from typing import Any, Sequence

from ..markup import CHEVRON_PATH, escape_html, icon, json_ld_script
from ..models.sections import FaqItem, FaqSectionParams, SectionId, SectionResult
from ._base import anchor, build_result, section_header


def faq_page_schema(faqs: Sequence[FaqItem]) -> dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in faqs
        ],
    }


def _item(faq: FaqItem) -> str:
    return f"""
        <div class="faq-item border border-gray-200 rounded-xl overflow-hidden">
          <button class="faq-trigger w-full px-4 md:px-6 py-4 text-left flex items-center justify-between hover:bg-gray-50 transition-colors" onclick="this.parentElement.classList.toggle('active')">
            <span class="font-semibold text-gray-900 text-sm md:text-base pr-4">{escape_html(faq.question)}</span>
            {icon(CHEVRON_PATH, "faq-chevron text-gray-400")}
          </button>
          <div class="faq-content hidden px-4 md:px-6 pb-4">
            <p class="text-sm text-gray-600 leading-relaxed">{escape_html(faq.answer)}</p>
          </div>
        </div>"""


def generate_faq(params: FaqSectionParams) -> SectionResult:
    header = section_header(
        "Questions & Answers",
        "Frequently Asked Questions",
        f"Common questions about {params.brand_name} vs {params.competitor_name}.",
    )
    items = "".join(_item(faq) for faq in params.faqs)
    html = f"""
  <section id="{anchor(SectionId.faq)}" class="py-12 md:py-20 px-4 md:px-6 bg-gray-50">
    <div class="max-w-3xl mx-auto">
      {header}
      <div class="space-y-3">{items}
      </div>
    </div>
  </section>
  {json_ld_script(faq_page_schema(params.faqs))}"""

    count = len(params.faqs)
    return build_result(SectionId.faq, html, f"Generated FAQ section with {count} questions", faq_count=count)


__all__ = ["faq_page_schema", "generate_faq"]
