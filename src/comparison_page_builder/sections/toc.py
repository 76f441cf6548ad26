from __future__ import annotations

from ..markup import escape_html
from ..models.sections import SectionId, SectionResult, TocEntry, TocSectionParams
from ._base import anchor, build_result


def _toc_link(entry: TocEntry) -> str:
    emoji = f"<span>{escape_html(entry.emoji)}</span>" if entry.emoji else ""
    return (
        f'<a href="#{escape_html(entry.id)}" class="toc-link flex items-center gap-1.5 px-3 py-2 text-xs md:text-sm '
        f'text-gray-600 whitespace-nowrap rounded-lg transition-all">{emoji}<span>{escape_html(entry.label)}</span></a>'
    )


def generate_toc(params: TocSectionParams) -> SectionResult:
    sticky = "sticky top-0 z-40 " if params.sticky else ""
    links = "\n        ".join(_toc_link(entry) for entry in params.sections)
    html = f"""
  <nav id="{anchor(SectionId.toc)}" class="{sticky}bg-white/95 backdrop-blur-sm border-b border-gray-100 py-3 px-4 md:px-6" aria-label="Table of contents">
    <div class="max-w-5xl mx-auto">
      <div class="flex items-center gap-1 overflow-x-auto scrollbar-hide -mx-2 px-2">
        {links}
      </div>
    </div>
  </nav>"""
    count = len(params.sections)
    return build_result(SectionId.toc, html, f"Generated TOC with {count} sections", section_count=count)


__all__ = ["generate_toc"]
