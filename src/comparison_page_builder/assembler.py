from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .colors import derive_theme
from .constants import (
    CANONICAL_SECTION_ORDER,
    SCROLL_TOP_THRESHOLD_PX,
    SECTION_DEFINITIONS,
    THEME_PRESETS,
    TOC_ACTIVE_OFFSET_PX,
)
from .content_store import ContentStore, SectionStore
from .errors import PageBuilderError, StorageError
from .markup import escape_html, logo_html
from .models.content import ContentStatus
from .models.page import (
    AssembledPage,
    AssemblyRequest,
    AssemblyResult,
    SectionMap,
    SeoMeta,
    ThemeTokens,
    ValidationReport,
)
from .models.profiles import BrandProfile, Party
from .models.sections import SectionFragment, SectionId
from .schema_markup import build_schema_markup
from .validator import ensure_assemblable, validate_sections

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_NAME = "alternative_page.html"

_THEME_BUTTONS = (
    {"name": "blue", "label": "Ocean Blue", "css_class": "bg-sky-500"},
    {"name": "emerald", "label": "Emerald Green", "css_class": "bg-emerald-500"},
    {"name": "violet", "label": "Violet Purple", "css_class": "bg-violet-500"},
)


def build_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html", "xml"]),
    )


def ordered_fragments(sections: SectionMap) -> list[str]:
    """Fragments in canonical order with custom fragments last. Absent sections are skipped."""
    fragments = [sections.get(section_id) for section_id in CANONICAL_SECTION_ORDER]
    fragments.extend(sections.custom)
    return [fragment for fragment in fragments if fragment]


def tool_names(section_ids: Sequence[str]) -> list[str]:
    return [SECTION_DEFINITIONS[SectionId(section_id)].tool_name for section_id in section_ids]


def default_footer(brand: BrandProfile, year: int) -> str:
    return f"""
  <footer class="bg-white border-t border-gray-200 py-12 px-4 md:px-6">
    <div class="max-w-5xl mx-auto flex flex-col md:flex-row items-center justify-between gap-4">
      <div class="flex items-center gap-2">
        {logo_html(brand.name, brand.logo_url, Party.brand, "sm")}
        <span class="font-semibold text-gray-900">{escape_html(brand.name)}</span>
      </div>
      <p class="text-sm text-gray-500">&copy; {year} {escape_html(brand.name)}. All rights reserved.</p>
    </div>
  </footer>"""


class PageAssembler:
    """Validate section fragments, compose the page document and persist it.

    Args:
        store: Content item store; receives the composed page.
        section_store: Optional store of previously generated fragments, used by
            :meth:`assemble_from_store`.
        today_factory: Clock for schema dates and the footer year.
    """

    def __init__(
        self,
        store: ContentStore,
        *,
        section_store: SectionStore | None = None,
        today_factory: Callable[[], date] = date.today,
        environment: Environment | None = None,
    ) -> None:
        self._store = store
        self._section_store = section_store
        self._today_factory = today_factory
        self._env = environment or build_environment()

    def assemble(self, request: AssemblyRequest) -> AssemblyResult:
        sections = request.sections
        report = validate_sections(sections)
        try:
            ensure_assemblable(report)
        except PageBuilderError as exc:
            return self._blocked_result(request.item_id, sections, report, exc)

        page = self.compose(
            page_title=request.page_title,
            seo=request.seo,
            brand=request.brand,
            competitor_name=request.competitor_name,
            sections=sections,
            theme_switcher=request.theme_switcher,
            footer_html=request.footer_html,
            include_footer=request.include_footer,
        )
        html = page.html
        line_count = len(html.split("\n"))

        try:
            self._store.update_item(request.item_id, generated_content=html, status=ContentStatus.generated)
        except StorageError as exc:
            logger.error(
                "Failed to persist assembled page",
                exc_info=True,
                extra={"item_id": request.item_id, "html_length": len(html)},
            )
            return AssemblyResult(
                success=False,
                item_id=request.item_id,
                error=str(exc),
                html_length=len(html),
                line_count=line_count,
                sections_included=list(page.sections_included),
                html=html,
            )

        logger.info(
            "Assembled page",
            extra={
                "item_id": request.item_id,
                "html_length": len(html),
                "sections_included": list(page.sections_included),
            },
        )
        return AssemblyResult(
            success=True,
            item_id=request.item_id,
            html_length=len(html),
            line_count=line_count,
            sections_included=list(page.sections_included),
            missing_recommended=report.missing_recommended or None,
            message=f"Successfully assembled alternative page ({len(html)} chars, {line_count} lines)",
        )

    def compose(
        self,
        *,
        page_title: str,
        seo: SeoMeta,
        brand: BrandProfile,
        competitor_name: str,
        sections: SectionMap,
        theme_switcher: bool = False,
        footer_html: str | None = None,
        include_footer: bool = False,
    ) -> AssembledPage:
        """Render the full document without validating or persisting anything."""
        today = self._today_factory()
        theme: ThemeTokens = derive_theme(brand)
        schema_markup = build_schema_markup(
            page_title,
            seo.meta_description,
            brand.name,
            competitor_name,
            seo.canonical_url,
            today,
        )
        if not footer_html and include_footer:
            footer_html = default_footer(brand, today.year)

        template = self._env.get_template(TEMPLATE_NAME)
        html = template.render(
            page_title=page_title,
            seo=seo,
            css_variables=theme.css_variables(),
            schema_markup=schema_markup,
            body="\n".join(ordered_fragments(sections)),
            footer_html=footer_html,
            theme_switcher=theme_switcher,
            theme_buttons=_THEME_BUTTONS,
            theme_presets={name: {"h": h, "s": s} for name, (h, s) in THEME_PRESETS.items()},
            scroll_top_threshold=SCROLL_TOP_THRESHOLD_PX,
            toc_active_offset=TOC_ACTIVE_OFFSET_PX,
        )
        return AssembledPage(html=html, sections_included=sections.provided())

    def assemble_from_store(
        self,
        item_id: str,
        *,
        page_title: str,
        seo: SeoMeta,
        brand: BrandProfile,
        competitor_name: str,
        custom: Sequence[str] = (),
        theme_switcher: bool = False,
        footer_html: str | None = None,
        include_footer: bool = False,
    ) -> AssemblyResult:
        """Assemble from fragments saved earlier for ``item_id``."""
        if self._section_store is None:
            raise PageBuilderError("PageAssembler was created without a section store")

        stored = self._section_store.get_sections(item_id)
        sections = SectionMap.from_fragments(
            (SectionFragment(section_id=section.section_id, html=section.html) for section in stored),
            custom=custom,
        )
        logger.info(
            "Loaded stored sections",
            extra={"item_id": item_id, "section_count": len(stored)},
        )
        return self.assemble(
            AssemblyRequest(
                item_id=item_id,
                page_title=page_title,
                seo=seo,
                brand=brand,
                competitor_name=competitor_name,
                sections=sections,
                theme_switcher=theme_switcher,
                footer_html=footer_html,
                include_footer=include_footer,
            )
        )

    def _blocked_result(
        self,
        item_id: str,
        sections: SectionMap,
        report: ValidationReport,
        exc: PageBuilderError,
    ) -> AssemblyResult:
        provided = sections.provided()
        lines = [str(exc), ""]
        if report.invalid:
            lines.append("These sections contain placeholder or non-HTML content. Regenerate them with:")
            lines.extend(f"- {name}" for name in tool_names(report.invalid))
        if report.missing_required:
            lines.append("These required sections are missing. Generate them with:")
            lines.extend(f"- {name}" for name in tool_names(report.missing_required))
        lines.append("")
        lines.append(f"Current sections provided: {', '.join(provided) or 'none'}")

        return AssemblyResult(
            success=False,
            item_id=item_id,
            error="\n".join(lines),
            missing_required=report.missing_required or None,
            missing_recommended=report.missing_recommended or None,
            invalid_sections=report.invalid or None,
            sections_provided=provided,
        )


__all__ = ["PageAssembler", "build_environment", "default_footer", "ordered_fragments", "tool_names"]
