from __future__ import annotations

import logging

from .constants import (
    BRACKET_PLACEHOLDER_PATTERN,
    ELLIPSIS_PATTERN,
    MIN_SECTION_LENGTH,
    RECOMMENDED_SECTIONS,
    REQUIRED_SECTIONS,
)
from .errors import InvalidSectionContentError, MissingRequiredSectionError
from .models.page import SectionMap, ValidationReport

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


def is_valid_section_content(html: str | None) -> bool:
    """Reject empty fragments, placeholder text and anything that is not markup."""
    if not html:
        return False
    stripped = html.strip()
    if ELLIPSIS_PATTERN.fullmatch(stripped) or BRACKET_PLACEHOLDER_PATTERN.fullmatch(stripped):
        return False
    if len(stripped) < MIN_SECTION_LENGTH:
        return False
    return "<" in html


def validate_sections(sections: SectionMap) -> ValidationReport:
    """Sort required and recommended sections into missing / invalid buckets.

    A section that is absent is *missing*; one that is present but fails
    :func:`is_valid_section_content` is *invalid*. Screenshots and custom
    fragments are optional and never checked.
    """
    report = ValidationReport()

    for section_id in REQUIRED_SECTIONS:
        html = sections.get(section_id)
        if not html:
            report.missing_required.append(section_id.value)
        elif not is_valid_section_content(html):
            report.invalid.append(section_id.value)

    for section_id in RECOMMENDED_SECTIONS:
        html = sections.get(section_id)
        if not html:
            report.missing_recommended.append(section_id.value)
        elif not is_valid_section_content(html):
            report.invalid.append(section_id.value)

    if report.blocking:
        logger.error(
            "Section validation blocked assembly",
            extra={
                "missing_required": report.missing_required,
                "invalid_sections": report.invalid,
                "invalid_previews": {
                    section_id: (sections.get(section_id) or "")[:PREVIEW_LENGTH] for section_id in report.invalid
                },
            },
        )
    elif report.missing_recommended:
        logger.warning(
            "Recommended sections missing",
            extra={"missing_recommended": report.missing_recommended},
        )

    return report


def ensure_assemblable(report: ValidationReport) -> None:
    """Raise for a blocking report. Invalid content takes precedence over missing sections."""
    if report.invalid:
        raise InvalidSectionContentError(report.invalid)
    if report.missing_required:
        raise MissingRequiredSectionError(report.missing_required)


__all__ = ["PREVIEW_LENGTH", "ensure_assemblable", "is_valid_section_content", "validate_sections"]
