from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field

from .sections import SectionId


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentStatus(str, Enum):
    draft = "draft"
    in_production = "in_production"
    generated = "generated"


class ContentItem(BaseModel):
    id: str
    status: ContentStatus = ContentStatus.draft
    title: str | None = None
    generated_content: str | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class StoredSection(BaseModel):
    item_id: str
    section_id: SectionId
    html: str
    metadata: Mapping[str, Any] = Field(default_factory=dict)
    updated_at: datetime = Field(default_factory=utcnow)


__all__ = ["ContentItem", "ContentStatus", "StoredSection", "utcnow"]
