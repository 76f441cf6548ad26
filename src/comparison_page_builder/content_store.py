from __future__ import annotations

import logging
import threading
import uuid
from typing import Any, Dict, Mapping, Protocol

from .constants import CANONICAL_SECTION_ORDER
from .errors import ContentItemNotFoundError
from .models.content import ContentItem, ContentStatus, StoredSection, utcnow
from .models.sections import SectionId

logger = logging.getLogger(__name__)


class ContentStore(Protocol):
    def create_item(self, *, title: str | None = None, item_id: str | None = None) -> ContentItem: ...

    def get_item(self, item_id: str) -> ContentItem | None: ...

    def update_item(
        self,
        item_id: str,
        *,
        generated_content: str | None = None,
        status: ContentStatus | None = None,
    ) -> ContentItem: ...


class SectionStore(Protocol):
    def save_section(
        self,
        item_id: str,
        section_id: SectionId,
        html: str,
        metadata: Mapping[str, Any] | None = None,
    ) -> StoredSection: ...

    def get_sections(self, item_id: str) -> list[StoredSection]: ...

    def get_section(self, item_id: str, section_id: SectionId) -> StoredSection | None: ...

    def clear_sections(self, item_id: str) -> int: ...

    def count_sections(self, item_id: str) -> int: ...


def canonical_sort_key(section: StoredSection) -> int:
    return CANONICAL_SECTION_ORDER.index(section.section_id)


class InMemoryContentStore:
    def __init__(self) -> None:
        self._items: Dict[str, ContentItem] = {}
        self._lock = threading.Lock()

    def create_item(self, *, title: str | None = None, item_id: str | None = None) -> ContentItem:
        with self._lock:
            item = ContentItem(id=item_id or self._generate_id(), title=title)
            self._items[item.id] = item
            return item

    def get_item(self, item_id: str) -> ContentItem | None:
        with self._lock:
            return self._items.get(item_id)

    def update_item(
        self,
        item_id: str,
        *,
        generated_content: str | None = None,
        status: ContentStatus | None = None,
    ) -> ContentItem:
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise ContentItemNotFoundError(item_id)
            if generated_content is not None:
                item.generated_content = generated_content
            if status is not None:
                item.status = status
            item.updated_at = utcnow()
            self._items[item_id] = item

        logger.info(
            "Updated content item",
            extra={"item_id": item_id, "status": status.value if status else None},
        )
        return item

    def _generate_id(self) -> str:
        ts = utcnow().strftime("%Y%m%d%H%M%S")
        return f"item_{ts}_{uuid.uuid4().hex[:6]}"


class InMemorySectionStore:
    def __init__(self) -> None:
        self._sections: Dict[tuple[str, SectionId], StoredSection] = {}
        self._lock = threading.Lock()

    def save_section(
        self,
        item_id: str,
        section_id: SectionId,
        html: str,
        metadata: Mapping[str, Any] | None = None,
    ) -> StoredSection:
        section = StoredSection(
            item_id=item_id,
            section_id=SectionId(section_id),
            html=html,
            metadata=dict(metadata or {}),
        )
        with self._lock:
            self._sections[(item_id, section.section_id)] = section

        logger.info(
            "Saved section",
            extra={"item_id": item_id, "section_id": section.section_id.value, "html_length": len(html)},
        )
        return section

    def get_sections(self, item_id: str) -> list[StoredSection]:
        with self._lock:
            sections = [section for (owner, _), section in self._sections.items() if owner == item_id]
        return sorted(sections, key=canonical_sort_key)

    def get_section(self, item_id: str, section_id: SectionId) -> StoredSection | None:
        with self._lock:
            return self._sections.get((item_id, SectionId(section_id)))

    def clear_sections(self, item_id: str) -> int:
        with self._lock:
            keys = [key for key in self._sections if key[0] == item_id]
            for key in keys:
                del self._sections[key]
        logger.info("Cleared sections", extra={"item_id": item_id, "removed": len(keys)})
        return len(keys)

    def count_sections(self, item_id: str) -> int:
        with self._lock:
            return sum(1 for owner, _ in self._sections if owner == item_id)


__all__ = [
    "ContentStore",
    "InMemoryContentStore",
    "InMemorySectionStore",
    "SectionStore",
    "canonical_sort_key",
]
