from __future__ import annotations

import logging
from typing import Any, Mapping

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from .content_store import canonical_sort_key
from .errors import ContentItemNotFoundError, StorageError
from .models.content import ContentItem, ContentStatus, StoredSection, utcnow
from .models.sections import SectionId

logger = logging.getLogger(__name__)


class FirestoreContentStore:
    """Firestore-backed content items for production use."""

    COLLECTION_NAME = "content_items"

    def __init__(
        self,
        project_id: str | None = None,
        *,
        collection_name: str | None = None,
        client: firestore.Client | None = None,
    ) -> None:
        self._db = client or firestore.Client(project=project_id)
        self._collection = self._db.collection(collection_name or self.COLLECTION_NAME)

    def create_item(self, *, title: str | None = None, item_id: str | None = None) -> ContentItem:
        doc_ref = self._collection.document(item_id) if item_id else self._collection.document()
        item = ContentItem(id=doc_ref.id, title=title)
        try:
            doc_ref.set(self._to_firestore_dict(item))
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to create content item: {exc}") from exc

        logger.info("Created content item", extra={"item_id": item.id})
        return item

    def get_item(self, item_id: str) -> ContentItem | None:
        try:
            doc = self._collection.document(item_id).get()
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to read content item {item_id}: {exc}") from exc

        if not doc.exists:
            return None
        return self._from_firestore_dict(doc.id, doc.to_dict())

    def update_item(
        self,
        item_id: str,
        *,
        generated_content: str | None = None,
        status: ContentStatus | None = None,
    ) -> ContentItem:
        """Patch the item document and return the stored result."""
        doc_ref = self._collection.document(item_id)

        update_data: dict[str, Any] = {"updated_at": utcnow()}
        if generated_content is not None:
            update_data["generated_content"] = generated_content
        if status is not None:
            update_data["status"] = status.value

        try:
            doc_ref.update(update_data)
            updated_doc = doc_ref.get()
        except gcp_exceptions.NotFound as exc:
            raise ContentItemNotFoundError(item_id) from exc
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to save page: {exc}") from exc

        logger.info(
            "Updated content item",
            extra={"item_id": item_id, "status": status.value if status else None},
        )
        return self._from_firestore_dict(updated_doc.id, updated_doc.to_dict())

    def _to_firestore_dict(self, item: ContentItem) -> dict[str, Any]:
        return {
            "status": item.status.value,
            "title": item.title,
            "generated_content": item.generated_content,
            "created_at": item.created_at,
            "updated_at": item.updated_at,
        }

    def _from_firestore_dict(self, item_id: str, data: dict[str, Any]) -> ContentItem:
        return ContentItem(
            id=item_id,
            status=ContentStatus(data.get("status", ContentStatus.draft.value)),
            title=data.get("title"),
            generated_content=data.get("generated_content"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class FirestoreSectionStore:
    """Section fragments keyed by ``{item_id}__{section_id}``, one document per pair."""

    COLLECTION_NAME = "content_item_sections"

    def __init__(
        self,
        project_id: str | None = None,
        *,
        collection_name: str | None = None,
        client: firestore.Client | None = None,
    ) -> None:
        self._db = client or firestore.Client(project=project_id)
        self._collection = self._db.collection(collection_name or self.COLLECTION_NAME)

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
        try:
            self._collection.document(self._doc_id(item_id, section.section_id)).set(
                {
                    "item_id": item_id,
                    "section_id": section.section_id.value,
                    "html": html,
                    "metadata": dict(section.metadata),
                    "updated_at": section.updated_at,
                }
            )
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to save section {section.section_id.value}: {exc}") from exc

        logger.info(
            "Saved section",
            extra={"item_id": item_id, "section_id": section.section_id.value, "html_length": len(html)},
        )
        return section

    def get_sections(self, item_id: str) -> list[StoredSection]:
        sections = [self._from_firestore_dict(doc.to_dict()) for doc in self._query(item_id)]
        return sorted(sections, key=canonical_sort_key)

    def get_section(self, item_id: str, section_id: SectionId) -> StoredSection | None:
        try:
            doc = self._collection.document(self._doc_id(item_id, SectionId(section_id))).get()
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to read section {section_id}: {exc}") from exc
        if not doc.exists:
            return None
        return self._from_firestore_dict(doc.to_dict())

    def clear_sections(self, item_id: str) -> int:
        removed = 0
        try:
            for doc in self._query(item_id):
                doc.reference.delete()
                removed += 1
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to clear sections for {item_id}: {exc}") from exc
        logger.info("Cleared sections", extra={"item_id": item_id, "removed": removed})
        return removed

    def count_sections(self, item_id: str) -> int:
        return len(self._query(item_id))

    def _query(self, item_id: str) -> list[Any]:
        try:
            return list(self._collection.where(filter=FieldFilter("item_id", "==", item_id)).stream())
        except gcp_exceptions.GoogleAPICallError as exc:
            raise StorageError(f"Failed to list sections for {item_id}: {exc}") from exc

    @staticmethod
    def _doc_id(item_id: str, section_id: SectionId) -> str:
        return f"{item_id.replace('/', '-')}__{section_id.value}"

    @staticmethod
    def _from_firestore_dict(data: dict[str, Any]) -> StoredSection:
        return StoredSection(
            item_id=data["item_id"],
            section_id=SectionId(data["section_id"]),
            html=data["html"],
            metadata=data.get("metadata") or {},
            updated_at=data["updated_at"],
        )


__all__ = ["FirestoreContentStore", "FirestoreSectionStore"]
