from __future__ import annotations

from typing import Sequence


class PageBuilderError(Exception):
    """Base class for page assembly failures."""


class MissingRequiredSectionError(PageBuilderError):
    def __init__(self, section_ids: Sequence[str]) -> None:
        self.section_ids = list(section_ids)
        super().__init__(f"Missing required sections: {', '.join(self.section_ids)}")


class InvalidSectionContentError(PageBuilderError):
    def __init__(self, section_ids: Sequence[str]) -> None:
        self.section_ids = list(section_ids)
        super().__init__(f"Invalid section content: {', '.join(self.section_ids)}")


class StorageError(PageBuilderError):
    """Raised by persistence collaborators when a read or write fails."""


class ContentItemNotFoundError(StorageError):
    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Content item not found: {item_id}")


__all__ = [
    "ContentItemNotFoundError",
    "InvalidSectionContentError",
    "MissingRequiredSectionError",
    "PageBuilderError",
    "StorageError",
]
