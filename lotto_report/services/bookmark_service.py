"""Bookmark use-cases over an in-memory list backed by `BookmarkRepository`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock

from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError

from lotto_report.records import GeneratedCombination
from lotto_report.repositories.bookmark_repository import BookmarkRepository
from lotto_report.schemas.combination import GeneratedCombinationSchema

logger = logging.getLogger(__name__)

_schema = GeneratedCombinationSchema()


@dataclass(frozen=True)
class BookmarkChange:
    """Outcome of a save/remove.

    `changed` is False for a repeated save or an unknown id. `persisted` is
    False when the write to storage failed; the in-memory list is still updated.
    """

    bookmark: GeneratedCombination | None
    changed: bool
    persisted: bool


class BookmarkService:
    """Holds the session's bookmarks, newest first, and writes them through."""

    def __init__(self, repository: BookmarkRepository) -> None:
        self._repo = repository
        self._lock = Lock()
        self._items: list[GeneratedCombination] = []

    def load(self) -> list[GeneratedCombination]:
        """Replace the in-memory list with stored bookmarks.

        Unreadable storage yields an empty list; invalid entries are skipped.
        """

        try:
            raw_items = self._repo.load()
        except SQLAlchemyError:
            logger.exception("Failed to load bookmarks; starting empty")
            raw_items = []

        items: list[GeneratedCombination] = []
        seen: set[str] = set()
        for raw in raw_items:
            try:
                item: GeneratedCombination = _schema.load(raw)
            except MarshmallowValidationError as exc:
                logger.warning("Skipping invalid stored bookmark: %s", exc.messages)
                continue
            if item.id in seen:
                continue
            seen.add(item.id)
            items.append(item)

        with self._lock:
            self._items = items
        logger.info("Loaded %s bookmarks", len(items))
        return list(items)

    def list_bookmarks(self) -> list[GeneratedCombination]:
        with self._lock:
            return list(self._items)

    def get(self, bookmark_id: str) -> GeneratedCombination | None:
        with self._lock:
            for item in self._items:
                if item.id == bookmark_id:
                    return item
        return None

    def save(self, combination: GeneratedCombination) -> BookmarkChange:
        with self._lock:
            for item in self._items:
                if item.id == combination.id:
                    return BookmarkChange(bookmark=item, changed=False, persisted=True)

            self._items = [combination, *self._items]
            persisted = self._persist(self._items)
        return BookmarkChange(bookmark=combination, changed=True, persisted=persisted)

    def remove(self, bookmark_id: str) -> BookmarkChange:
        with self._lock:
            removed = next((item for item in self._items if item.id == bookmark_id), None)
            if removed is None:
                return BookmarkChange(bookmark=None, changed=False, persisted=True)

            self._items = [item for item in self._items if item.id != bookmark_id]
            persisted = self._persist(self._items)
        return BookmarkChange(bookmark=removed, changed=True, persisted=persisted)

    def _persist(self, items: list[GeneratedCombination]) -> bool:
        try:
            self._repo.save_all(_schema.dump(items, many=True))
        except SQLAlchemyError:
            logger.exception("Failed to persist %s bookmarks", len(items))
            return False
        return True
