"""Persistence for the bookmark list as one JSON document in `kv_store`."""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from lotto_report.models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class BookmarkRepository:
    """Load and overwrite the whole bookmark list under a single key.

    There are no per-item writes: every save replaces the stored document.
    """

    def __init__(self, session_factory: sessionmaker[Session], key: str = "lotto_bookmarks") -> None:
        self._session_factory = session_factory
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[dict[str, Any]]:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntry, self._key)
            if entry is None:
                return []
            raw = entry.value

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored bookmarks under %r are not valid JSON; ignoring", self._key)
            return []

        if not isinstance(parsed, list):
            logger.warning("Stored bookmarks under %r are not a list; ignoring", self._key)
            return []
        return [item for item in parsed if isinstance(item, dict)]

    def save_all(self, items: list[dict[str, Any]]) -> None:
        value = json.dumps(items, ensure_ascii=False)
        with self._session_factory.begin() as session:
            entry = session.get(KeyValueEntry, self._key)
            if entry is None:
                session.add(KeyValueEntry(key=self._key, value=value))
            else:
                entry.value = value
