"""Accessors for the per-app services stored in `app.extensions`."""

from __future__ import annotations

from flask import current_app

from lotto_report.repositories.history_repository import HistoryStore
from lotto_report.services.bookmark_service import BookmarkService
from lotto_report.services.generation_service import GenerationService


def get_history_store() -> HistoryStore:
    store: HistoryStore | None = current_app.extensions.get("history_store")
    if store is None:
        raise RuntimeError("History store not initialized")
    return store


def get_bookmark_service() -> BookmarkService:
    service: BookmarkService | None = current_app.extensions.get("bookmark_service")
    if service is None:
        raise RuntimeError("Bookmark service not initialized")
    return service


def get_generation_service() -> GenerationService:
    service: GenerationService | None = current_app.extensions.get("generation_service")
    if service is None:
        raise RuntimeError("Generation service not initialized")
    return service
