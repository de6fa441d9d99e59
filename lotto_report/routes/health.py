"""Health and load-status routes."""

from __future__ import annotations

from flask import Blueprint

from lotto_report.extensions import get_bookmark_service, get_history_store
from lotto_report.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint."""

    return ok({"status": "ok"})


@health_bp.get("/api/status")
def app_status():
    """History load state (loading/ready/failed) and bookmark count."""

    store = get_history_store()
    return ok(
        {
            "history": {
                "state": store.state.value,
                "draws": len(store.draws),
                "error": store.error,
            },
            "bookmarks": len(get_bookmark_service().list_bookmarks()),
        }
    )
