"""Bookmark routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_report.extensions import get_bookmark_service
from lotto_report.schemas.combination import GeneratedCombinationSchema
from lotto_report.utils.responses import ok

bookmarks_bp = Blueprint("bookmarks", __name__)

_bookmark_schema = GeneratedCombinationSchema()
_bookmarks_schema = GeneratedCombinationSchema(many=True)


@bookmarks_bp.get("/bookmarks")
def list_bookmarks():
    """Saved combinations, newest first."""

    return ok(_bookmarks_schema.dump(get_bookmark_service().list_bookmarks()))


@bookmarks_bp.post("/bookmarks")
def save_bookmark():
    """Save a combination. Saving an id that is already stored changes nothing."""

    payload = request.get_json(silent=True) or {}
    combination = _bookmark_schema.load(payload)

    change = get_bookmark_service().save(combination)
    return ok(
        {
            "bookmark": _bookmark_schema.dump(change.bookmark),
            "created": change.changed,
            "persisted": change.persisted,
        },
        status_code=201 if change.changed else 200,
    )


@bookmarks_bp.delete("/bookmarks/<string:bookmark_id>")
def remove_bookmark(bookmark_id: str):
    change = get_bookmark_service().remove(bookmark_id)
    return ok(
        {
            "id": bookmark_id,
            "removed": change.changed,
            "persisted": change.persisted,
        }
    )
