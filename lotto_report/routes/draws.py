"""Draw history routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_report.errors import NotFoundError
from lotto_report.extensions import get_history_store
from lotto_report.schemas.draw import CurrentDrawQuerySchema, DrawListQuerySchema, DrawResponseSchema
from lotto_report.utils.responses import ok

draws_bp = Blueprint("draws", __name__)

_draw_schema = DrawResponseSchema()
_draws_schema = DrawResponseSchema(many=True)
_list_query = DrawListQuerySchema()
_current_query = CurrentDrawQuerySchema()


@draws_bp.get("/api/draws")
def list_draws():
    """Draws, newest round first."""

    query = _list_query.load(request.args)
    draws = get_history_store().require_ready()

    offset = int(query["offset"])
    limit = int(query["limit"])
    page = draws[offset : offset + limit]
    return ok(
        _draws_schema.dump(page),
        meta={"offset": offset, "limit": limit, "total": len(draws)},
    )


@draws_bp.get("/api/draws/current")
def current_draw():
    """Report card for one draw; index 0 is the latest, larger indexes go back in time."""

    query = _current_query.load(request.args)
    draws = get_history_store().require_ready()
    if not draws:
        raise NotFoundError(message="No draws loaded")

    index = int(query["index"])
    if index >= len(draws):
        raise NotFoundError(message=f"No draw at index {index}", details={"total": len(draws)})

    return ok(
        {
            "draw": _draw_schema.dump(draws[index]),
            "index": index,
            "total": len(draws),
            "has_previous": index < len(draws) - 1,
            "has_next": index > 0,
        }
    )


@draws_bp.get("/api/draws/<int:round_no>")
def get_draw(round_no: int):
    store = get_history_store()
    store.require_ready()

    draw = store.get(round_no)
    if draw is None:
        raise NotFoundError(message=f"Round {round_no} not found")
    return ok(_draw_schema.dump(draw))
