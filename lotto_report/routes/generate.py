"""Generation and past-match routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_report.extensions import get_generation_service, get_history_store
from lotto_report.schemas.combination import GeneratedCombinationSchema, GenerateRequestSchema, MatchRequestSchema
from lotto_report.utils.responses import ok

generate_bp = Blueprint("generate", __name__)

_request_schema = GenerateRequestSchema()
_match_schema = MatchRequestSchema()
_combinations_schema = GeneratedCombinationSchema(many=True)


@generate_bp.post("/api/generate")
def generate_numbers():
    payload = request.get_json(silent=True) or {}
    data = _request_schema.load(payload)

    store = get_history_store()
    combinations = get_generation_service().generate(
        store.matcher,
        mode=str(data["mode"]),
        count=int(data["count"]),
        min_sum=data.get("min_sum"),
        max_sum=data.get("max_sum"),
    )
    return ok(
        {
            "mode": data["mode"],
            "count": len(combinations),
            "history_state": store.state.value,
            "combinations": _combinations_schema.dump(combinations),
        }
    )


@generate_bp.post("/api/match")
def match_numbers():
    """Round of a past first prize with exactly these numbers, or null."""

    payload = request.get_json(silent=True) or {}
    data = _match_schema.load(payload)

    store = get_history_store()
    numbers = sorted(int(n) for n in data["numbers"])
    return ok(
        {
            "numbers": numbers,
            "match_round": store.matcher.find_match(numbers),
            "history_state": store.state.value,
        }
    )
