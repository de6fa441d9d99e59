"""Analysis routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto_report.errors import ValidationError
from lotto_report.extensions import get_history_store
from lotto_report.services.frequency_analysis_service import FrequencyAnalysisService
from lotto_report.services.insights import list_insights
from lotto_report.utils.responses import ok

analysis_bp = Blueprint("analysis", __name__)
_frequency_service = FrequencyAnalysisService()


@analysis_bp.get("/api/analysis/frequency")
def get_frequency_analysis():
    """Return number frequency counts for 1..45 with hot/cold lists.

    Query params:
    - n: optional recent N draws (e.g., 10/30/50/100)

    An unloaded or failed history yields all-zero counts.
    """

    raw_n = (request.args.get("n") or request.args.get("recent") or "").strip()

    recent_n: int | None = None
    if raw_n:
        try:
            recent_n = int(raw_n)
        except ValueError as e:
            raise ValidationError("n must be an integer") from e
        if recent_n <= 0:
            raise ValidationError("n must be positive")

    store = get_history_store()
    result = _frequency_service.analyze(store.draws, recent_n=recent_n)

    return ok(
        {
            "history_state": store.state.value,
            "total_draws": result.total_draws,
            "draws_used": result.draws_used,
            "recent_n": result.recent_n,
            "counts": result.counts,
            "min_count": result.min_count,
            "max_count": result.max_count,
            "hot_numbers": [{"number": c.number, "count": c.count} for c in result.hot],
            "cold_numbers": [{"number": c.number, "count": c.count} for c in result.cold],
            "insights": list_insights(),
        }
    )
