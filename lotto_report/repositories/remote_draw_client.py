"""Client for the public JSON mirror of official 6/45 draw results."""

from __future__ import annotations

import logging
from typing import Any

import requests
from marshmallow import ValidationError as MarshmallowValidationError

from lotto_report.records import DrawRecord
from lotto_report.schemas.draw import DrawRecordSchema

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://smok95.github.io/lotto/results"

_record_schema = DrawRecordSchema()


def parse_remote_draw(payload: dict[str, Any]) -> DrawRecord:
    """Build a `DrawRecord` from one mirror document.

    First-prize total is per-winner prize times winner count.
    """

    divisions = payload.get("divisions") or []
    first = divisions[0] if divisions and isinstance(divisions[0], dict) else {}
    prize = int(first.get("prize") or 0)
    winners = int(first.get("winners") or 0)

    try:
        return _record_schema.load(
            {
                "round": payload.get("draw_no"),
                "draw_date": str(payload.get("date") or "")[:10],
                "numbers": payload.get("numbers"),
                "bonus_number": payload.get("bonus_no"),
                "first_prize_total": prize * winners,
                "first_prize_winner_count": winners,
            }
        )
    except MarshmallowValidationError as exc:
        raise ValueError(f"Invalid draw {payload.get('draw_no')}: {exc.messages}") from exc


class RemoteDrawClient:
    def __init__(
        self,
        http: requests.Session,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    def _url(self, round_no: int) -> str:
        return f"{self._base_url}/{int(round_no)}.json"

    def fetch(self, round_no: int) -> DrawRecord:
        resp = self._http.get(self._url(round_no), timeout=self._timeout_seconds)
        resp.raise_for_status()
        payload = resp.json()
        payload.setdefault("draw_no", int(round_no))
        return parse_remote_draw(payload)

    def exists(self, round_no: int) -> bool:
        resp = self._http.get(self._url(round_no), timeout=self._timeout_seconds)
        if resp.status_code == 200:
            return True
        if resp.status_code == 404:
            return False

        resp.raise_for_status()
        return True

    def find_latest_round(self, start_hint: int = 1170, cap: int = 100_000) -> int:
        """Latest published round: exponential probe upward, then binary search."""

        if not self.exists(1):
            raise RuntimeError("Lotto data source returned 404 for round 1")

        low = 1
        high = max(start_hint, 2)

        while self.exists(high):
            low = high
            high *= 2
            if high > cap:
                raise RuntimeError("Failed to find upper bound for latest round (cap exceeded)")

        while low + 1 < high:
            mid = (low + high) // 2
            if self.exists(mid):
                low = mid
            else:
                high = mid

        logger.debug("Latest round on %s is %s", self._base_url, low)
        return low
