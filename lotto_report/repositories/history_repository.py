"""Historical draw loading (CSV file or URL) into an immutable snapshot."""

from __future__ import annotations

import io
import logging
import threading
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any

import pandas as pd
import requests
from marshmallow import ValidationError as MarshmallowValidationError

from lotto_report.errors import HistoryLoadingError, HistoryUnavailableError
from lotto_report.records import DrawRecord
from lotto_report.schemas.draw import DrawRecordSchema
from lotto_report.services.history_matcher import HistoryMatcher

logger = logging.getLogger(__name__)

# Header names of the published history CSV, with English aliases accepted on read.
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "round": ("회차", "round", "draw_no"),
    "draw_date": ("추첨일", "draw_date", "date"),
    "numbers": ("당첨번호", "numbers", "winning_numbers"),
    "bonus_number": ("보너스번호", "bonus_number", "bonus"),
    "first_prize_total": ("1등_총당첨금액", "first_prize_total"),
    "first_prize_winner_count": ("1등_당첨게임수", "first_prize_winner_count", "first_prize_winners"),
}

_record_schema = DrawRecordSchema()


class HistoryState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def _pick(row: Mapping[str, Any], field: str) -> str:
    for name in COLUMN_ALIASES[field]:
        if name in row and row[name] is not None:
            return str(row[name]).strip()
    return ""


def _strip_thousands(value: str) -> str:
    return value.replace(",", "").replace(" ", "")


def row_to_payload(row: Mapping[str, Any]) -> dict[str, Any]:
    """Map a raw CSV row (all strings) onto `DrawRecordSchema` input."""

    numbers_raw = _pick(row, "numbers").strip('"[]')
    payload: dict[str, Any] = {
        "round": _pick(row, "round"),
        "draw_date": _pick(row, "draw_date"),
        "numbers": [part.strip() for part in numbers_raw.split(",") if part.strip()],
        "bonus_number": _pick(row, "bonus_number"),
    }

    prize_total = _strip_thousands(_pick(row, "first_prize_total"))
    if prize_total:
        payload["first_prize_total"] = prize_total
    winners = _strip_thousands(_pick(row, "first_prize_winner_count"))
    if winners:
        payload["first_prize_winner_count"] = winners
    return payload


def parse_history_rows(rows: Sequence[Mapping[str, Any]]) -> list[DrawRecord]:
    """Validate rows into `DrawRecord`s, newest round first.

    Rows without a round are skipped, rows failing validation are dropped,
    and only the first row for a repeated round is kept.
    """

    records: dict[int, DrawRecord] = {}
    dropped = 0

    for row in rows:
        payload = row_to_payload(row)
        if not payload["round"]:
            continue

        try:
            record: DrawRecord = _record_schema.load(payload)
        except MarshmallowValidationError as exc:
            dropped += 1
            logger.warning("Dropping invalid history row round=%s: %s", payload["round"], exc.messages)
            continue

        if record.round in records:
            dropped += 1
            logger.warning("Dropping duplicate history row round=%s", record.round)
            continue
        records[record.round] = record

    if dropped:
        logger.info("Dropped %s history rows", dropped)

    return sorted(records.values(), key=lambda r: r.round, reverse=True)


def _skip_bad_line(fields: list[str]) -> None:
    logger.warning("Dropping malformed history line (%s fields): %s", len(fields), ",".join(fields))
    return None


def read_history_frame(source: str, http: requests.Session | None = None, timeout_seconds: float = 10.0) -> pd.DataFrame:
    """Read the raw CSV as strings from a local path or an http(s) URL."""

    read_opts: dict[str, Any] = {
        "dtype": str,
        "keep_default_na": False,
        "skipinitialspace": True,
        # A callable for bad lines needs the python engine.
        "engine": "python",
        "on_bad_lines": _skip_bad_line,
    }

    if source.startswith(("http://", "https://")):
        session = http or requests.Session()
        resp = session.get(source, timeout=timeout_seconds)
        resp.raise_for_status()
        resp.encoding = resp.encoding or "utf-8"
        frame = pd.read_csv(io.StringIO(resp.text.lstrip("\ufeff")), **read_opts)
    else:
        frame = pd.read_csv(Path(source), encoding="utf-8-sig", **read_opts)

    frame.columns = [str(c).strip() for c in frame.columns]
    return frame


def write_history_csv(draws: Sequence[DrawRecord], path: str | Path) -> Path:
    """Write draws in the published CSV layout (round descending)."""

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    ordered = sorted(draws, key=lambda d: d.round, reverse=True)
    frame = pd.DataFrame(
        [
            {
                "회차": d.round,
                "추첨일": d.draw_date,
                "당첨번호": ",".join(str(n) for n in d.numbers),
                "보너스번호": d.bonus_number,
                "1등_총당첨금액": d.first_prize_total,
                "1등_당첨게임수": d.first_prize_winner_count,
            }
            for d in ordered
        ],
        columns=[aliases[0] for aliases in COLUMN_ALIASES.values()],
    )
    frame.to_csv(out, index=False, encoding="utf-8-sig")
    return out


class HistoryStore:
    """Holds the loaded history snapshot and its load state.

    The snapshot is replaced atomically once loading finishes; readers never
    see a partially parsed list.
    """

    def __init__(
        self,
        source: str,
        *,
        http: requests.Session | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._source = source
        self._http = http
        self._timeout_seconds = timeout_seconds
        self._lock = threading.Lock()
        self._state = HistoryState.LOADING
        self._error: str | None = None
        self._draws: tuple[DrawRecord, ...] = ()
        self._matcher = HistoryMatcher(())

    @property
    def source(self) -> str:
        return self._source

    @property
    def state(self) -> HistoryState:
        return self._state

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def draws(self) -> tuple[DrawRecord, ...]:
        return self._draws

    @property
    def matcher(self) -> HistoryMatcher:
        return self._matcher

    def load(self) -> tuple[DrawRecord, ...]:
        """Load the source; never raises. Failure leaves an empty snapshot."""

        with self._lock:
            self._state = HistoryState.LOADING
            try:
                frame = read_history_frame(self._source, http=self._http, timeout_seconds=self._timeout_seconds)
                draws = tuple(parse_history_rows(frame.to_dict(orient="records")))
            except (OSError, ValueError, requests.RequestException) as exc:
                logger.exception("Failed to load history from %s", self._source)
                self._draws = ()
                self._matcher = HistoryMatcher(())
                self._error = str(exc) or exc.__class__.__name__
                self._state = HistoryState.FAILED
                return self._draws

            self._draws = draws
            self._matcher = HistoryMatcher(draws)
            self._error = None
            self._state = HistoryState.READY
            logger.info("Loaded %s draws from %s", len(draws), self._source)
            return self._draws

    def load_in_background(self) -> threading.Thread:
        thread = threading.Thread(target=self.load, name="history-loader", daemon=True)
        thread.start()
        return thread

    def require_ready(self) -> tuple[DrawRecord, ...]:
        """Return draws, or raise if the history is still loading or failed."""

        if self._state is HistoryState.LOADING:
            raise HistoryLoadingError()
        if self._state is HistoryState.FAILED:
            raise HistoryUnavailableError(details={"source": self._source, "reason": self._error})
        return self._draws

    def get(self, round_no: int) -> DrawRecord | None:
        for draw in self._draws:
            if draw.round == round_no:
                return draw
        return None
