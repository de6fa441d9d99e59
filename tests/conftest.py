from __future__ import annotations

from pathlib import Path

import pytest

from lotto_report import create_app
from lotto_report.records import DrawRecord

HISTORY_HEADER = "회차,추첨일,당첨번호,보너스번호,1등_총당첨금액,1등_당첨게임수"

HISTORY_ROWS = [
    '1001,2022-02-05,"2,11,17,28,34,45",20,"2,400,000,000",8',
    '1000,2022-01-29,"40,3,22,7,31,15",9,1500000000,12',
    '999,2022-01-22,"1,3,9,14,18,28",34,2000000000,15',
    # no round
    ',2022-01-15,"1,2,3,4,5,6",7,0,0',
    # five numbers
    '998,2022-01-08,"1,2,3,4,5",6,0,0',
    # bonus repeats a main number
    '997,2022-01-01,"1,2,3,4,5,6",6,0,0',
    # out of range
    '996,2021-12-25,"1,2,3,4,5,46",7,0,0',
    # winning numbers not quoted, so the line has too many fields
    "995,2021-12-18,1,2,3,4,5,6,7,0,0",
]


def write_history(path: Path, rows: list[str] = HISTORY_ROWS) -> Path:
    path.write_text(HISTORY_HEADER + "\n" + "\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def history_csv(tmp_path: Path) -> Path:
    return write_history(tmp_path / "history.csv")


@pytest.fixture
def make_draw():
    def _make(round_no: int, numbers, bonus: int = 45, draw_date: str = "2022-01-01") -> DrawRecord:
        return DrawRecord(
            round=round_no,
            draw_date=draw_date,
            first_prize_total=0,
            first_prize_winner_count=0,
            numbers=tuple(numbers),
            bonus_number=bonus,
        )

    return _make


@pytest.fixture
def make_app(tmp_path: Path, history_csv: Path):
    created = []

    def _make(**overrides):
        config = {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}",
            "HISTORY_SOURCE": str(history_csv),
            "HISTORY_ASYNC_LOAD": False,
            "GENERATE_SEED": 1234,
            "GENERATE_MAX_ATTEMPTS": 2000,
        }
        config.update(overrides)
        app = create_app(config)
        created.append(app)
        return app

    yield _make

    for app in created:
        app.extensions["engine"].dispose()


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
