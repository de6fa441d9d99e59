from __future__ import annotations

import pytest


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "data": {"status": "ok"}, "error": None}


def test_status_reports_loaded_history(client):
    data = client.get("/api/status").get_json()["data"]

    assert data["history"] == {"state": "ready", "draws": 3, "error": None}
    assert data["bookmarks"] == 0


def test_list_draws_newest_first_with_paging(client):
    body = client.get("/api/draws?limit=2").get_json()

    assert [d["round"] for d in body["data"]] == [1001, 1000]
    assert body["meta"] == {"offset": 0, "limit": 2, "total": 3}

    body = client.get("/api/draws?offset=2&limit=2").get_json()
    assert [d["round"] for d in body["data"]] == [999]


def test_list_draws_rejects_bad_paging(client):
    resp = client.get("/api/draws?limit=0")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "validation_error"


def test_current_draw_navigation(client):
    data = client.get("/api/draws/current").get_json()["data"]

    assert data["draw"]["round"] == 1001
    assert data["draw"]["first_prize_total_eok"] == 24
    assert data["index"] == 0
    assert data["has_next"] is False
    assert data["has_previous"] is True

    data = client.get("/api/draws/current?index=2").get_json()["data"]
    assert data["draw"]["round"] == 999
    assert data["has_previous"] is False
    assert data["has_next"] is True

    assert client.get("/api/draws/current?index=3").status_code == 404


def test_get_single_draw(client):
    data = client.get("/api/draws/1000").get_json()["data"]

    assert data["numbers"] == [40, 3, 22, 7, 31, 15]
    assert data["sorted_numbers"] == [3, 7, 15, 22, 31, 40]
    assert data["bonus_number"] == 9

    resp = client.get("/api/draws/5")
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


def test_frequency_analysis(client):
    data = client.get("/api/analysis/frequency").get_json()["data"]

    assert data["history_state"] == "ready"
    assert data["draws_used"] == 3
    assert len(data["counts"]) == 45
    assert data["counts"]["3"] == 2
    assert data["hot_numbers"][0] == {"number": 3, "count": 2}
    assert len(data["hot_numbers"]) == 6
    assert len(data["cold_numbers"]) == 6
    assert all(c["count"] == 0 for c in data["cold_numbers"])
    assert len(data["insights"]) == 3


def test_frequency_analysis_recent_window(client):
    data = client.get("/api/analysis/frequency?n=1").get_json()["data"]

    assert data["draws_used"] == 1
    assert data["counts"]["3"] == 0
    assert data["counts"]["45"] == 1


@pytest.mark.parametrize("query", ["n=abc", "n=0"])
def test_frequency_analysis_rejects_bad_window(client, query):
    assert client.get(f"/api/analysis/frequency?{query}").status_code == 400


def test_generate_default(client):
    data = client.post("/api/generate", json={}).get_json()["data"]

    assert data["mode"] == "random"
    assert data["count"] == 3
    for combo in data["combinations"]:
        assert combo["id"].startswith("random-")
        assert combo["numbers"] == sorted(set(combo["numbers"]))
        assert len(combo["numbers"]) == 6
        assert combo["sum"] == sum(combo["numbers"])
        assert combo["reason"] == "random"
        assert "matchRound" in combo


def test_generate_sum_mode(client):
    resp = client.post("/api/generate", json={"mode": "sum", "count": 5, "min_sum": 120, "max_sum": 140})

    assert resp.status_code == 200
    combos = resp.get_json()["data"]["combinations"]
    assert len(combos) == 5
    assert all(120 <= c["sum"] <= 140 for c in combos)
    assert all(c["reason"] == "sum-range" for c in combos)


def test_generate_impossible_range(client):
    resp = client.post("/api/generate", json={"mode": "sum", "min_sum": 170, "max_sum": 100})

    assert resp.status_code == 422
    assert resp.get_json()["error"]["code"] == "generation_infeasible"


@pytest.mark.parametrize(
    "payload",
    [
        {"mode": "lucky"},
        {"count": 0},
        {"count": 51},
        {"mode": "sum", "min_sum": 100},
    ],
)
def test_generate_rejects_bad_requests(client, payload):
    resp = client.post("/api/generate", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "validation_error"


def test_match(client):
    hit = client.post("/api/match", json={"numbers": [40, 31, 22, 15, 7, 3]}).get_json()["data"]
    miss = client.post("/api/match", json={"numbers": [3, 7, 15, 22, 31, 41]}).get_json()["data"]

    assert hit["match_round"] == 1000
    assert hit["numbers"] == [3, 7, 15, 22, 31, 40]
    assert miss["match_round"] is None


@pytest.mark.parametrize("numbers", [[1, 2, 3, 4, 5], [1, 1, 2, 3, 4, 5], [0, 1, 2, 3, 4, 5]])
def test_match_rejects_invalid_numbers(client, numbers):
    assert client.post("/api/match", json={"numbers": numbers}).status_code == 400


def test_bookmark_lifecycle(client):
    payload = {"id": "random-1-0", "numbers": [45, 1, 2, 3, 4, 5], "reason": "random", "matchRound": None}

    created = client.post("/api/bookmarks", json=payload)
    assert created.status_code == 201
    assert created.get_json()["data"] == {
        "bookmark": {"id": "random-1-0", "numbers": [1, 2, 3, 4, 5, 45], "sum": 60, "reason": "random", "matchRound": None},
        "created": True,
        "persisted": True,
    }

    again = client.post("/api/bookmarks", json=payload)
    assert again.status_code == 200
    assert again.get_json()["data"]["created"] is False

    listed = client.get("/api/bookmarks").get_json()["data"]
    assert [b["id"] for b in listed] == ["random-1-0"]

    removed = client.delete("/api/bookmarks/random-1-0").get_json()["data"]
    assert removed == {"id": "random-1-0", "removed": True, "persisted": True}

    missing = client.delete("/api/bookmarks/random-1-0")
    assert missing.status_code == 200
    assert missing.get_json()["data"]["removed"] is False

    assert client.get("/api/bookmarks").get_json()["data"] == []


def test_bookmark_rejects_invalid_payload(client):
    resp = client.post("/api/bookmarks", json={"id": "x", "numbers": [1, 2, 3]})

    assert resp.status_code == 400
    assert "numbers" in resp.get_json()["error"]["details"]


def test_bookmarks_are_loaded_at_startup(make_app):
    first = make_app().test_client()
    first.post("/api/bookmarks", json={"id": "a", "numbers": [1, 2, 3, 4, 5, 6]})
    first.post("/api/bookmarks", json={"id": "b", "numbers": [7, 8, 9, 10, 11, 12]})

    second = make_app().test_client()

    assert [b["id"] for b in second.get("/api/bookmarks").get_json()["data"]] == ["b", "a"]
    assert second.get("/api/status").get_json()["data"]["bookmarks"] == 2


def test_failed_history_keeps_the_app_usable(make_app, tmp_path):
    client = make_app(HISTORY_SOURCE=str(tmp_path / "nope.csv")).test_client()

    status = client.get("/api/status").get_json()["data"]
    assert status["history"]["state"] == "failed"
    assert status["history"]["error"]

    resp = client.get("/api/draws/current")
    assert resp.status_code == 503
    assert resp.get_json()["error"]["code"] == "history_unavailable"

    freq = client.get("/api/analysis/frequency").get_json()["data"]
    assert freq["history_state"] == "failed"
    assert set(freq["counts"].values()) == {0}

    combos = client.post("/api/generate", json={"count": 2}).get_json()["data"]["combinations"]
    assert len(combos) == 2
    assert all(c["matchRound"] is None for c in combos)

    assert client.post("/api/match", json={"numbers": [1, 2, 3, 4, 5, 6]}).get_json()["data"]["match_round"] is None


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False
