from __future__ import annotations

from fastapi.testclient import TestClient

from prefix_directory.models import PrefixDirectoryConfig
from prefix_directory.service_http import create_app


def _client() -> TestClient:
    config = PrefixDirectoryConfig(
        seed_sentences=["i love you", "island", "ironman", "i love leetcode"],
        seed_times=[5, 3, 2, 2],
        max_numbers=3,
    )
    return TestClient(create_app(config))


def test_health_and_autocomplete_flow() -> None:
    client = _client()

    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}

    resp = client.post("/autocomplete/input", json={"char": "i"})
    assert resp.status_code == 200
    assert resp.json() == {"suggestions": ["i love you", "island", "i love leetcode"]}

    client.post("/autocomplete/input", json={"char": " "})
    client.post("/autocomplete/input", json={"char": "a"})
    resp = client.post("/autocomplete/input", json={"char": "#"})
    assert resp.json() == {"suggestions": []}

    snapshot = client.get("/autocomplete/snapshot").json()
    assert {"text": "i a", "frequency": 1} in snapshot
    assert snapshot[0] == {"text": "i love you", "frequency": 5}


def test_autocomplete_rejects_bad_input() -> None:
    client = _client()

    resp = client.post("/autocomplete/input", json={"char": "Q"})
    assert resp.status_code == 422
    assert "Q" in resp.json()["detail"]

    resp = client.post("/autocomplete/input", json={"char": "ab"})
    assert resp.status_code == 422


def test_directory_endpoints() -> None:
    client = _client()

    numbers = [client.post("/directory/get").json()["number"] for _ in range(4)]
    assert numbers == [0, 1, 2, -1]

    resp = client.get("/directory/check/2")
    assert resp.json() == {"number": 2, "available": False}

    resp = client.post("/directory/release", json={"number": 2})
    assert resp.json() == {"number": 2, "available": True}

    snap = client.get("/directory/snapshot").json()
    assert snap == {
        "capacity": 3,
        "high_water_mark": 3,
        "released": [2],
        "available_count": 1,
    }
    assert client.post("/directory/get").json() == {"number": 2}
