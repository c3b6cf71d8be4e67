"""GET /api/health and GET /api/signs."""

from datetime import datetime


async def test_health_returns_ok_with_iso_timestamp(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


async def test_health_ignores_corrupt_store(client, data_file):
    data_file.write_text("not json", encoding="utf-8")
    assert (await client.get("/api/health")).status_code == 200


async def test_signs_lists_twelve_profiles_in_order(client):
    res = await client.get("/api/signs")
    assert res.status_code == 200
    signs = res.json()["signs"]
    assert len(signs) == 12
    assert signs[0]["sign"] == "Capricorn"
    assert signs[3] == {
        "sign": "Aries",
        "symbol": "♈",
        "description": "The Ram - Bold and ambitious",
        "element": "Fire",
        "start": {"month": 3, "day": 21},
        "end": {"month": 4, "day": 19},
    }
