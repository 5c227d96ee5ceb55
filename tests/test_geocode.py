import asyncio

import httpx
import pytest

from app.integrations import nominatim
from app.routers import geocode


def test_reverse_geocode_parses_display_name():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["user_agent"] = request.headers.get("User-Agent")
        return httpx.Response(200, json={"display_name": "Plaza de Armas, Santiago, Chile"})

    result = asyncio.run(nominatim.reverse_geocode(-33.45, -70.66, transport=httpx.MockTransport(handler)))
    assert result["direccion"] == "Plaza de Armas, Santiago, Chile"
    assert result["lat"] == -33.45
    assert seen["params"]["format"] == "jsonv2"
    assert seen["params"]["lat"] == "-33.45"
    assert seen["user_agent"]


def test_reverse_geocode_without_match():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"error": "Unable to geocode"}))
    result = asyncio.run(nominatim.reverse_geocode(0.0, 0.0, transport=transport))
    assert result["direccion"] is None


def test_reverse_geocode_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    with pytest.raises(RuntimeError):
        asyncio.run(nominatim.reverse_geocode(0.0, 0.0, transport=transport))


def test_route_returns_address(client, monkeypatch):
    async def fake_reverse(lat, lon):
        return {"lat": lat, "lon": lon, "direccion": "Calle Falsa 123", "provider": "nominatim"}

    monkeypatch.setattr(geocode, "reverse_geocode", fake_reverse)
    resp = client.get("/geocode/reverse", params={"lat": -33.45, "lon": -70.66})
    assert resp.status_code == 200
    assert resp.json()["direccion"] == "Calle Falsa 123"


def test_route_maps_upstream_failure_to_502(client, monkeypatch):
    async def failing_reverse(lat, lon):
        raise RuntimeError("Nominatim 오류: HTTP 503")

    monkeypatch.setattr(geocode, "reverse_geocode", failing_reverse)
    resp = client.get("/geocode/reverse", params={"lat": 1, "lon": 2})
    assert resp.status_code == 502
    assert resp.json() == {"error": "Reverse geocoding failed"}


def test_route_validates_coordinates(client):
    assert client.get("/geocode/reverse", params={"lat": 95, "lon": 0}).status_code == 400
