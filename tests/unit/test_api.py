from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import httpx
import pytest

from src import main
from src.adapters.api.dependencies import (
    get_live_train_service,
    get_road_route_provider,
    get_station_service,
)
from src.adapters.persistence import BuiltinNetworkRepository
from src.app.services.live_train_service import LiveTrainService
from src.app.services.station_service import StationService
from src.domain.models import GeoPoint, TravelMode
from src.main import app


@dataclass(slots=True)
class _FakeRoadRouteProvider:
    async def road_route(
        self, start: GeoPoint, end: GeoPoint, mode: TravelMode
    ) -> tuple[GeoPoint, ...]:
        mid = GeoPoint(lat=(start.lat + end.lat) / 2, lon=(start.lon + end.lon) / 2)
        return (start, mid, end)


def _client(raise_app_exceptions: bool = True) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    async with _client() as client:
        resp = await client.get("/health")
    assert resp.json() == {"status": "ok"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_journey_with_one_change() -> None:
    async with _client() as client:
        resp = await client.get("/journeys", params={"from_id": "par", "to_id": "sea"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["found"] is True
    assert payload["transfers"] == 1
    assert [leg["line"] for leg in payload["legs"]] == ["Blue", "Green"]
    assert payload["total_fare"] == sum(leg["fare"] for leg in payload["legs"])
    assert payload["total_stops"] == 2


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_journey_unknown_station_is_empty_route() -> None:
    async with _client() as client:
        resp = await client.get("/journeys", params={"from_id": "par", "to_id": "x"})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["found"] is False
    assert payload["legs"] == []
    assert payload["destination"] is None


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_fare() -> None:
    async with _client() as client:
        resp = await client.get("/fares", params={"distance_km": 9, "line": "Green"})
    assert resp.json()["fare"] == 30


@pytest.mark.unit
@pytest.mark.anyio
async def test_station_search_nearest_and_lines() -> None:
    async with _client() as client:
        search = await client.get("/network/stations", params={"q": "esplanade"})
        nearest = await client.get(
            "/network/stations/nearest", params={"lat": 22.5645, "lon": 88.3506}
        )
        lines = await client.get("/network/lines")
        bad = await client.get(
            "/network/stations/nearest", params={"lat": 95.0, "lon": 88.0}
        )

    assert [s["id"] for s in search.json()] == ["esp", "esp_g"]
    assert nearest.json()["station"]["id"] == "esp"
    assert nearest.json()["distance_km"] == 0.0
    assert [line["id"] for line in lines.json()] == [
        "blue",
        "green",
        "purple",
        "yellow",
        "orange",
    ]
    assert bad.status_code == 422


@pytest.mark.unit
@pytest.mark.anyio
async def test_station_timetable() -> None:
    async with _client() as client:
        ok = await client.get("/network/stations/dak/timetable")
        missing = await client.get("/network/stations/nope/timetable")

    assert ok.status_code == 200
    payload = ok.json()
    assert payload["summary"][0] == {
        "toward": "Kavi Subhash",
        "first": "6:50 AM",
        "last": "9:30 PM",
    }
    assert payload["schedule"][1]["toward"] == "Dakshineswar"
    assert missing.status_code == 404


@pytest.mark.unit
@pytest.mark.anyio
async def test_live_trains_uses_injected_clock() -> None:
    def _override() -> LiveTrainService:
        return LiveTrainService(
            network_repository=BuiltinNetworkRepository(),
            clock=lambda: datetime(2026, 1, 8, 11, 40),
        )

    app.dependency_overrides[get_live_train_service] = _override
    async with _client() as client:
        resp = await client.get("/realtime/trains", params={"line": "Yellow"})
    app.dependency_overrides.clear()

    trains = resp.json()["trains"]
    assert sorted(t["id"] for t in trains) == ["yellow-down-0", "yellow-up-0"]
    assert {t["direction"] for t in trains} == {"UP", "DOWN"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_road_route_and_access_nearest() -> None:
    def _station_service() -> StationService:
        return StationService(
            network_repository=BuiltinNetworkRepository(),
            road_route_provider=_FakeRoadRouteProvider(),
        )

    app.dependency_overrides[get_road_route_provider] = _FakeRoadRouteProvider
    app.dependency_overrides[get_station_service] = _station_service
    async with _client() as client:
        road = await client.post(
            "/road-route",
            json={
                "start": {"lat": 22.56, "lon": 88.35},
                "end": {"lat": 22.55, "lon": 88.35},
                "mode": "driving",
            },
        )
        access = await client.post(
            "/access/nearest",
            json={"location": {"lat": 22.5541, "lon": 88.3503}},
        )
    app.dependency_overrides.clear()

    assert road.status_code == 200
    assert road.json()["mode"] == "driving"
    assert len(road.json()["points"]) == 3

    assert access.status_code == 200
    payload = access.json()
    assert payload["station"]["id"] == "par"
    assert payload["mode"] == "walking"
    assert payload["eta_min"] == 1
    assert len(payload["path"]) == 3
    assert payload["path_distance_km"] == pytest.approx(payload["distance_km"], rel=1e-3)


@pytest.mark.unit
@pytest.mark.anyio
async def test_unhandled_errors_are_json() -> None:
    class _Broken:
        async def list_trains(self, **_: object):
            raise RuntimeError("feed offline")

    app.dependency_overrides[get_live_train_service] = _Broken
    async with _client(raise_app_exceptions=False) as client:
        resp = await client.get("/realtime/trains")
    app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"detail": "feed offline"}


@pytest.mark.unit
@pytest.mark.anyio
async def test_live_trains_at_explicit_time_uses_metro_zone() -> None:
    async with _client() as client:
        morning = await client.get(
            "/realtime/trains",
            params={"line": "Yellow", "at": "2026-01-08T01:30:00Z"},
        )
        late = await client.get(
            "/realtime/trains",
            params={"line": "Yellow", "at": "2026-01-08T23:00:00+05:30"},
        )

    assert morning.status_code == 200
    assert sorted(t["id"] for t in morning.json()["trains"]) == [
        "yellow-down-0",
        "yellow-up-0",
    ]
    assert late.json()["trains"] == []


@pytest.mark.unit
def test_live_train_service_zone_from_env(monkeypatch) -> None:
    monkeypatch.setenv("METRO_TIMEZONE", "Asia/Tokyo")
    assert get_live_train_service().timezone == "Asia/Tokyo"

    monkeypatch.delenv("METRO_TIMEZONE")
    assert get_live_train_service().timezone == "Asia/Kolkata"


@pytest.mark.unit
@pytest.mark.anyio
async def test_line_timeline() -> None:
    async with _client() as client:
        ok = await client.get("/network/lines/yellow/timeline")
        missing = await client.get("/network/lines/magenta/timeline")

    assert ok.status_code == 200
    payload = ok.json()
    assert payload["name"] == "Yellow Line"
    assert [s["stop_number"] for s in payload["stops"]] == [1, 2]
    assert payload["stops"][0]["up"] == {
        "toward": "Dum Dum Cantonment",
        "first": "6:50 AM",
        "last": "9:30 PM",
    }
    assert payload["stops"][0]["down"]["first"] == "6:52 AM"
    assert missing.status_code == 404


@pytest.mark.unit
@pytest.mark.anyio
async def test_bad_network_file_is_reported_readably(tmp_path, monkeypatch) -> None:
    path = tmp_path / "network.json"
    path.write_text('{"lines": [{"name": "No id"}]}', encoding="utf-8")
    monkeypatch.setenv("METRO_NETWORK_PATH", str(path))

    async with _client() as client:
        resp = await client.get("/journeys", params={"from_id": "a", "to_id": "b"})

    assert resp.status_code == 503
    assert resp.json() == {
        "detail": "Network data unavailable: Line entry without an id"
    }


@pytest.mark.unit
@pytest.mark.anyio
@pytest.mark.parametrize("distance_km", ["nan", "inf", "-inf"])
async def test_fare_rejects_non_finite_distance(distance_km: str) -> None:
    async with _client() as client:
        resp = await client.get("/fares", params={"distance_km": distance_km})
    assert resp.status_code == 422


@pytest.mark.unit
def test_run_serves_app_with_env_bind(monkeypatch) -> None:
    calls: list[tuple[object, dict[str, object]]] = []
    monkeypatch.setattr(main.uvicorn, "run", lambda target, **kw: calls.append((target, kw)))
    monkeypatch.setenv("METROPATH_HOST", "0.0.0.0")
    monkeypatch.setenv("METROPATH_PORT", "9001")

    main.run()

    assert calls == [(app, {"host": "0.0.0.0", "port": 9001})]
