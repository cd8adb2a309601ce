from pathlib import Path
from typing import Dict, List

import pytest
import requests
from fastapi.testclient import TestClient

from api_main import app
from conftest import FakeCatalog, make_tracks
from weathermood.api.deps import get_access_token, get_catalog
from weathermood.core import write_json
from weathermood.spotify import CreatedPlaylist
from weathermood.weather import WeatherError, WeatherReport

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


def _use_catalog(catalog: FakeCatalog) -> None:
    app.dependency_overrides[get_catalog] = lambda: catalog


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_recommendations_requires_condition() -> None:
    _use_catalog(FakeCatalog())

    response = client.get("/recommendations")

    assert response.status_code == 400


def test_recommendations_returns_provenance_and_tracks() -> None:
    catalog = FakeCatalog(search={"acoustic": make_tracks(3)})
    _use_catalog(catalog)

    response = client.get(
        "/recommendations", params={"condition": "light rain showers"}
    )
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    assert data["method"] == "search"
    assert data["searchTerm"] == "acoustic"
    assert data["category"] == "rainy"
    assert data["mood"].startswith("Rainy Chill")
    assert data["condition"] == "light rain showers"
    assert [t["id"] for t in data["tracks"]] == ["t0", "t1", "t2"]
    assert data["tracks"][0]["artists"] == ["Test Artist"]


def test_recommendations_caps_tracks_at_26() -> None:
    _use_catalog(FakeCatalog(saved=make_tracks(40)))

    response = client.get("/recommendations", params={"condition": "Clear"})

    data = response.json()
    assert data["method"] == "saved_tracks"
    assert data["searchTerm"] is None
    assert len(data["tracks"]) == 26


def test_recommendations_no_results_maps_to_try_again() -> None:
    _use_catalog(FakeCatalog())

    response = client.get("/recommendations", params={"condition": "Snow"})

    assert response.status_code == 503
    assert "try again" in response.json()["detail"]


def test_recommendations_without_token_is_unauthenticated(token_file: Path) -> None:
    response = client.get("/recommendations", params={"condition": "Rain"})

    assert response.status_code == 401
    detail = response.json()["detail"]
    assert detail["status"] == "unauthenticated"
    assert "auth_url" in detail


def test_bearer_header_wins_over_stored_token(token_file: Path, monkeypatch) -> None:
    write_json(
        token_file,
        {"access_token": "stored", "refresh_token": "r", "expires_at": 10**12},
    )
    seen: List[str] = []

    def fake_catalog(access_token: str) -> FakeCatalog:
        seen.append(access_token)
        return FakeCatalog(search={"sunny": make_tracks(1)})

    monkeypatch.setattr("weathermood.api.deps.SpotifyCatalog", fake_catalog)

    response = client.get(
        "/recommendations",
        params={"condition": "Sunny"},
        headers={"Authorization": "Bearer header-token"},
    )
    assert response.status_code == 200
    assert seen == ["header-token"]

    client.get("/recommendations", params={"condition": "Sunny"})
    assert seen == ["header-token", "stored"]


def test_test_music_endpoint() -> None:
    _use_catalog(FakeCatalog(search={"sunny": make_tracks(2)}))

    data = client.get("/test-music").json()

    assert data["success"] is True
    assert data["method"] == "search"
    assert data["tracksCount"] == 2
    assert data["firstTrack"] == "Track t0"


def test_weather_requires_coordinates() -> None:
    assert client.get("/weather", params={"lat": 1.0}).status_code == 400
    assert client.get("/weather/city").status_code == 400


def test_weather_by_city(monkeypatch) -> None:
    monkeypatch.setattr(
        "weathermood.api.weather.routes.fetch_weather_by_city",
        lambda city: WeatherReport(city=city, temp=12, condition="Clouds", humidity=80),
    )

    response = client.get("/weather/city", params={"city": "Oslo"})

    assert response.status_code == 200
    assert response.json() == {
        "city": "Oslo",
        "temp": 12,
        "condition": "Clouds",
        "humidity": 80,
    }


def test_weather_upstream_failure_is_502(monkeypatch) -> None:
    def failing(lat, lon):
        raise WeatherError("boom")

    monkeypatch.setattr(
        "weathermood.api.weather.routes.fetch_weather_by_coords", failing
    )

    response = client.get("/weather", params={"lat": 1.0, "lon": 2.0})

    assert response.status_code == 502


def test_search_requires_query() -> None:
    _use_catalog(FakeCatalog())

    assert client.get("/search").status_code == 400


def test_create_playlist_validation() -> None:
    app.dependency_overrides[get_access_token] = lambda: "tok"

    response = client.post("/create-playlist", json={"playlistName": "x"})

    assert response.status_code == 400


def test_create_playlist_success(monkeypatch) -> None:
    app.dependency_overrides[get_access_token] = lambda: "tok"
    calls: Dict[str, object] = {}

    def fake_create(access_token, name, track_uris, description=None, public=True):
        calls.update(
            access_token=access_token, name=name, uris=track_uris, public=public
        )
        return CreatedPlaylist(
            id="pl-1", name=name, url="https://open/pl-1", track_count=len(track_uris)
        )

    monkeypatch.setattr("weathermood.api.spotify.routes.create_playlist", fake_create)

    response = client.post(
        "/create-playlist",
        json={
            "playlistName": "Rainy Chill",
            "trackUris": ["spotify:track:1", "spotify:track:2"],
            "isPublic": False,
        },
    )
    assert response.status_code == 200

    data = response.json()
    assert data["playlist"] == {
        "id": "pl-1",
        "name": "Rainy Chill",
        "url": "https://open/pl-1",
        "trackCount": 2,
    }
    assert calls["public"] is False
    assert calls["access_token"] == "tok"


def test_create_playlist_upstream_failure_is_502(monkeypatch) -> None:
    app.dependency_overrides[get_access_token] = lambda: "tok"

    def failing(*args, **kwargs):
        raise requests.HTTPError("403")

    monkeypatch.setattr("weathermood.api.spotify.routes.create_playlist", failing)

    response = client.post(
        "/create-playlist", json={"playlistName": "x", "trackUris": []}
    )

    assert response.status_code == 502


def test_auth_callback_success_without_frontend_serves_page(monkeypatch) -> None:
    monkeypatch.setattr("weathermood.config.FRONTEND_URL", None)
    codes: List[str] = []
    monkeypatch.setattr(
        "weathermood.api.auth.routes.exchange_code_for_token", codes.append
    )

    response = client.get("/auth/callback", params={"code": "abc"})

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "authorization complete" in response.text
    assert codes == ["abc"]


def test_auth_callback_error_without_frontend_is_400(monkeypatch) -> None:
    monkeypatch.setattr("weathermood.config.FRONTEND_URL", None)

    response = client.get("/auth/callback", params={"error": "access_denied"})

    assert response.status_code == 400
    assert "auth_failed" in response.text


def test_auth_callback_redirects_to_frontend(monkeypatch) -> None:
    monkeypatch.setattr("weathermood.config.FRONTEND_URL", "http://localhost:3000/")
    monkeypatch.setattr(
        "weathermood.api.auth.routes.exchange_code_for_token", lambda code: {}
    )

    ok = client.get(
        "/auth/callback", params={"code": "abc"}, follow_redirects=False
    )
    denied = client.get(
        "/auth/callback", params={"error": "access_denied"}, follow_redirects=False
    )
    missing = client.get("/auth/callback", follow_redirects=False)

    assert ok.status_code == 307
    assert ok.headers["location"] == "http://localhost:3000/"
    assert denied.headers["location"] == "http://localhost:3000/?error=auth_failed"
    assert missing.headers["location"] == "http://localhost:3000/?error=no_code"


def test_auth_callback_timeout(monkeypatch) -> None:
    monkeypatch.setattr("weathermood.config.FRONTEND_URL", "/app?tab=music")

    def timing_out(code):
        raise requests.Timeout("slow")

    monkeypatch.setattr(
        "weathermood.api.auth.routes.exchange_code_for_token", timing_out
    )

    response = client.get(
        "/auth/callback", params={"code": "abc"}, follow_redirects=False
    )

    assert response.headers["location"] == "/app?tab=music&error=timeout"


def test_missing_condition_is_checked_before_auth(token_file: Path) -> None:
    response = client.get("/recommendations")

    assert response.status_code == 400
    assert response.json()["detail"] == "Weather condition is required"


def test_missing_search_query_is_checked_before_auth(token_file: Path) -> None:
    response = client.get("/search", params={"q": "  "})

    assert response.status_code == 400


def test_catalog_is_closed_after_request(monkeypatch) -> None:
    catalogs: List[FakeCatalog] = []

    def fake_catalog(access_token: str) -> FakeCatalog:
        catalog = FakeCatalog(search={"sunny": make_tracks(1)})
        catalogs.append(catalog)
        return catalog

    monkeypatch.setattr("weathermood.api.deps.SpotifyCatalog", fake_catalog)

    response = client.get(
        "/recommendations",
        params={"condition": "Clear"},
        headers={"Authorization": "Bearer tok"},
    )

    assert response.status_code == 200
    assert len(catalogs) == 1
    assert catalogs[0].closed is True


def test_search_malformed_payload_is_502() -> None:
    class BrokenCatalog:
        def search_tracks(self, query, limit=20):
            raise KeyError("tracks")

    app.dependency_overrides[get_catalog] = lambda: BrokenCatalog()

    response = client.get("/search", params={"q": "jazz"})

    assert response.status_code == 502


def test_auth_status_and_logout(token_file: Path) -> None:
    assert client.get("/auth/status").json()["authenticated"] is False

    write_json(token_file, {"access_token": "a", "expires_at": 10**12})

    assert client.get("/auth/status").json()["authenticated"] is True
    assert client.post("/auth/logout").status_code == 200
    assert not token_file.exists()
