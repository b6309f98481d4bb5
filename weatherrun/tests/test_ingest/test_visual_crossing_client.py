"""Tests for the Visual Crossing client with mocked httpx."""

import httpx
import pytest
import respx

from weatherrun.ingest.visual_crossing_client import VisualCrossingClient, WeatherApiError

BASE = "https://test-vc.example.com/timeline"


@pytest.fixture
def client() -> VisualCrossingClient:
    return VisualCrossingClient(api_key="test-key", base_url=BASE)


class TestGetTimeline:
    @respx.mock
    def test_success(self, client: VisualCrossingClient, boston_raw: dict):
        route = respx.get(f"{BASE}/02108/next7days").mock(
            return_value=httpx.Response(200, json=boston_raw)
        )
        result = client.get_timeline("02108")
        assert result["resolvedAddress"] == "Boston, MA, United States"
        assert len(result["days"]) == 7

        request = route.calls[0].request
        assert request.url.params["key"] == "test-key"
        assert request.url.params["unitGroup"] == "us"
        assert request.url.params["include"] == "days,hours,alerts"
        assert "weatherrun" in request.headers["user-agent"]

    @respx.mock
    def test_location_is_url_encoded(self, client: VisualCrossingClient):
        route = respx.get(f"{BASE}/Boston%2C%20MA/next7days").mock(
            return_value=httpx.Response(200, json={"days": []})
        )
        client.get_timeline("Boston, MA")
        assert route.called

    def test_missing_api_key(self):
        client = VisualCrossingClient(api_key="", base_url=BASE)
        with pytest.raises(WeatherApiError, match="not configured"):
            client.get_timeline("02108")

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("WEATHERRUN_API_KEY", "env-key")
        client = VisualCrossingClient(base_url=BASE)
        assert client.api_key == "env-key"

    @respx.mock
    def test_location_not_found(self, client: VisualCrossingClient):
        respx.get(f"{BASE}/nowhere/next7days").mock(
            return_value=httpx.Response(400, text="Bad API Request:Invalid location")
        )
        with pytest.raises(WeatherApiError, match="Location not found") as exc:
            client.get_timeline("nowhere")
        assert exc.value.status_code == 400

    @respx.mock
    def test_server_error_not_retried(self, client: VisualCrossingClient):
        route = respx.get(f"{BASE}/02108/next7days").mock(
            return_value=httpx.Response(503)
        )
        with pytest.raises(WeatherApiError, match="Weather API error: 503") as exc:
            client.get_timeline("02108")
        assert exc.value.status_code == 503
        assert route.call_count == 1

    @respx.mock
    def test_transport_error(self, client: VisualCrossingClient):
        respx.get(f"{BASE}/02108/next7days").mock(
            side_effect=httpx.ConnectError("connection refused")
        )
        with pytest.raises(WeatherApiError, match="Could not reach"):
            client.get_timeline("02108")

    @respx.mock
    def test_unreadable_body(self, client: VisualCrossingClient):
        respx.get(f"{BASE}/02108/next7days").mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        with pytest.raises(WeatherApiError, match="unreadable"):
            client.get_timeline("02108")
