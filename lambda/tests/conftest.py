"""
Fixtures compartilhadas (unit + integration)
Fake do cliente HTTP e payloads de exemplo da Open-Meteo
"""
import os
from typing import Any, Dict, List, Optional, Tuple

import pytest

# Sem agent do Datadog nos testes
os.environ.setdefault("DD_TRACE_ENABLED", "false")

from application.ports.output.http_client_port import HttpResponse, IHttpClient


class FakeHttpClient(IHttpClient):
    """
    Cliente HTTP fake: responde por sufixo de URL e registra as chamadas

    Usage:
        client = FakeHttpClient({'/search': HttpResponse(200, body={...})})
    """

    def __init__(self, responses: Dict[str, Any]):
        self.responses = responses
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> HttpResponse:
        self.calls.append((url, dict(params or {})))
        for suffix, outcome in self.responses.items():
            if url.endswith(suffix):
                if isinstance(outcome, BaseException):
                    raise outcome
                return outcome
        raise AssertionError(f"Unexpected request: {url}")

    def calls_to(self, suffix: str) -> List[Tuple[str, Dict[str, Any]]]:
        return [call for call in self.calls if call[0].endswith(suffix)]


LONDON_RESULT = {
    "id": 2643743,
    "name": "London",
    "latitude": 51.51,
    "longitude": -0.13,
    "country": "United Kingdom",
    "admin1": "England"
}


def build_forecast_payload(weather_code: int = 0, include_daily: bool = True, days: int = 7) -> Dict[str, Any]:
    payload = {
        "latitude": 51.5,
        "longitude": -0.12,
        "current": {
            "time": "2025-11-20T14:00",
            "temperature_2m": 12.3,
            "weather_code": weather_code,
            "wind_speed_10m": 10.1,
            "wind_direction_10m": 250,
            "is_day": 1,
            "surface_pressure": 1012.4,
            "visibility": 24140.0,
            "uv_index": 1.2
        }
    }
    if include_daily:
        payload["daily"] = {
            "time": [f"2025-11-{20 + i:02d}" for i in range(days)],
            "weathercode": [[3, 61, 0, 2, 80, 95, 71][i % 7] for i in range(days)],
            "temperature_2m_max": [13.0 + i for i in range(days)],
            "temperature_2m_min": [7.1 + i for i in range(days)],
            "relative_humidity_2m_max": [88 - i for i in range(days)],
            "wind_speed_10m_max": [18.4 + i * 0.5 for i in range(days)],
            "uv_index_max": [1.6 + i * 0.1 for i in range(days)]
        }
    return payload


@pytest.fixture
def make_http_client():
    """
    Factory fixture para FakeHttpClient

    Usage:
        def test_something(make_http_client):
            client = make_http_client(search=HttpResponse(200, body={'results': []}))
    """
    def _make(search: Any = None, forecast: Any = None) -> FakeHttpClient:
        responses = {}
        if search is not None:
            responses['/search'] = search
        if forecast is not None:
            responses['/forecast'] = forecast
        return FakeHttpClient(responses)

    return _make


@pytest.fixture
def london_search_response() -> HttpResponse:
    return HttpResponse(status=200, reason="OK", body={"results": [LONDON_RESULT]})


@pytest.fixture
def empty_search_response() -> HttpResponse:
    return HttpResponse(status=200, reason="OK", body={"generationtime_ms": 0.4})


@pytest.fixture
def make_forecast_payload():
    return build_forecast_payload


@pytest.fixture
def forecast_response() -> HttpResponse:
    return HttpResponse(status=200, reason="OK", body=build_forecast_payload())
