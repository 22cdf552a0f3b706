"""Testes Unitários - WeatherProviderFactory"""
from unittest.mock import MagicMock

import pytest

from infrastructure.adapters.output.providers import weather_provider_factory as factory_module
from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoGeocodingProvider,
    OpenMeteoProvider,
)
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory,
)


@pytest.fixture
def shared_client(monkeypatch):
    calls = {"http": 0}
    http_client = MagicMock()

    def fake_get_http_client():
        calls["http"] += 1
        return http_client

    monkeypatch.setattr(factory_module, "get_http_client", fake_get_http_client)
    monkeypatch.setattr(factory_module, "_factory_instance", None)

    return http_client, calls


def test_factory_builds_openmeteo_providers(shared_client):
    http_client, calls = shared_client

    factory = WeatherProviderFactory()
    geocoding = factory.get_geocoding_provider()
    weather = factory.get_weather_provider()

    assert isinstance(geocoding, OpenMeteoGeocodingProvider)
    assert isinstance(weather, OpenMeteoProvider)
    assert geocoding.http_client is http_client
    assert weather.http_client is http_client

    # lazy init: segunda chamada não instancia novamente
    assert factory.get_weather_provider() is weather
    assert factory.get_geocoding_provider() is geocoding
    assert calls["http"] == 1


def test_injected_http_client_skips_default(shared_client):
    _, calls = shared_client
    injected = MagicMock()

    factory = WeatherProviderFactory(http_client=injected)

    assert factory.get_weather_provider().http_client is injected
    assert calls["http"] == 0


def test_get_weather_provider_factory_singleton(shared_client):
    factory = get_weather_provider_factory()
    again = get_weather_provider_factory()

    assert factory is again
    assert factory.get_weather_provider() is again.get_weather_provider()
