"""
Weather Provider Factory - criação centralizada dos providers Open-Meteo
"""
from typing import Optional

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.http_client_port import IHttpClient
from application.ports.output.weather_provider_port import IWeatherProvider
from infrastructure.adapters.output.http.aiohttp_http_client import get_http_client
from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoGeocodingProvider,
    OpenMeteoProvider,
)


class WeatherProviderFactory:
    """
    Factory simples para os providers de geocoding e clima.
    Mantém lazy-loading e singleton para reuso em execução quente da Lambda.
    """

    def __init__(self, http_client: Optional[IHttpClient] = None):
        self._http_client = http_client
        self._geocoding: Optional[IGeocodingProvider] = None
        self._weather: Optional[IWeatherProvider] = None

    @property
    def http_client(self) -> IHttpClient:
        if self._http_client is None:
            self._http_client = get_http_client()
        return self._http_client

    def get_geocoding_provider(self) -> IGeocodingProvider:
        if self._geocoding is None:
            self._geocoding = OpenMeteoGeocodingProvider(http_client=self.http_client)
        return self._geocoding

    def get_weather_provider(self) -> IWeatherProvider:
        """Retorna provider padrão (Open-Meteo)."""
        if self._weather is None:
            self._weather = OpenMeteoProvider(http_client=self.http_client)
        return self._weather


# Factory singleton global
_factory_instance: Optional[WeatherProviderFactory] = None


def get_weather_provider_factory(
    http_client: Optional[IHttpClient] = None
) -> WeatherProviderFactory:
    """
    Retorna singleton da factory (somente Open-Meteo).
    """
    global _factory_instance

    if _factory_instance is None:
        _factory_instance = WeatherProviderFactory(http_client=http_client)

    return _factory_instance
