"""Infrastructure Providers - Implementações de provedores de geocoding e clima"""

from infrastructure.adapters.output.providers.openmeteo import OpenMeteoGeocodingProvider, OpenMeteoProvider
from infrastructure.adapters.output.providers.weather_provider_factory import (
    WeatherProviderFactory,
    get_weather_provider_factory,
)

__all__ = [
    'OpenMeteoGeocodingProvider',
    'OpenMeteoProvider',
    'WeatherProviderFactory',
    'get_weather_provider_factory'
]
