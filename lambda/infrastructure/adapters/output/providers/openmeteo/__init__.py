"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_provider import OpenMeteoProvider
from infrastructure.adapters.output.providers.openmeteo.openmeteo_geocoding_provider import (
    OpenMeteoGeocodingProvider
)

__all__ = ['OpenMeteoProvider', 'OpenMeteoGeocodingProvider']
