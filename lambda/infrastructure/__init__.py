"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos adapters de entrada e saída
"""

from infrastructure.adapters.output.http.aiohttp_http_client import AiohttpHttpClient, get_http_client
from infrastructure.adapters.output.http.aiohttp_session_manager import get_aiohttp_session_manager
from infrastructure.adapters.output.providers import (
    OpenMeteoGeocodingProvider,
    OpenMeteoProvider,
    WeatherProviderFactory
)

__all__ = [
    'AiohttpHttpClient',
    'get_http_client',
    'get_aiohttp_session_manager',
    'OpenMeteoGeocodingProvider',
    'OpenMeteoProvider',
    'WeatherProviderFactory'
]
