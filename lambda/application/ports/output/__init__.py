"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .http_client_port import HttpResponse, IHttpClient
from .geocoding_provider_port import IGeocodingProvider
from .weather_provider_port import IWeatherProvider

__all__ = ['HttpResponse', 'IHttpClient', 'IGeocodingProvider', 'IWeatherProvider']
