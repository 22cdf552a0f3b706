"""Camada de apresentação (cliente da rota /api/weather)"""
from client.weather_api_client import (
    NetworkError,
    SearchValidationError,
    WeatherApiClient,
    WeatherApiError,
    validate_search_query,
)
from client.error_messages import friendly_message
from client.view_state import ViewStatus, WeatherViewState, build_view_state
from client.text_renderer import render_text

__all__ = [
    'NetworkError',
    'SearchValidationError',
    'WeatherApiClient',
    'WeatherApiError',
    'validate_search_query',
    'friendly_message',
    'ViewStatus',
    'WeatherViewState',
    'build_view_state',
    'render_text'
]
