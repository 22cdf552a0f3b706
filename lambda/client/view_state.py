"""
View State - Estados visuais da tela de clima (idle, loading, error, empty, ready)
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from client.error_messages import friendly_message
from client.weather_api_client import SearchValidationError, WeatherApiError
from domain.constants import Client
from domain.error_codes import ErrorCode
from domain.value_objects.weather_code import WeatherCategory, WeatherCode

NO_FORECAST_MESSAGE = 'No forecast data available for this city.'
WELCOME_MESSAGE = 'Search for a city above to get started'

# Erros em que a tela sugere cidades populares
_SUGGEST_CITIES_FOR = (ErrorCode.CITY_NOT_FOUND, ErrorCode.CITY_NAME_TOO_SHORT)


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class WeatherViewState:
    status: ViewStatus
    city_query: str = ''
    data: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    category: WeatherCategory = WeatherCategory.UNKNOWN
    can_retry: bool = False
    suggestions: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def weekly(self) -> list:
        return (self.data or {}).get('weekly') or []


def build_view_state(
    city_query: str = '',
    data: Optional[Dict[str, Any]] = None,
    error: Optional[BaseException] = None,
    loading: bool = False
) -> WeatherViewState:
    """
    Decide o que a tela mostra a partir do resultado da busca

    Payloads com `daily`/`weekly` nulos viram EMPTY (condições atuais sem
    previsão), nunca uma exceção.
    """
    if error is not None:
        code = error.code if isinstance(error, WeatherApiError) else None
        return WeatherViewState(
            status=ViewStatus.ERROR,
            city_query=city_query,
            message=friendly_message(error, city_query),
            can_retry=not isinstance(error, SearchValidationError),
            suggestions=Client.POPULAR_CITIES[:6] if code in _SUGGEST_CITIES_FOR else ()
        )

    if loading:
        return WeatherViewState(status=ViewStatus.LOADING, city_query=city_query)

    if not data:
        return WeatherViewState(status=ViewStatus.IDLE, city_query=city_query, message=WELCOME_MESSAGE)

    current = data.get('current') or {}
    category = WeatherCode.categorize(current.get('weatherCode'))

    if data.get('daily') is None or data.get('weekly') is None:
        return WeatherViewState(
            status=ViewStatus.EMPTY,
            city_query=city_query,
            data=data,
            message=NO_FORECAST_MESSAGE,
            category=category
        )

    return WeatherViewState(
        status=ViewStatus.READY,
        city_query=city_query,
        data=data,
        category=category
    )
