"""
Mensagens amigáveis exibidas ao usuário
Tabela indexada pelo ErrorCode (nunca pelo texto livre do servidor)
"""
from typing import Optional

from client.weather_api_client import NetworkError, WeatherApiError
from domain.error_codes import ErrorCode

NETWORK_ISSUE_MESSAGE = '📡 Network connection issue. Please check your internet connection and try again.'
GENERIC_MESSAGE = '⚠️ Something went wrong. Please try searching for a different city.'

FRIENDLY_MESSAGES = {
    ErrorCode.CITY_NOT_FOUND: '🌍 Oops! We couldn\'t find "{city}". Please check the spelling and try again.',
    ErrorCode.WEATHER_FETCH_FAILED: '🌦️ Weather data is temporarily unavailable. Please try again later.',
    ErrorCode.CITY_PARAMETER_REQUIRED: '⚠️ Please enter a city name to search for weather information.',
    ErrorCode.CITY_NAME_TOO_SHORT: '📝 City name must be at least 2 characters long. Please enter a valid city name.',
    ErrorCode.NETWORK_CONNECTION_FAILED: NETWORK_ISSUE_MESSAGE,
    ErrorCode.WEATHER_SERVICE_UNAVAILABLE: '🌦️ Weather service is temporarily unavailable. Please try again in a few minutes.',
    ErrorCode.INVALID_WEATHER_DATA: '🔍 Unable to read the weather for "{city}". Please try a different search term.',
}


def friendly_message(error: Optional[BaseException], city_name: str = '') -> str:
    """
    Converte o erro da busca na frase exibida ao usuário

    Args:
        error: Exceção levantada pela camada de busca
        city_name: Cidade pesquisada (interpolada quando a frase a menciona)
    """
    if isinstance(error, NetworkError):
        return NETWORK_ISSUE_MESSAGE

    if isinstance(error, WeatherApiError):
        template = FRIENDLY_MESSAGES.get(error.code)
        if template is not None:
            return template.format(city=city_name)
        return f'❌ {error.message}'

    return GENERIC_MESSAGE
