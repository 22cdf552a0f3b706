"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores sobrescrevíveis por ambiente ficam em shared/config/settings.py
"""
from shared.config import settings


class API:
    """Constantes de APIs externas"""

    # Open-Meteo
    GEOCODING_BASE_URL = settings.GEOCODING_BASE_URL
    OPENMETEO_BASE_URL = settings.OPENMETEO_BASE_URL

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = settings.HTTP_TIMEOUT_TOTAL  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Geocoding:
    """Parâmetros fixos da busca de coordenadas"""

    RESULT_COUNT = 1
    LANGUAGE = "en"


class Forecast:
    """Parâmetros fixos da chamada /forecast"""

    FORECAST_DAYS = 7
    TIMEZONE = "auto"

    CURRENT_FIELDS = (
        "temperature_2m",
        "weather_code",
        "wind_speed_10m",
        "wind_direction_10m",
        "is_day",
        "surface_pressure",
        "visibility",
        "uv_index",
    )

    # A API aceita o nome legado `weathercode` no bloco daily
    DAILY_FIELDS = (
        "weathercode",
        "temperature_2m_max",
        "temperature_2m_min",
        "relative_humidity_2m_max",
        "wind_speed_10m_max",
        "uv_index_max",
    )


class Validation:
    """Regras de validação de entrada"""

    MIN_CITY_NAME_LENGTH = 2
    CITY_QUERY_PARAM = "city"


class Client:
    """Configuração da camada de busca do cliente"""

    RETRY_ATTEMPTS = 1
    RETRY_DELAY_SECONDS = 1.0
    STALE_TIME_SECONDS = 10 * 60

    POPULAR_CITIES = (
        "London", "New York", "Tokyo", "Paris", "Sydney",
        "Berlin", "Moscow", "Dubai", "Singapore", "Toronto",
    )
