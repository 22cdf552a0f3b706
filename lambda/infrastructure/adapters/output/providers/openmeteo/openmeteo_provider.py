"""Open-Meteo Provider - Implementação do provider para Open-Meteo Forecast API"""
from typing import Optional

from ddtrace import tracer

from application.ports.output.http_client_port import IHttpClient
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API, Forecast
from domain.entities.forecast_response import WeatherForecast
from domain.exceptions import UpstreamUnavailableException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast API

    Características:
    - API gratuita, sem chave
    - Condições atuais (bloco `current`) e 7 dias de previsão diária
    - Fuso horário resolvido pela própria API (timezone=auto)
    """

    def __init__(self, http_client: IHttpClient, base_url: Optional[str] = None):
        self.http_client = http_client
        self.base_url = (base_url or API.OPENMETEO_BASE_URL).rstrip("/")

    @property
    def provider_name(self) -> str:
        return "OpenMeteo"

    @staticmethod
    def build_forecast_params(coordinates: Coordinates) -> dict:
        return {
            **coordinates.to_query_params(),
            'current': ','.join(Forecast.CURRENT_FIELDS),
            'daily': ','.join(Forecast.DAILY_FIELDS),
            'forecast_days': Forecast.FORECAST_DAYS,
            'timezone': Forecast.TIMEZONE
        }

    @tracer.wrap(resource="openmeteo.get_forecast")
    async def get_forecast(self, coordinates: Coordinates) -> WeatherForecast:
        """
        Busca condições atuais e previsão diária

        Flow:
        1. GET /forecast com campos current + daily
        2. Status != 2xx → UpstreamUnavailableException
        3. Mapper valida estrutura e normaliza
        """
        url = f"{self.base_url}/forecast"
        response = await self.http_client.get_json(url, params=self.build_forecast_params(coordinates))

        if not response.ok:
            logger.error(
                "Weather API error",
                status=response.status,
                reason=response.reason,
                coordinates=str(coordinates)
            )
            raise UpstreamUnavailableException(
                "Failed to fetch weather data",
                details={"status": response.status, "reason": response.reason}
            )

        try:
            return OpenMeteoDataMapper.map_forecast_response(response.body)
        except Exception:
            logger.error(
                "Weather API returned invalid data structure",
                coordinates=str(coordinates),
                exc_info=True
            )
            raise
