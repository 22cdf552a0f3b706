"""
Async Use Case: Resolve City Forecast
Geocoding → previsão → resposta unificada (duas chamadas sequenciais)
"""
from typing import Optional

from ddtrace import tracer

from application.ports.input.resolve_city_forecast_port import IResolveCityForecastUseCase
from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.weather_provider_port import IWeatherProvider
from domain.entities.forecast_response import ForecastResponse
from shared.config.logger_config import get_logger
from shared.utils.validators import CityNameValidator

logger = get_logger(child=True)


class ResolveCityForecastUseCase(IResolveCityForecastUseCase):
    """Async use case: get current weather and weekly forecast by city name"""

    def __init__(
        self,
        geocoding_provider: IGeocodingProvider,
        weather_provider: IWeatherProvider
    ):
        self.geocoding_provider = geocoding_provider
        self.weather_provider = weather_provider

    @tracer.wrap(resource="use_case.resolve_city_forecast")
    async def execute(self, city_name: Optional[str]) -> ForecastResponse:
        """
        Execute use case asynchronously

        Args:
            city_name: Raw city name

        Returns:
            ForecastResponse entity

        Raises:
            MissingCityParameterException: If city_name is absent/empty
            CityNameTooShortException: If trimmed name has fewer than 2 chars
            CityNotFoundException: If geocoding returns no match
            UpstreamUnavailableException: If a provider fails
            UpstreamTimeoutException: If a provider times out
            InvalidWeatherDataException: If the forecast has no current block
        """
        # Validação antes de qualquer I/O
        name = CityNameValidator.validate(city_name)

        # A previsão depende das coordenadas: chamadas sequenciais
        city = await self.geocoding_provider.search_city(name)
        forecast = await self.weather_provider.get_forecast(city.coordinates)

        response = ForecastResponse.from_forecast(city, forecast)

        logger.info(
            "Weather fetched successfully",
            city=city.name,
            country=city.country,
            provider=self.weather_provider.provider_name,
            has_forecast=response.has_forecast
        )

        return response
