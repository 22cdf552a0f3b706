"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod

from domain.entities.forecast_response import WeatherForecast
from domain.value_objects.coordinates import Coordinates


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    A aplicação usa apenas Open-Meteo, mas mantemos a interface
    para facilitar troca futura de fonte.
    """

    @abstractmethod
    async def get_forecast(self, coordinates: Coordinates) -> WeatherForecast:
        """
        Busca condições atuais e previsão diária

        Args:
            coordinates: Coordenadas resolvidas pelo geocoding

        Returns:
            WeatherForecast normalizado

        Raises:
            UpstreamUnavailableException: Status diferente de sucesso
            InvalidWeatherDataException: Payload sem bloco `current`
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
