"""
Input Port: Interface para resolver nome de cidade em previsão do tempo
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.entities.forecast_response import ForecastResponse


class IResolveCityForecastUseCase(ABC):
    """Interface para caso de uso de buscar clima pelo nome da cidade"""

    @abstractmethod
    async def execute(self, city_name: Optional[str]) -> ForecastResponse:
        """
        Valida o nome, resolve coordenadas e busca a previsão

        Args:
            city_name: Nome digitado pelo usuário (sem tratamento)

        Returns:
            ForecastResponse com cidade, condições atuais e previsão semanal

        Raises:
            WeatherLookupException: Subclasse correspondente à falha
        """
        pass
