"""
Output Port: Geocoding Provider
Contrato para resolver nome de cidade em coordenadas
"""
from abc import ABC, abstractmethod

from domain.entities.city import City


class IGeocodingProvider(ABC):
    """Interface para provedores de geocoding"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex.: OpenMeteoGeocoding)"""
        raise NotImplementedError

    @abstractmethod
    async def search_city(self, name: str) -> City:
        """
        Busca a cidade pelo nome e devolve o primeiro resultado

        Args:
            name: Nome já validado e sem espaços nas pontas

        Returns:
            City com coordenadas

        Raises:
            CityNotFoundException: Nenhum resultado
            UpstreamUnavailableException: Status diferente de sucesso
        """
        raise NotImplementedError
