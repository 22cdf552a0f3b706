"""
City Entity - Localização resolvida pelo geocoding (primeiro resultado da busca)
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class City:
    """Entidade Cidade"""
    id: Optional[int]  # ID atribuído pelo Open-Meteo
    name: str
    country: str
    latitude: float
    longitude: float
    admin1: Optional[str] = None  # Estado/região

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API"""
        return {
            'id': self.id,
            'name': self.name,
            'country': self.country,
            'admin1': self.admin1 or '',
            'latitude': self.latitude,
            'longitude': self.longitude
        }
