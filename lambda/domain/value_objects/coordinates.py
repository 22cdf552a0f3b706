"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """
    Coordenadas resolvidas pelo geocoding

    Imutável e auto-validado: valores fora da faixa indicam resposta
    corrompida do provider.
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Invalid latitude: {self.latitude}. Must be between -90 and 90 degrees."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Invalid longitude: {self.longitude}. Must be between -180 and 180 degrees."
            )

    def to_query_params(self) -> dict:
        """Parâmetros latitude/longitude para a API de previsão"""
        return {'latitude': self.latitude, 'longitude': self.longitude}

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"
