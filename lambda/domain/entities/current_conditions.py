"""
Current Conditions Entity - Condições atuais do bloco `current` do Open-Meteo
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.weather_code import WeatherCode


@dataclass(frozen=True)
class CurrentConditions:
    """Condições meteorológicas no instante da observação"""
    temperature: Optional[float]  # °C
    wind_speed: Optional[float]  # km/h
    wind_direction: Optional[float]  # graus
    weather_code: Optional[int]
    is_day: bool
    time: Optional[str]  # ISO 8601 no fuso local da cidade
    surface_pressure: Optional[float]  # hPa
    visibility: Optional[float]  # metros
    uv_index: Optional[float]

    @property
    def weather_description(self) -> str:
        return WeatherCode.describe(self.weather_code)

    def to_api_response(self) -> dict:
        return {
            'temperature': self.temperature,
            'windSpeed': self.wind_speed,
            'windDirection': self.wind_direction,
            'weatherCode': self.weather_code,
            'weatherDescription': self.weather_description,
            'isDay': self.is_day,
            'time': self.time,
            'surfacePressure': self.surface_pressure,
            'visibility': self.visibility,
            'uvIndex': self.uv_index
        }
