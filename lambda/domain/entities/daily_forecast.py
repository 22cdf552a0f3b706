"""
Daily Forecast Entities - Resumo do dia e previsão diária da semana
Fonte: bloco `daily` do Open-Meteo (arrays paralelos, um índice por dia)
"""
from dataclasses import dataclass
from typing import Optional

from domain.value_objects.weather_code import WeatherCode


@dataclass(frozen=True)
class DailySummary:
    """
    Resumo de hoje (índice 0 de cada array diário)
    """
    max_temp: Optional[float]  # °C
    min_temp: Optional[float]  # °C
    max_humidity: Optional[float]  # %
    max_wind_speed: Optional[float]  # km/h
    weather_code: Optional[int]
    uv_index_max: Optional[float] = None

    def to_api_response(self) -> dict:
        return {
            'maxTemp': self.max_temp,
            'minTemp': self.min_temp,
            'maxHumidity': self.max_humidity,
            'maxWindSpeed': self.max_wind_speed,
            'weatherCode': self.weather_code,
            'uvIndexMax': self.uv_index_max
        }


@dataclass(frozen=True)
class DailyForecast:
    """
    Um dia da previsão semanal (índice 0 = hoje)
    """
    date: str  # Formato YYYY-MM-DD
    max_temp: Optional[float]
    min_temp: Optional[float]
    max_humidity: Optional[float]
    max_wind_speed: Optional[float]
    weather_code: Optional[int]

    @property
    def weather_description(self) -> str:
        return WeatherCode.describe(self.weather_code)

    def to_api_response(self) -> dict:
        return {
            'date': self.date,
            'maxTemp': self.max_temp,
            'minTemp': self.min_temp,
            'maxHumidity': self.max_humidity,
            'maxWindSpeed': self.max_wind_speed,
            'weatherCode': self.weather_code,
            'weatherDescription': self.weather_description
        }
