"""
Forecast Response Entity - Payload unificado devolvido pela rota /api/weather
Agrega cidade, condições atuais, resumo do dia e previsão semanal
"""
from dataclasses import dataclass
from typing import List, Optional

from domain.entities.city import City
from domain.entities.current_conditions import CurrentConditions
from domain.entities.daily_forecast import DailyForecast, DailySummary


@dataclass(frozen=True)
class WeatherForecast:
    """Resultado normalizado da chamada /forecast (sem a identidade da cidade)"""
    current: CurrentConditions
    daily: Optional[DailySummary] = None
    weekly: Optional[List[DailyForecast]] = None


@dataclass(frozen=True)
class ForecastResponse:
    """
    Resposta completa para uma cidade

    `daily` e `weekly` são None quando o provider não devolve o bloco
    diário; na API viram `null` explícito (nunca são omitidos) para que o
    cliente diferencie "sem previsão" de "ainda carregando".
    """
    city: City
    current: CurrentConditions
    daily: Optional[DailySummary] = None
    weekly: Optional[List[DailyForecast]] = None

    @classmethod
    def from_forecast(cls, city: City, forecast: WeatherForecast) -> 'ForecastResponse':
        return cls(
            city=city,
            current=forecast.current,
            daily=forecast.daily,
            weekly=forecast.weekly
        )

    @property
    def has_forecast(self) -> bool:
        return self.daily is not None and self.weekly is not None

    def to_api_response(self) -> dict:
        """Converte para formato de resposta da API (camelCase)"""
        return {
            'city': self.city.to_api_response(),
            'current': self.current.to_api_response(),
            'daily': self.daily.to_api_response() if self.daily is not None else None,
            'weekly': [day.to_api_response() for day in self.weekly] if self.weekly is not None else None
        }
