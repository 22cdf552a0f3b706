"""Application Use Cases - 100% ASYNC com providers desacoplados"""
from .resolve_city_forecast_use_case import ResolveCityForecastUseCase

__all__ = ['ResolveCityForecastUseCase']
