"""Mappers Open-Meteo → entities de domínio"""
from .openmeteo_data_mapper import OpenMeteoDataMapper

__all__ = ['OpenMeteoDataMapper']
