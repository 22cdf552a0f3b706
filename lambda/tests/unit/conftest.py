"""
Configurações e fixtures compartilhadas para testes unitários
"""
import pytest

from domain.entities.city import City
from domain.entities.current_conditions import CurrentConditions


@pytest.fixture
def make_city():
    """
    Factory fixture para criar City com valores padrão (London)

    Usage:
        def test_something(make_city):
            city = make_city(name='Paris')
    """
    def _make(
        id: int = 2643743,
        name: str = 'London',
        country: str = 'United Kingdom',
        latitude: float = 51.51,
        longitude: float = -0.13,
        admin1: str = 'England'
    ) -> City:
        return City(
            id=id,
            name=name,
            country=country,
            latitude=latitude,
            longitude=longitude,
            admin1=admin1
        )

    return _make


@pytest.fixture
def make_current_conditions():
    """Factory fixture para CurrentConditions"""
    def _make(
        temperature: float = 12.3,
        weather_code: int = 0,
        is_day: bool = True
    ) -> CurrentConditions:
        return CurrentConditions(
            temperature=temperature,
            wind_speed=10.1,
            wind_direction=250,
            weather_code=weather_code,
            is_day=is_day,
            time='2025-11-20T14:00',
            surface_pressure=1012.4,
            visibility=24140.0,
            uv_index=1.2
        )

    return _make
