"""
Testes Unitários - WeatherCode (tabela WMO → descrição)
"""
import pytest

from domain.value_objects.weather_code import WeatherCategory, WeatherCode

DOCUMENTED_TABLE = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Freezing drizzle",
    61: "Light rain",
    63: "Rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Freezing rain",
    71: "Light snow",
    73: "Snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Light showers",
    81: "Showers",
    82: "Heavy showers",
    85: "Light snow showers",
    86: "Snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Severe thunderstorm",
}


class TestWeatherCodeDescription:

    @pytest.mark.parametrize("code,expected", sorted(DOCUMENTED_TABLE.items()))
    def test_documented_codes(self, code, expected):
        assert WeatherCode.describe(code) == expected

    def test_enum_covers_exactly_the_documented_codes(self):
        assert {member.value for member in WeatherCode} == set(DOCUMENTED_TABLE)

    @pytest.mark.parametrize("code", [12, 100, -1, 4, 50, 98, None, "abc", 2.5, True])
    def test_unmapped_codes_fall_back_to_unknown(self, code):
        assert WeatherCode.describe(code) == "Unknown"

    def test_integral_float_is_accepted(self):
        """Open-Meteo às vezes serializa códigos como float"""
        assert WeatherCode.describe(3.0) == "Overcast"


class TestWeatherCodeCategory:

    @pytest.mark.parametrize("code,category", [
        (0, WeatherCategory.CLEAR),
        (1, WeatherCategory.PARTLY_CLOUDY),
        (2, WeatherCategory.PARTLY_CLOUDY),
        (3, WeatherCategory.OVERCAST),
        (48, WeatherCategory.FOG),
        (55, WeatherCategory.RAIN),
        (67, WeatherCategory.RAIN),
        (77, WeatherCategory.SNOW),
        (82, WeatherCategory.SHOWERS),
        (85, WeatherCategory.UNKNOWN),
        (86, WeatherCategory.UNKNOWN),
        (95, WeatherCategory.THUNDERSTORM),
        (99, WeatherCategory.THUNDERSTORM),
    ])
    def test_categories(self, code, category):
        assert WeatherCode.categorize(code) is category

    def test_unknown_code_category(self):
        assert WeatherCode.categorize(12) is WeatherCategory.UNKNOWN
