"""
Value Object para códigos meteorológicos WMO (Open-Meteo)
Enumeração fechada: códigos fora da tabela caem em UNKNOWN
"""
from enum import Enum, IntEnum
from typing import Optional


class WeatherCategory(str, Enum):
    """Agrupamento visual dos códigos (ícone e gradiente na interface)"""
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    SHOWERS = "showers"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"


class WeatherCode(IntEnum):
    """
    Códigos WMO retornados pelo Open-Meteo

    Example:
        >>> WeatherCode.describe(0)
        'Clear sky'
        >>> WeatherCode.describe(12)
        'Unknown'
    """
    CLEAR_SKY = 0
    MAINLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    OVERCAST = 3
    FOG = 45
    DEPOSITING_RIME_FOG = 48
    LIGHT_DRIZZLE = 51
    DRIZZLE = 53
    DENSE_DRIZZLE = 55
    LIGHT_FREEZING_DRIZZLE = 56
    FREEZING_DRIZZLE = 57
    LIGHT_RAIN = 61
    RAIN = 63
    HEAVY_RAIN = 65
    LIGHT_FREEZING_RAIN = 66
    FREEZING_RAIN = 67
    LIGHT_SNOW = 71
    SNOW = 73
    HEAVY_SNOW = 75
    SNOW_GRAINS = 77
    LIGHT_SHOWERS = 80
    SHOWERS = 81
    HEAVY_SHOWERS = 82
    LIGHT_SNOW_SHOWERS = 85
    SNOW_SHOWERS = 86
    THUNDERSTORM = 95
    THUNDERSTORM_WITH_HAIL = 96
    SEVERE_THUNDERSTORM = 99

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def category(self) -> WeatherCategory:
        if self is WeatherCode.CLEAR_SKY:
            return WeatherCategory.CLEAR
        if self in (WeatherCode.MAINLY_CLEAR, WeatherCode.PARTLY_CLOUDY):
            return WeatherCategory.PARTLY_CLOUDY
        if self is WeatherCode.OVERCAST:
            return WeatherCategory.OVERCAST
        if self in (WeatherCode.FOG, WeatherCode.DEPOSITING_RIME_FOG):
            return WeatherCategory.FOG
        if 51 <= self <= 67:
            return WeatherCategory.RAIN
        if 71 <= self <= 77:
            return WeatherCategory.SNOW
        if 80 <= self <= 82:
            return WeatherCategory.SHOWERS
        if self >= 95:
            return WeatherCategory.THUNDERSTORM
        # Pancadas de neve (85, 86) ficam com a aparência padrão
        return WeatherCategory.UNKNOWN

    @classmethod
    def parse(cls, code) -> Optional['WeatherCode']:
        """Converte valor bruto da API; None se ausente ou fora da tabela"""
        if code is None or isinstance(code, bool):
            return None
        if isinstance(code, float) and not code.is_integer():
            return None
        try:
            return cls(int(code))
        except (TypeError, ValueError):
            return None

    @classmethod
    def describe(cls, code) -> str:
        """Descrição em inglês do código, "Unknown" para códigos não mapeados"""
        parsed = cls.parse(code)
        return parsed.description if parsed is not None else UNKNOWN_DESCRIPTION

    @classmethod
    def categorize(cls, code) -> WeatherCategory:
        parsed = cls.parse(code)
        return parsed.category if parsed is not None else WeatherCategory.UNKNOWN


UNKNOWN_DESCRIPTION = "Unknown"

_DESCRIPTIONS = {
    WeatherCode.CLEAR_SKY: "Clear sky",
    WeatherCode.MAINLY_CLEAR: "Mainly clear",
    WeatherCode.PARTLY_CLOUDY: "Partly cloudy",
    WeatherCode.OVERCAST: "Overcast",
    WeatherCode.FOG: "Fog",
    WeatherCode.DEPOSITING_RIME_FOG: "Fog",
    WeatherCode.LIGHT_DRIZZLE: "Light drizzle",
    WeatherCode.DRIZZLE: "Drizzle",
    WeatherCode.DENSE_DRIZZLE: "Dense drizzle",
    WeatherCode.LIGHT_FREEZING_DRIZZLE: "Light freezing drizzle",
    WeatherCode.FREEZING_DRIZZLE: "Freezing drizzle",
    WeatherCode.LIGHT_RAIN: "Light rain",
    WeatherCode.RAIN: "Rain",
    WeatherCode.HEAVY_RAIN: "Heavy rain",
    WeatherCode.LIGHT_FREEZING_RAIN: "Light freezing rain",
    WeatherCode.FREEZING_RAIN: "Freezing rain",
    WeatherCode.LIGHT_SNOW: "Light snow",
    WeatherCode.SNOW: "Snow",
    WeatherCode.HEAVY_SNOW: "Heavy snow",
    WeatherCode.SNOW_GRAINS: "Snow grains",
    WeatherCode.LIGHT_SHOWERS: "Light showers",
    WeatherCode.SHOWERS: "Showers",
    WeatherCode.HEAVY_SHOWERS: "Heavy showers",
    WeatherCode.LIGHT_SNOW_SHOWERS: "Light snow showers",
    WeatherCode.SNOW_SHOWERS: "Snow showers",
    WeatherCode.THUNDERSTORM: "Thunderstorm",
    WeatherCode.THUNDERSTORM_WITH_HAIL: "Thunderstorm",
    WeatherCode.SEVERE_THUNDERSTORM: "Severe thunderstorm",
}
