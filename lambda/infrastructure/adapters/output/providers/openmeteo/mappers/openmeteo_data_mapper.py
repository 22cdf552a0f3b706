"""
OpenMeteo Data Mapper - Transforma dados da API Open-Meteo para entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from typing import Any, Dict, List, Optional, Sequence

from domain.entities.city import City
from domain.entities.current_conditions import CurrentConditions
from domain.entities.daily_forecast import DailyForecast, DailySummary
from domain.entities.forecast_response import WeatherForecast
from domain.exceptions import InvalidWeatherDataException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _at(values: Optional[Sequence[Any]], index: int) -> Any:
    """Valor do array diário no índice, None se o array for curto/ausente"""
    if not values or index >= len(values):
        return None
    return values[index]


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_geocoding_result(result: Dict[str, Any]) -> City:
        """
        Mapeia um item de `results` da API de geocoding para City

        Args:
            result: Primeiro item de `results`
        """
        return City(
            id=result.get('id'),
            name=result['name'],
            country=result.get('country', ''),
            admin1=result.get('admin1'),
            latitude=result['latitude'],
            longitude=result['longitude']
        )

    @staticmethod
    def map_forecast_response(data: Dict[str, Any]) -> WeatherForecast:
        """
        Mapeia resposta /forecast (current + daily) para WeatherForecast

        Args:
            data: Resposta raw da API Open-Meteo

        Raises:
            InvalidWeatherDataException: Se o bloco `current` estiver ausente
        """
        current = data.get('current') if isinstance(data, dict) else None
        if not isinstance(current, dict):
            raise InvalidWeatherDataException(
                details={"keys": sorted(data.keys()) if isinstance(data, dict) else None}
            )

        daily = data.get('daily')
        return WeatherForecast(
            current=OpenMeteoDataMapper.map_current(current),
            daily=OpenMeteoDataMapper.map_daily_summary(daily) if daily else None,
            weekly=OpenMeteoDataMapper.map_weekly(daily) if daily else None
        )

    @staticmethod
    def map_current(current: Dict[str, Any]) -> CurrentConditions:
        return CurrentConditions(
            temperature=current.get('temperature_2m'),
            wind_speed=current.get('wind_speed_10m'),
            wind_direction=current.get('wind_direction_10m'),
            weather_code=current.get('weather_code'),
            is_day=current.get('is_day') == 1,
            time=current.get('time'),
            surface_pressure=current.get('surface_pressure'),
            visibility=current.get('visibility'),
            uv_index=current.get('uv_index')
        )

    @staticmethod
    def map_daily_summary(daily: Dict[str, Any]) -> DailySummary:
        """Resumo de hoje: índice 0 de cada array"""
        return DailySummary(
            max_temp=_at(daily.get('temperature_2m_max'), 0),
            min_temp=_at(daily.get('temperature_2m_min'), 0),
            max_humidity=_at(daily.get('relative_humidity_2m_max'), 0),
            max_wind_speed=_at(daily.get('wind_speed_10m_max'), 0),
            weather_code=_at(daily.get('weathercode'), 0),
            uv_index_max=_at(daily.get('uv_index_max'), 0)
        )

    @staticmethod
    def map_weekly(daily: Dict[str, Any]) -> List[DailyForecast]:
        """
        Previsão semanal: um item por data de `time`, arrays combinados por índice
        """
        dates = daily.get('time') or []
        temp_max = daily.get('temperature_2m_max')
        temp_min = daily.get('temperature_2m_min')
        humidity_max = daily.get('relative_humidity_2m_max')
        wind_speed_max = daily.get('wind_speed_10m_max')
        weather_codes = daily.get('weathercode')

        forecasts = [
            DailyForecast(
                date=date,
                max_temp=_at(temp_max, i),
                min_temp=_at(temp_min, i),
                max_humidity=_at(humidity_max, i),
                max_wind_speed=_at(wind_speed_max, i),
                weather_code=_at(weather_codes, i)
            )
            for i, date in enumerate(dates)
        ]

        logger.debug("Weekly forecast mapped", days=len(forecasts))
        return forecasts
