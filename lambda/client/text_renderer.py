"""
Text Renderer - Desenha o WeatherViewState em texto puro (terminal)
"""
from datetime import date
from typing import Any, List, Optional

from client.view_state import ViewStatus, WeatherViewState

PLACEHOLDER = '--'


def _fmt(value: Any, unit: str = '') -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value}{unit}"


def _day_label(iso_date: Optional[str], index: int) -> str:
    if index == 0:
        return 'Today'
    try:
        return date.fromisoformat(iso_date).strftime('%a %d')
    except (TypeError, ValueError):
        return iso_date or PLACEHOLDER


def render_text(state: WeatherViewState) -> str:
    """Layout da página: cabeçalho, atuais, resumo de hoje, 7 dias (ou mensagem)"""
    if state.status is ViewStatus.IDLE:
        return state.message or ''

    if state.status is ViewStatus.LOADING:
        return f"Loading weather for {state.city_query}..."

    if state.status is ViewStatus.ERROR:
        lines = [state.message or '']
        if state.can_retry:
            lines.append('Try again or search a different city.')
        if state.suggestions:
            lines.append('Try one of these popular cities: ' + ', '.join(state.suggestions))
        return '\n'.join(lines)

    data = state.data or {}
    city = data.get('city') or {}
    current = data.get('current') or {}
    daily = data.get('daily') or {}

    location = ', '.join(part for part in (city.get('name'), city.get('admin1'), city.get('country')) if part)
    lines: List[str] = [
        location,
        f"{_fmt(current.get('temperature'), '°C')}  {current.get('weatherDescription', 'Unknown')}"
        f"  ({'day' if current.get('isDay') else 'night'})",
        f"Wind {_fmt(current.get('windSpeed'), ' km/h')} from {_fmt(current.get('windDirection'), '°')}"
        f" | Pressure {_fmt(current.get('surfacePressure'), ' hPa')}"
        f" | Visibility {_fmt(current.get('visibility'), ' m')}"
        f" | UV {_fmt(current.get('uvIndex'))}",
    ]

    if state.status is ViewStatus.EMPTY:
        lines.append(state.message or '')
        return '\n'.join(lines)

    lines.append(
        f"Today: max {_fmt(daily.get('maxTemp'), '°C')} min {_fmt(daily.get('minTemp'), '°C')}"
        f" | Humidity {_fmt(daily.get('maxHumidity'), '%')}"
        f" | Wind {_fmt(daily.get('maxWindSpeed'), ' km/h')}"
    )
    lines.append('7-Day Forecast')
    for index, day in enumerate(state.weekly):
        lines.append(
            f"  {_day_label(day.get('date'), index):<10}"
            f" {_fmt(day.get('maxTemp'), '°')} / {_fmt(day.get('minTemp'), '°')}"
            f"  {day.get('weatherDescription', 'Unknown')}"
        )
    return '\n'.join(lines)
