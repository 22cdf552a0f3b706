#!/usr/bin/env python3
"""
Weather Lookup CLI - busca o clima de uma cidade na API e imprime no terminal

Usage:
    weather-lookup London
    weather-lookup "New York" --api-url http://localhost:8000/api/weather
"""
import argparse
import asyncio
import sys
from typing import Optional

from client.view_state import ViewStatus, build_view_state
from client.text_renderer import render_text
from client.weather_api_client import WeatherApiClient, WeatherApiError, validate_search_query


async def lookup(city: str, api_url: Optional[str] = None) -> int:
    """Executa uma busca e imprime o resultado; retorna o exit code"""
    try:
        query = validate_search_query(city)
    except WeatherApiError as ex:
        print(render_text(build_view_state(city, error=ex)))
        return 2

    state = build_view_state(query)
    if query is None:
        print(render_text(state))
        return 2

    print(render_text(build_view_state(query, loading=True)))

    client = WeatherApiClient(base_url=api_url)
    try:
        data = await client.get_weather(query)
        state = build_view_state(query, data=data)
    except WeatherApiError as ex:
        state = build_view_state(query, error=ex)
    finally:
        await client.close()

    print(render_text(state))
    return 1 if state.status is ViewStatus.ERROR else 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Current weather and 7-day forecast for a city')
    parser.add_argument('city', help='City name (at least 2 characters)')
    parser.add_argument('--api-url', type=str, default=None, help='Weather API endpoint (default: WEATHER_API_URL)')

    args = parser.parse_args(argv)
    return asyncio.run(lookup(args.city, api_url=args.api_url))


if __name__ == '__main__':
    sys.exit(main())
