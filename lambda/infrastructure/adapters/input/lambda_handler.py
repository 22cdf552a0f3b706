"""
Input Adapter: Lambda Handler HTTP
GET /api/weather?city=<nome> → ResolveCityForecastUseCase (async) → JSON
"""
import asyncio

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.utilities.typing import LambdaContext

from application.use_cases.resolve_city_forecast_use_case import ResolveCityForecastUseCase
from domain.constants import Validation
from domain.exceptions import WeatherLookupException
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.output.providers.weather_provider_factory import get_weather_provider_factory
from shared.config.logger_config import get_logger
from shared.config.settings import CORS_ORIGIN

logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN, max_age=86400))

# Aplicados a toda resposta, inclusive erros e preflight sem Origin
CORS_HEADERS = {
    'Access-Control-Allow-Origin': CORS_ORIGIN,
    'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With',
    'Access-Control-Allow-Methods': 'GET,OPTIONS',
    'Access-Control-Max-Age': '86400'
}

# Loop persistente entre invocações: a sessão aiohttp pertence a ele
_event_loop = None

exception_service = ExceptionHandlerService(logger)
app.exception_handler(NotFoundError)(exception_service.handle_route_not_found)
app.exception_handler(WeatherLookupException)(exception_service.handle_weather_lookup_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def build_use_case() -> ResolveCityForecastUseCase:
    factory = get_weather_provider_factory()
    return ResolveCityForecastUseCase(
        geocoding_provider=factory.get_geocoding_provider(),
        weather_provider=factory.get_weather_provider()
    )


@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather?city=London

    200: {city, current, daily, weekly}; daily/weekly null sem bloco diário
    4xx/5xx: {error, code} via ExceptionHandlerService
    """
    city_name = app.current_event.get_query_string_value(Validation.CITY_QUERY_PARAM)
    forecast = run_async(build_use_case().execute(city_name))
    return forecast.to_api_response()


@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """AWS Lambda entry point (roteamento, CORS e erros via powertools)"""
    logger.info(
        "Lambda request received",
        route=event.get('path'),
        method=event.get('httpMethod'),
        query=event.get('queryStringParameters')
    )

    response = app.resolve(event, context)

    headers = response.get('headers') or {}
    headers.update(CORS_HEADERS)
    response['headers'] = headers

    logger.info("Lambda request completed", status_code=response.get('statusCode'))
    return response


def get_or_create_event_loop() -> asyncio.AbstractEventLoop:
    global _event_loop

    if _event_loop is None or _event_loop.is_closed():
        _event_loop = asyncio.new_event_loop()
        asyncio.set_event_loop(_event_loop)

    return _event_loop


def run_async(coro):
    """Executa a coroutine no loop persistente (sem fechá-lo)"""
    return get_or_create_event_loop().run_until_complete(coro)
