"""
Fixtures compartilhadas para testes de integração
Handler completo (powertools + use case + providers) com HTTP fake
"""
import importlib
from typing import Any, Dict, Optional

import pytest

from infrastructure.adapters.output.providers.weather_provider_factory import WeatherProviderFactory


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'city-weather-lookup'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:city-weather-lookup'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/city-weather-lookup'
        self.log_stream_name = '2025/11/20/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    query_parameters: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway (REST, proxy)

    Args:
        method: HTTP method (GET, OPTIONS)
        path: Request path (/api/weather)
        query_parameters: Query string params dict
        headers: Headers extras
    """
    return {
        'resource': path,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            **(headers or {})
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'test',
            'identity': {'sourceIp': '127.0.0.1'}
        }
    }


@pytest.fixture
def weather_event():
    """
    Builder para evento GET /api/weather?city=...

    Usage:
        event = weather_event('London')
        event = weather_event(None)  # sem query string
    """
    def _build(city: Optional[str]) -> Dict[str, Any]:
        query = {'city': city} if city is not None else None
        return build_api_gateway_event('GET', '/api/weather', query_parameters=query)

    return _build


@pytest.fixture
def handler_module():
    return importlib.import_module('infrastructure.adapters.input.lambda_handler')


@pytest.fixture
def use_fake_upstream(monkeypatch, handler_module, make_http_client):
    """
    Faz o handler usar providers reais sobre um FakeHttpClient

    Usage:
        http_client = use_fake_upstream(search=..., forecast=...)
    """
    def _install(search: Any = None, forecast: Any = None):
        http_client = make_http_client(search=search, forecast=forecast)
        factory = WeatherProviderFactory(http_client=http_client)
        monkeypatch.setattr(handler_module, 'get_weather_provider_factory', lambda: factory)
        return http_client

    return _install
