"""
Testes de integração - Servidor local Flask (Flask → evento Lambda → handler)
"""
import pytest

import local_server


@pytest.fixture
def client():
    local_server.app.config['TESTING'] = True
    return local_server.app.test_client()


class TestLocalServer:

    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.get_json()['status'] == 'healthy'

    def test_weather_route_goes_through_lambda_handler(self, client, use_fake_upstream,
                                                      london_search_response, forecast_response):
        http_client = use_fake_upstream(search=london_search_response, forecast=forecast_response)

        response = client.get('/api/weather?city=London')

        assert response.status_code == 200
        body = response.get_json()
        assert body['city']['name'] == 'London'
        assert len(body['weekly']) == 7
        assert http_client.calls_to('/search')[0][1]['name'] == 'London'

    def test_weather_route_error_body(self, client, use_fake_upstream):
        use_fake_upstream()

        response = client.get('/api/weather?city=a')

        assert response.status_code == 400
        assert response.get_json() == {
            'error': 'City name must be at least 2 characters long',
            'code': 'CITY_NAME_TOO_SHORT'
        }

    def test_unknown_route(self, client):
        response = client.get('/api/unknown')

        assert response.status_code == 404
        assert 'GET /health' in response.get_json()['available_routes']

    def test_flask_to_lambda_event(self):
        with local_server.app.test_request_context('/api/weather?city=Paris'):
            event = local_server.flask_to_lambda_event(local_server.request)

        assert event['httpMethod'] == 'GET'
        assert event['path'] == '/api/weather'
        assert event['queryStringParameters'] == {'city': 'Paris'}
