#!/usr/bin/env python3
"""
Servidor Local para Desenvolvimento
Flask na frente do mesmo lambda_handler usado na AWS (evento API Gateway REST)

Como usar:
    cd lambda
    python local_server.py

Endpoints:
    GET  http://localhost:8000/api/weather?city=London
    GET  http://localhost:8000/health
"""
import json
import os
import uuid
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_cors import CORS

from lambda_function import lambda_handler
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger()

app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": settings.CORS_ORIGIN}})

ROUTES = ['GET /api/weather?city={name}', 'GET /health']


class LocalLambdaContext:
    """Contexto mínimo exigido por logger.inject_lambda_context"""
    function_name = "city-weather-lookup-local"
    function_version = "$LATEST"
    invoked_function_arn = "arn:aws:lambda:local:000000000000:function:city-weather-lookup-local"
    memory_limit_in_mb = "512"
    log_group_name = "/aws/lambda/city-weather-lookup-local"
    log_stream_name = "local"

    def __init__(self):
        self.aws_request_id = f"local-{uuid.uuid4()}"

    def get_remaining_time_in_millis(self):
        return 300000


def flask_to_lambda_event(flask_request):
    """Requisição Flask → evento API Gateway (proxy REST)"""
    return {
        'resource': flask_request.path,
        'path': flask_request.path,
        'httpMethod': flask_request.method,
        'headers': dict(flask_request.headers.items()),
        'queryStringParameters': flask_request.args.to_dict() or None,
        'pathParameters': None,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'stage': 'local',
            'httpMethod': flask_request.method,
            'path': flask_request.path,
            'identity': {'sourceIp': flask_request.remote_addr}
        }
    }


def lambda_to_flask_response(lambda_response):
    """Resposta do handler → (body, status, headers) do Flask"""
    body = lambda_response.get('body') or ''
    try:
        payload = json.loads(body)
    except (TypeError, ValueError):
        payload = None

    status = lambda_response.get('statusCode', 200)
    headers = lambda_response.get('headers') or {}
    if payload is None:
        return body, status, headers
    return jsonify(payload), status, headers


@app.route('/api/weather', methods=['GET', 'OPTIONS'])
def weather():
    if request.method == 'OPTIONS':
        return '', 204

    response = lambda_handler(flask_to_lambda_event(request), LocalLambdaContext())
    return lambda_to_flask_response(response)


@app.route('/health', methods=['GET'])
def health():
    return jsonify({
        'status': 'healthy',
        'service': f"{settings.SERVICE_NAME}-local",
        'timestamp': datetime.now(timezone.utc).isoformat()
    })


@app.errorhandler(404)
def route_not_found(error):
    return jsonify({
        'error': 'Not Found',
        'message': f"Route {request.path} not found",
        'available_routes': ROUTES
    }), 404


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8000))
    host = os.environ.get('HOST', '0.0.0.0')

    logger.info("Local server starting", url=f"http://{host}:{port}", routes=ROUTES)
    app.run(host=host, port=port, debug=True, use_reloader=True)
