"""
Configurações centralizadas da aplicação
"""
import os

# APIs Open-Meteo (não requerem chave)
GEOCODING_BASE_URL = os.environ.get('GEOCODING_BASE_URL', 'https://geocoding-api.open-meteo.com/v1')
OPENMETEO_BASE_URL = os.environ.get('OPENMETEO_BASE_URL', 'https://api.open-meteo.com/v1')

# Timeout total das chamadas externas (segundos)
HTTP_TIMEOUT_TOTAL = float(os.environ.get('HTTP_TIMEOUT_TOTAL', '8'))

# Logging
SERVICE_NAME = os.environ.get('DD_SERVICE', 'city-weather-lookup')

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')

# Cliente (endpoint consumido pela camada de apresentação)
WEATHER_API_URL = os.environ.get('WEATHER_API_URL', 'http://localhost:8000/api/weather')

# Nível do logger principal (child loggers herdam)
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
