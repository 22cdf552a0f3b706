"""
Unit tests for settings.py
Tests configuration loading and environment variables
"""
import importlib
import os
from unittest.mock import patch

from shared.config import settings
from shared.config.logger_config import get_logger


class TestSettings:
    """Tests for Settings configuration"""

    def test_settings_from_environment(self):
        """Test settings loaded from environment variables"""
        env = {
            'GEOCODING_BASE_URL': 'https://geo.example.com/v1',
            'OPENMETEO_BASE_URL': 'https://forecast.example.com/v1',
            'HTTP_TIMEOUT_TOTAL': '3',
            'CORS_ORIGIN': 'https://test.example.com',
            'DD_SERVICE': 'weather-test'
        }
        try:
            with patch.dict(os.environ, env):
                importlib.reload(settings)

                assert settings.GEOCODING_BASE_URL == 'https://geo.example.com/v1'
                assert settings.OPENMETEO_BASE_URL == 'https://forecast.example.com/v1'
                assert settings.HTTP_TIMEOUT_TOTAL == 3
                assert settings.CORS_ORIGIN == 'https://test.example.com'
                assert settings.SERVICE_NAME == 'weather-test'
        finally:
            importlib.reload(settings)

    def test_settings_defaults(self):
        """Test default values when nothing is configured"""
        keys = ('GEOCODING_BASE_URL', 'OPENMETEO_BASE_URL', 'HTTP_TIMEOUT_TOTAL', 'CORS_ORIGIN')
        clean_env = {key: value for key, value in os.environ.items() if key not in keys}
        try:
            with patch.dict(os.environ, clean_env, clear=True):
                importlib.reload(settings)

                assert settings.GEOCODING_BASE_URL == 'https://geocoding-api.open-meteo.com/v1'
                assert settings.OPENMETEO_BASE_URL == 'https://api.open-meteo.com/v1'
                assert settings.HTTP_TIMEOUT_TOTAL == 8
                assert settings.CORS_ORIGIN == '*'
        finally:
            importlib.reload(settings)

    def test_get_logger_uses_service_name(self):
        logger = get_logger(service_name='weather-test')

        assert logger.service == 'weather-test'

    def test_fractional_http_timeout(self):
        try:
            with patch.dict(os.environ, {'HTTP_TIMEOUT_TOTAL': '8.5'}):
                importlib.reload(settings)

                assert settings.HTTP_TIMEOUT_TOTAL == 8.5
        finally:
            importlib.reload(settings)
