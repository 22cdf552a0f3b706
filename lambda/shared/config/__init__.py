"""Shared configuration"""
from .settings import CORS_ORIGIN, SERVICE_NAME
from .logger_config import get_logger, logger

__all__ = ['CORS_ORIGIN', 'SERVICE_NAME', 'get_logger', 'logger']
