"""
Logger da aplicação (AWS Lambda Powertools, JSON estruturado)
Service name vem de DD_SERVICE para correlacionar com os traces do ddtrace
"""
from typing import Optional

from aws_lambda_powertools import Logger

from shared.config import settings


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Args:
        service_name: Sobrescreve settings.SERVICE_NAME
        child: Logger de módulo que herda handlers e chaves do logger principal
    """
    service = service_name or settings.SERVICE_NAME
    if child:
        return Logger(service=service, child=True)
    return Logger(service=service, level=settings.LOG_LEVEL)


logger = get_logger()
