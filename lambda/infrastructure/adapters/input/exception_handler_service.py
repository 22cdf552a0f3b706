"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json

from aws_lambda_powertools.event_handler import Response

from domain.error_codes import ErrorCode
from domain.exceptions import WeatherLookupException
from shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    (status e mensagem fixos por ErrorCode)
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def build_error_response(error_code: ErrorCode) -> Response:
        return Response(
            status_code=error_code.status_code,
            content_type="application/json",
            body=json.dumps(error_code.to_body())
        )

    @staticmethod
    def handle_weather_lookup_error(ex: WeatherLookupException) -> Response:
        """Handle 4xx/5xx - Falhas classificadas da busca de clima"""
        if ex.status_code < 500:
            ExceptionHandlerService.logger.warning(
                ex.error_code.message,
                error=str(ex),
                code=ex.error_code.value,
                details=ex.details
            )
        else:
            ExceptionHandlerService.logger.error(
                ex.error_code.message,
                error=str(ex),
                code=ex.error_code.value,
                details=ex.details
            )
        return ExceptionHandlerService.build_error_response(ex.error_code)

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors (sem expor detalhes)"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return ExceptionHandlerService.build_error_response(ErrorCode.WEATHER_FETCH_FAILED)

    @staticmethod
    def handle_route_not_found(ex: Exception) -> Response:
        """Handle 404 - Rota inexistente (fora do contrato de ErrorCode)"""
        ExceptionHandlerService.logger.warning("Route not found")
        return Response(
            status_code=404,
            content_type="application/json",
            body=json.dumps({"error": "Not found"})
        )
