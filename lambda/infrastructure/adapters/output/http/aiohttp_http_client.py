"""
Aiohttp HTTP Client - Implementação de IHttpClient sobre a sessão compartilhada
Traduz erros de transporte em exceções de domínio
"""
import asyncio
from typing import Any, Dict, Optional

import aiohttp

from application.ports.output.http_client_port import HttpResponse, IHttpClient
from domain.exceptions import UpstreamTimeoutException, UpstreamUnavailableException
from infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpHttpClient(IHttpClient):
    """Cliente HTTP real (aiohttp) usado pelos providers Open-Meteo"""

    def __init__(self, session_manager: Optional[AiohttpSessionManager] = None):
        self.session_manager = session_manager or get_aiohttp_session_manager()

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> HttpResponse:
        session = await self.session_manager.get_session()
        try:
            async with session.get(url, params=params) as response:
                if not (200 <= response.status < 300):
                    return HttpResponse(status=response.status, reason=response.reason or "")
                body = await response.json(content_type=None)
                return HttpResponse(status=response.status, reason=response.reason or "", body=body)

        except asyncio.TimeoutError as ex:
            logger.error("Upstream request timed out", url=url)
            raise UpstreamTimeoutException(details={"url": url}) from ex

        except aiohttp.ClientError as ex:
            logger.error("Upstream request failed", url=url, error=str(ex))
            raise UpstreamUnavailableException(details={"url": url, "reason": str(ex)}) from ex


_http_client_instance: Optional[AiohttpHttpClient] = None


def get_http_client() -> AiohttpHttpClient:
    """Retorna instância singleton do cliente HTTP"""
    global _http_client_instance

    if _http_client_instance is None:
        _http_client_instance = AiohttpHttpClient()

    return _http_client_instance
