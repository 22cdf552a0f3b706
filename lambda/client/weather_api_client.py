"""
Weather API Client - Camada de busca do cliente para GET /api/weather
Chave = nome da cidade sem espaços nas pontas; 1 retry automático;
resultados reaproveitados por 10 minutos (staleness window)
"""
import asyncio
import time
from typing import Any, Callable, Dict, Optional, Tuple

import aiohttp
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from domain.constants import Client, Validation
from domain.error_codes import ErrorCode
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class WeatherApiError(Exception):
    """Erro devolvido pela API (ou validação local) com o ErrorCode compartilhado"""

    def __init__(self, message: str, code: Optional[ErrorCode] = None, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status

    @classmethod
    def from_error_body(cls, body: Any, status: int) -> 'WeatherApiError':
        """Monta o erro a partir de {"error": ..., "code": ...}"""
        body = body if isinstance(body, dict) else {}
        message = body.get('error') or ErrorCode.WEATHER_FETCH_FAILED.message

        try:
            code = ErrorCode(body.get('code'))
        except ValueError:
            code = ErrorCode.from_message(message)

        return cls(message, code=code, status=status)


class NetworkError(WeatherApiError):
    """A API não pôde ser alcançada (falha de transporte no cliente)"""


class SearchValidationError(WeatherApiError):
    """Consulta rejeitada localmente, antes de qualquer requisição"""


def validate_search_query(query: Optional[str]) -> Optional[str]:
    """
    Validação do formulário de busca

    Returns:
        Nome sem espaços nas pontas, ou None se não há o que buscar

    Raises:
        SearchValidationError: Nome com menos de 2 caracteres
    """
    trimmed = (query or '').strip()
    if not trimmed:
        return None
    if len(trimmed) < Validation.MIN_CITY_NAME_LENGTH:
        code = ErrorCode.CITY_NAME_TOO_SHORT
        raise SearchValidationError(code.message, code=code)
    return trimmed


class WeatherApiClient:
    """
    Cliente async da rota /api/weather

    - Consultas idênticas dentro da janela de staleness não geram requisição
    - Requisições simultâneas para a mesma chave compartilham a mesma chamada
    - Falhas são repetidas uma vez (a requisição inteira)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session_manager: Optional[AiohttpSessionManager] = None,
        stale_time_seconds: float = Client.STALE_TIME_SECONDS,
        retry_attempts: int = Client.RETRY_ATTEMPTS,
        retry_delay_seconds: float = Client.RETRY_DELAY_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.base_url = base_url or settings.WEATHER_API_URL
        self.session_manager = session_manager or AiohttpSessionManager()
        self.stale_time_seconds = stale_time_seconds
        self.retry_attempts = retry_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self._clock = clock

        self._results: Dict[str, Tuple[float, Dict[str, Any]]] = {}
        self._in_flight: Dict[str, asyncio.Future] = {}

    async def get_weather(self, city: Optional[str]) -> Optional[Dict[str, Any]]:
        """
        Busca o payload de clima da cidade

        Returns:
            Payload da API, ou None quando a chave é vazia (consulta desabilitada)

        Raises:
            WeatherApiError: Resposta de erro da API (após o retry)
            NetworkError: API inalcançável (após o retry)
        """
        key = (city or '').strip()
        if not key:
            return None

        fresh = self._get_fresh(key)
        if fresh is not None:
            logger.debug("Serving weather from staleness window", city=key)
            return fresh

        task = self._in_flight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_with_retry(key))
            task.add_done_callback(lambda done: self._on_fetch_done(key, done))
            self._in_flight[key] = task

        # Cancelar um chamador não cancela a busca compartilhada
        return await asyncio.shield(task)

    def invalidate(self, city: Optional[str] = None) -> None:
        """Descarta resultados guardados (todos, ou só os da cidade)"""
        if city is None:
            self._results.clear()
        else:
            self._results.pop(city.strip(), None)

    async def close(self) -> None:
        await self.session_manager.cleanup()

    def _get_fresh(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._results.get(key)
        if entry is None:
            return None
        fetched_at, data = entry
        if self._is_stale(fetched_at):
            self._results.pop(key, None)
            return None
        return data

    def _is_stale(self, fetched_at: float) -> bool:
        return self._clock() - fetched_at >= self.stale_time_seconds

    def _on_fetch_done(self, key: str, task: asyncio.Future) -> None:
        """Guarda o resultado da busca compartilhada, qualquer que seja o chamador restante"""
        if self._in_flight.get(key) is task:
            self._in_flight.pop(key, None)
        if task.cancelled() or task.exception() is not None:
            return
        self._store(key, task.result())

    def _store(self, key: str, data: Dict[str, Any]) -> None:
        for stale_key in [k for k, (fetched_at, _) in self._results.items() if self._is_stale(fetched_at)]:
            del self._results[stale_key]
        self._results[key] = (self._clock(), data)

    async def _fetch_with_retry(self, key: str) -> Dict[str, Any]:
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(WeatherApiError),
            stop=stop_after_attempt(self.retry_attempts + 1),
            wait=wait_fixed(self.retry_delay_seconds),
            before_sleep=self._log_retry,
            reraise=True
        )
        async for attempt in retrying:
            with attempt:
                return await self._fetch(key)

    @staticmethod
    def _log_retry(retry_state) -> None:
        ex = retry_state.outcome.exception()
        logger.warning(
            "Weather request failed, retrying",
            attempt=retry_state.attempt_number,
            error=str(ex)
        )

    async def _fetch(self, key: str) -> Dict[str, Any]:
        session = await self.session_manager.get_session()
        try:
            async with session.get(self.base_url, params={Validation.CITY_QUERY_PARAM: key}) as response:
                if response.status != 200:
                    try:
                        body = await response.json(content_type=None)
                    except ValueError:
                        body = None
                    raise WeatherApiError.from_error_body(body, response.status)

                try:
                    return await response.json(content_type=None)
                except ValueError as ex:
                    code = ErrorCode.WEATHER_FETCH_FAILED
                    raise WeatherApiError(code.message, code=code, status=response.status) from ex

        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            raise NetworkError(f"Failed to fetch: {ex}") from ex
