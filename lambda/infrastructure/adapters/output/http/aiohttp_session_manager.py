"""
Aiohttp Session Manager - sessão HTTP compartilhada pelas chamadas Open-Meteo
Uma sessão por event loop; reaproveitada entre invocações quentes da Lambda
"""
import asyncio
from dataclasses import asdict, dataclass
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass(frozen=True)
class HttpPoolConfig:
    """Timeouts (segundos) e limites do pool de conexões"""
    total_timeout: float = API.HTTP_TIMEOUT_TOTAL
    connect_timeout: float = API.HTTP_TIMEOUT_CONNECT
    sock_read_timeout: float = API.HTTP_TIMEOUT_READ
    limit: int = API.HTTP_CONNECTION_LIMIT
    limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST
    ttl_dns_cache: int = API.DNS_CACHE_TTL

    def client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )


class AiohttpSessionManager:
    """
    Dono da ClientSession usada pelo AiohttpHttpClient

    A sessão fica presa ao loop em que foi criada. Se o loop mudar
    (asyncio.run no CLI, loop novo após cold start), a sessão antiga é
    fechada e outra é aberta no loop atual.

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(self, config: Optional[HttpPoolConfig] = None):
        self.config = config or HttpPoolConfig()
        self._session: Optional[aiohttp.ClientSession] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def get_instance(cls, config: Optional[HttpPoolConfig] = None) -> 'AiohttpSessionManager':
        """Singleton do processo; `config` só vale na primeira chamada"""
        if cls._instance is None:
            cls._instance = cls(config)
            logger.info("Http session manager created", **asdict(cls._instance.config))
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def has_open_session(self) -> bool:
        return self._session is not None and not self._session.closed

    async def get_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()

        if self.has_open_session and self._loop is loop:
            return self._session

        if self.has_open_session:
            logger.info("Event loop changed, reopening http session")
            await self.cleanup()

        self._session = self._open_session()
        self._loop = loop
        return self._session

    def _open_session(self) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(
            limit=self.config.limit,
            limit_per_host=self.config.limit_per_host,
            ttl_dns_cache=self.config.ttl_dns_cache
        )
        logger.debug("Opening http session", total_timeout=self.config.total_timeout)
        return aiohttp.ClientSession(timeout=self.config.client_timeout(), connector=connector)

    async def cleanup(self) -> None:
        """Fecha a sessão atual (se houver) e solta o pool"""
        session, self._session, self._loop = self._session, None, None
        if session is None or session.closed:
            return
        try:
            await session.close()
        except (aiohttp.ClientError, RuntimeError) as ex:
            # Loop anterior já fechado: conexões morrem com ele
            logger.warning("Failed to close http session", error=str(ex))


def get_aiohttp_session_manager(config: Optional[HttpPoolConfig] = None) -> AiohttpSessionManager:
    return AiohttpSessionManager.get_instance(config)
