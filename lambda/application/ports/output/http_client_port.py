"""
Output Port: HTTP Client
Capacidade injetada de fazer requisições; permite testar os providers
contra um fake sem acesso à rede
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class HttpResponse:
    """Resposta já lida (status + corpo JSON decodificado)"""
    status: int
    reason: str = ""
    body: Optional[Any] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class IHttpClient(ABC):
    """Interface para o cliente HTTP usado pelos providers"""

    @abstractmethod
    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> HttpResponse:
        """
        Executa GET e decodifica o corpo como JSON

        Args:
            url: URL absoluta
            params: Query string

        Returns:
            HttpResponse (corpo é None quando a resposta não é sucesso)

        Raises:
            UpstreamUnavailableException: Falha de conexão
            UpstreamTimeoutException: Tempo limite excedido
        """
        raise NotImplementedError
