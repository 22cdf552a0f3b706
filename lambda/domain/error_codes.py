"""
Error Codes - Enumeração compartilhada entre servidor e cliente
Cada código carrega status HTTP e mensagem estável (contrato da API)
"""
from enum import Enum


class ErrorCode(str, Enum):
    """
    Códigos de erro da rota /api/weather

    O valor do membro trafega no campo `code` do corpo de erro; o cliente
    usa o código (e não o texto) para escolher a mensagem amigável.
    """

    CITY_PARAMETER_REQUIRED = "CITY_PARAMETER_REQUIRED"
    CITY_NAME_TOO_SHORT = "CITY_NAME_TOO_SHORT"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    INVALID_WEATHER_DATA = "INVALID_WEATHER_DATA"
    NETWORK_CONNECTION_FAILED = "NETWORK_CONNECTION_FAILED"
    WEATHER_SERVICE_UNAVAILABLE = "WEATHER_SERVICE_UNAVAILABLE"
    WEATHER_FETCH_FAILED = "WEATHER_FETCH_FAILED"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    def to_body(self) -> dict:
        """Corpo JSON de erro: {"error": <mensagem>, "code": <código>}"""
        return {"error": self.message, "code": self.value}

    @classmethod
    def from_message(cls, message: str):
        """Busca reversa pela mensagem (respostas sem `code`). None se desconhecida."""
        for code, text in _MESSAGES.items():
            if text == message:
                return code
        return None


_STATUS_CODES = {
    ErrorCode.CITY_PARAMETER_REQUIRED: 400,
    ErrorCode.CITY_NAME_TOO_SHORT: 400,
    ErrorCode.CITY_NOT_FOUND: 404,
    ErrorCode.INVALID_WEATHER_DATA: 500,
    ErrorCode.NETWORK_CONNECTION_FAILED: 503,
    ErrorCode.WEATHER_SERVICE_UNAVAILABLE: 503,
    ErrorCode.WEATHER_FETCH_FAILED: 500,
}

_MESSAGES = {
    ErrorCode.CITY_PARAMETER_REQUIRED: "City parameter is required",
    ErrorCode.CITY_NAME_TOO_SHORT: "City name must be at least 2 characters long",
    ErrorCode.CITY_NOT_FOUND: "City not found",
    ErrorCode.INVALID_WEATHER_DATA: "Invalid weather data structure",
    ErrorCode.NETWORK_CONNECTION_FAILED: "Network connection failed",
    ErrorCode.WEATHER_SERVICE_UNAVAILABLE: "Weather service unavailable",
    ErrorCode.WEATHER_FETCH_FAILED: "Failed to fetch weather data",
}
