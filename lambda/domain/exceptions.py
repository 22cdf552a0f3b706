"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""
from domain.error_codes import ErrorCode


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class WeatherLookupException(DomainException):
    """Base para falhas da busca de clima por cidade (cada subclasse fixa seu ErrorCode)"""
    error_code: ErrorCode = ErrorCode.WEATHER_FETCH_FAILED

    def __init__(self, message: str = None, details: dict = None):
        super().__init__(message or self.error_code.message, details)

    @property
    def status_code(self) -> int:
        return self.error_code.status_code


class MissingCityParameterException(WeatherLookupException):
    """Raised when the city query parameter is absent or empty"""
    error_code = ErrorCode.CITY_PARAMETER_REQUIRED


class CityNameTooShortException(WeatherLookupException):
    """Raised when the trimmed city name is shorter than the minimum length"""
    error_code = ErrorCode.CITY_NAME_TOO_SHORT


class CityNotFoundException(WeatherLookupException):
    """Raised when the geocoding provider returns no match"""
    error_code = ErrorCode.CITY_NOT_FOUND


class UpstreamUnavailableException(WeatherLookupException):
    """Raised when a provider answers with a non-success status or the connection fails"""
    error_code = ErrorCode.NETWORK_CONNECTION_FAILED


class UpstreamTimeoutException(WeatherLookupException):
    """Raised when a provider does not answer within the configured timeout"""
    error_code = ErrorCode.WEATHER_SERVICE_UNAVAILABLE


class InvalidWeatherDataException(WeatherLookupException):
    """Raised when the forecast payload lacks the current-conditions block"""
    error_code = ErrorCode.INVALID_WEATHER_DATA
