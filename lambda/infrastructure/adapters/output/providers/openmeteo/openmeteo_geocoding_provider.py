"""
Open-Meteo Geocoding Provider
Resolve nome de cidade → coordenadas (primeiro resultado, sem desambiguação)
"""
from typing import Optional

from ddtrace import tracer

from application.ports.output.geocoding_provider_port import IGeocodingProvider
from application.ports.output.http_client_port import IHttpClient
from domain.constants import API, Geocoding
from domain.entities.city import City
from domain.exceptions import CityNotFoundException, UpstreamUnavailableException
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDataMapper
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoGeocodingProvider(IGeocodingProvider):
    """Provider para a Open-Meteo Geocoding API (/v1/search)"""

    def __init__(self, http_client: IHttpClient, base_url: Optional[str] = None):
        self.http_client = http_client
        self.base_url = (base_url or API.GEOCODING_BASE_URL).rstrip("/")

    @property
    def provider_name(self) -> str:
        return "OpenMeteoGeocoding"

    @tracer.wrap(resource="openmeteo.search_city")
    async def search_city(self, name: str) -> City:
        url = f"{self.base_url}/search"
        params = {
            'name': name,
            'count': Geocoding.RESULT_COUNT,
            'language': Geocoding.LANGUAGE
        }

        response = await self.http_client.get_json(url, params=params)

        if not response.ok:
            # Status e motivo vão só para o log
            logger.error(
                "Geocoding API error",
                status=response.status,
                reason=response.reason,
                city=name
            )
            raise UpstreamUnavailableException(
                "Failed to fetch city coordinates",
                details={"status": response.status, "reason": response.reason}
            )

        results = (response.body or {}).get('results') or []
        if not results:
            logger.warning("City not found", city=name)
            raise CityNotFoundException(details={"city": name})

        city = OpenMeteoDataMapper.map_geocoding_result(results[0])
        logger.debug(
            "City resolved",
            city=city.name,
            country=city.country,
            coordinates=str(city.coordinates)
        )
        return city
