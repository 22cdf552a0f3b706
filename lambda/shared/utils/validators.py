"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Optional

from domain.constants import Validation
from domain.exceptions import CityNameTooShortException, MissingCityParameterException


class CityNameValidator:
    """Validate city name query parameter"""

    MIN_LENGTH = Validation.MIN_CITY_NAME_LENGTH

    @staticmethod
    def validate(city_name: Optional[str]) -> str:
        """
        Validate city name and return it trimmed

        Args:
            city_name: Raw value of the `city` query parameter

        Returns:
            The trimmed city name

        Raises:
            MissingCityParameterException: If the parameter is absent or empty
            CityNameTooShortException: If the trimmed name is shorter than MIN_LENGTH
        """
        if not city_name:
            raise MissingCityParameterException(details={"city": city_name})

        trimmed = city_name.strip()
        if len(trimmed) < CityNameValidator.MIN_LENGTH:
            raise CityNameTooShortException(
                details={
                    "city": city_name,
                    "min_length": CityNameValidator.MIN_LENGTH
                }
            )
        return trimmed
