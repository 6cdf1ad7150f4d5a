"""Failure taxonomy for the weather lookup pipeline."""

from typing import Optional

CITY_NOT_FOUND_MESSAGE = "City not found. Please try again."
GENERIC_FAILURE_MESSAGE = "Failed to fetch weather data. Please try again."


class WeatherLookupError(Exception):
    """Base class for every failure raised by the lookup pipeline."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    @property
    def user_message(self) -> str:
        """Message suitable for showing to the end user."""
        return self.message or GENERIC_FAILURE_MESSAGE


class ValidationError(WeatherLookupError):
    """Raised when the caller input is invalid (e.g. an empty city name)."""
    pass


class TransportError(WeatherLookupError):
    """Raised when a request could not be completed."""
    pass


class UpstreamError(WeatherLookupError):
    """Raised when an upstream API answers with a non-success status.

    The message is fixed per endpoint; the status code is kept separately
    so that e.g. 429 and 500 read the same to the user.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(WeatherLookupError):
    """Raised when geocoding succeeds but returns no match."""

    @property
    def user_message(self) -> str:
        return CITY_NOT_FOUND_MESSAGE


class MalformedResponseError(WeatherLookupError):
    """Raised when an upstream body does not have the expected shape."""
    pass


class WeatherUnavailableError(WeatherLookupError):
    """Raised when the forecast API returned no current conditions."""
    pass


def describe_failure(exc: BaseException) -> str:
    """Map a failure to the single message shown to the user.

    Classification is by exception type, never by message content.

    Args:
        exc: Exception raised while looking up the weather

    Returns:
        User-facing error message
    """
    if isinstance(exc, WeatherLookupError):
        return exc.user_message
    return GENERIC_FAILURE_MESSAGE
