"""Exception hierarchy for the Garmin Connect record client."""

from __future__ import annotations


class GarminClientError(Exception):
    """Base exception for all garmin_client errors."""


class GarminAuthError(GarminClientError):
    """Login or token resume failed."""


class GarminMFARequired(GarminAuthError):
    """The account needs an MFA code and no prompt was provided."""


class GarminAPIError(GarminClientError):
    """A Garmin Connect API call returned an error response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GarminRateLimitError(GarminAPIError):
    """HTTP 429 after all retries were used."""

    def __init__(self, message: str = "Rate limited by Garmin Connect") -> None:
        super().__init__(message, status_code=429)
