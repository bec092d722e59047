"""HTTP transport for the benefits API.

Usage:
    from director_benefits.client import BenefitsClient
    client = BenefitsClient.from_config(app_config.api)
    payload = client.fetch_payload()

Exception handling:
    from director_benefits.client import ClientError, ClientHTTPError
"""

from .benefits import BenefitsClient
from .exceptions import (
    ClientConfigurationError,
    ClientError,
    ClientHTTPError,
    ClientResponseError,
    ClientTimeoutError,
    EmptyPayloadError,
)

__all__ = [
    "BenefitsClient",
    # Exceptions
    "ClientError",
    "ClientHTTPError",
    "ClientTimeoutError",
    "ClientResponseError",
    "EmptyPayloadError",
    "ClientConfigurationError",
]
