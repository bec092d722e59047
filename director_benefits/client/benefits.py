"""HTTP client for the HMRC individual benefits endpoint.

The client makes exactly one GET per call. There is no retry or backoff:
callers treat any ClientError as a failed load and fall back to the
bundled example dataset.
"""

import logging
from typing import Any, Dict, Optional

import requests

from director_benefits.config.models import ApiConfig
from director_benefits.logging import get_logger

from .exceptions import (
    ClientConfigurationError,
    ClientHTTPError,
    ClientResponseError,
    ClientTimeoutError,
)

logger = get_logger(__name__, component="client")


class BenefitsClient:
    """Fetches the raw benefits payload.

    Attributes:
        url: Endpoint requested by fetch_payload()
        timeout: HTTP request timeout in seconds
        user_agent: User-Agent header for HTTP requests
    """

    def __init__(
        self,
        url: str,
        timeout: int = 30,
        user_agent: str = "DirectorBenefits/1.0",
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Benefits endpoint URL
            timeout: HTTP request timeout in seconds (range 5-300)
            user_agent: User-Agent header for requests
            session: Optional pre-built session (tests inject one)

        Raises:
            ClientConfigurationError: If url is empty, timeout is outside the
                valid range or user_agent is empty
        """
        if not url or not url.strip():
            raise ClientConfigurationError("url cannot be empty")
        if not 5 <= timeout <= 300:
            raise ClientConfigurationError(
                f"Timeout must be between 5 and 300 seconds, got: {timeout}"
            )
        if not user_agent or not user_agent.strip():
            raise ClientConfigurationError("user_agent cannot be empty")

        self.url = url.strip()
        self.timeout = timeout
        self.user_agent = user_agent.strip()

        self._session = session or requests.Session()
        self._session.headers.update(
            {"User-Agent": self.user_agent, "Accept": "application/json"}
        )

    @classmethod
    def from_config(cls, api_config: ApiConfig) -> "BenefitsClient":
        """Build a client from the ``api`` configuration section."""
        return cls(
            url=api_config.url,
            timeout=api_config.timeout,
            user_agent=api_config.user_agent,
        )

    def fetch_payload(self) -> Any:
        """GET the endpoint and return the decoded JSON body.

        Returns:
            Decoded JSON (any shape; extraction happens downstream)

        Raises:
            ClientHTTPError: On a non-2xx status or a network failure
            ClientTimeoutError: On request timeout
            ClientResponseError: When the body is not valid JSON
        """
        return self._make_request(self.url)

    def _make_request(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        try:
            logger.debug(
                f"HTTP GET request to {url}",
                extra={
                    "event": "client.fetch.request",
                    "url": url,
                    "timeout": self.timeout,
                },
            )

            response = self._session.request(
                method="GET",
                url=url,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(
                f"Request to {url} timed out after {self.timeout} seconds",
                extra={
                    "event": "client.fetch.error",
                    "error_type": "Timeout",
                    "url": url,
                    "timeout": self.timeout,
                },
            )
            raise ClientTimeoutError(
                f"Request to {url} timed out after {self.timeout} seconds",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(
                f"Request to {url} failed: {e}",
                extra={
                    "event": "client.fetch.error",
                    "error_type": type(e).__name__,
                    "url": url,
                },
            )
            raise ClientHTTPError(
                f"Request to {url} failed: {e}",
                status_code=0,
                url=url,
            ) from e

        if not 200 <= response.status_code < 300:
            log_level = logging.WARNING if response.status_code >= 500 else logging.ERROR
            logger.log(
                log_level,
                f"HTTP {response.status_code} error from {url}",
                extra={
                    "event": "client.fetch.error",
                    "status_code": response.status_code,
                    "url": url,
                },
            )
            raise ClientHTTPError(
                f"HMRC API request failed ({response.status_code})",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            # requests' JSONDecodeError subclasses ValueError
            logger.error(
                f"Failed to parse JSON response from {url}",
                extra={
                    "event": "client.fetch.error",
                    "error_type": "JSONDecodeError",
                    "url": url,
                },
            )
            raise ClientResponseError(
                f"Failed to parse JSON response from {url}: {e}"
            ) from e

        logger.debug(
            "HTTP request succeeded",
            extra={
                "event": "client.fetch.succeeded",
                "status_code": response.status_code,
                "url": url,
            },
        )
        return data
