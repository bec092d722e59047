"""Custom exceptions for the benefits API client."""


class ClientError(Exception):
    """Base exception for all client errors.

    Anything derived from this is a failed load: the controller catches it
    at the load boundary and switches to the fallback dataset.
    """

    pass


class ClientHTTPError(ClientError):
    """Request failed with a non-2xx status or at the network level.

    A status_code of 0 means no HTTP response was received (DNS failure,
    refused connection, TLS error and similar).
    """

    def __init__(self, message: str, status_code: int, url: str) -> None:
        """Initialize HTTP error with status code and URL.

        Args:
            message: Human-readable error message
            status_code: HTTP status code, or 0 when no response was received
            url: URL that failed
        """
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ClientTimeoutError(ClientError):
    """Request did not complete within the configured timeout."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url


class ClientResponseError(ClientError):
    """A response arrived but its body could not be used (invalid JSON)."""

    pass


class EmptyPayloadError(ClientResponseError):
    """The payload parsed, but no records could be extracted from it."""

    pass


class ClientConfigurationError(ClientError):
    """Invalid client configuration (timeout out of range, empty user agent)."""

    pass
