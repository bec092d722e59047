"""Structured logging helpers shared by every component."""

import logging
from typing import Optional, Union


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that stamps a ``component`` field on every record."""

    def process(self, msg, kwargs):
        """Merge the adapter's fields under the call's ``extra`` (call wins)."""
        extra = kwargs.get("extra", {})
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs


def get_logger(
    name: str, component: Optional[str] = None
) -> Union[logging.Logger, ComponentLoggerAdapter]:
    """Get a logger, optionally bound to a component name.

    Args:
        name: Logger name (typically __name__)
        component: Component identifier added to every record

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="client")
        >>> logger.info("Fetching payload", extra={"event": "client.fetch.request"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger
