"""Non-fatal configuration checks."""

import warnings
from typing import Any, Dict, List


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check a raw configuration mapping for settings that are valid but suspicious.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    api = config_dict.get("api", {})
    if isinstance(api, dict):
        url = api.get("url")
        if isinstance(url, str) and url.strip().lower().startswith("http://"):
            warning_messages.append(
                f"API url ({url.strip()}) is not HTTPS; benefit data will travel unencrypted"
            )

        timeout = api.get("timeout")
        if isinstance(timeout, int) and timeout > 120:
            warning_messages.append(
                f"Long api.timeout ({timeout}s) delays the fallback dataset on a hung request"
            )

    display = config_dict.get("display", {})
    if isinstance(display, dict):
        top_limit = display.get("top_limit")
        if isinstance(top_limit, int) and top_limit > 500:
            warning_messages.append(
                f"Large display.top_limit ({top_limit}) produces a very long table"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
