"""Configuration management module for Director Benefits."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import (
    ApiConfig,
    AppConfig,
    DisplayConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
)

__all__ = [
    # Loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "ApiConfig",
    "DisplayConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
