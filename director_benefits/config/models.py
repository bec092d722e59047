"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://www.api.gov.uk/hmrc/individual-benefits/individual-benefits"
DEFAULT_TOP_LIMIT = 50


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ApiConfig(BaseModel):
    """Remote benefits endpoint settings."""

    url: str = Field(DEFAULT_API_URL, min_length=1, description="Benefits API endpoint")
    timeout: int = Field(30, ge=5, le=300, description="Request timeout in seconds")
    user_agent: str = Field(
        "DirectorBenefits/1.0", min_length=1, description="User-Agent header"
    )
    embedded_resource: str = Field(
        "benefits",
        min_length=1,
        description="Collection name probed under '_embedded' in the payload",
    )

    @field_validator("url", "user_agent", "embedded_resource")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("url")
    @classmethod
    def validate_url_scheme(cls, v: str) -> str:
        """Only HTTP(S) endpoints are supported."""
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError(f"url must start with http:// or https://, got: {v}")
        return v


class DisplayConfig(BaseModel):
    """Ranked table settings."""

    top_limit: int = Field(
        DEFAULT_TOP_LIMIT, ge=1, description="Number of ranked rows to display"
    )
    default_dimension: str = Field(
        "displayName", min_length=1, description="Initially selected dimension field"
    )
    default_sort: str = Field(
        "totalBenefits", min_length=1, description="Initially selected sort field"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object."""

    api: ApiConfig = Field(default_factory=ApiConfig, description="API settings")
    display: DisplayConfig = Field(
        default_factory=DisplayConfig, description="Table settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
