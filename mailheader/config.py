"""
mailheader Application Configuration

Configuration management using pydantic-settings.
All configuration values can be overridden with MAILHEADER_* environment variables.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from mailheader.utils.constants import (
    APP_NAME,
    APP_VERSION,
    CHARSET_ASCII,
    CHARSET_UTF8,
    DEFAULT_MAX_LINE_LENGTH,
    ENCODING_QUOTED_PRINTABLE,
    HARD_LINE_LENGTH_LIMIT,
    MIN_MAX_LINE_LENGTH,
    SUPPORTED_HEADER_ENCODINGS,
)
from mailheader.utils.exceptions import ConfigurationError
from mailheader.utils.validators import is_ascii_compatible_charset


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables (MAILHEADER_MAX_LINE_LENGTH, ...)
    2. .env file (local development)
    3. Default values defined here

    The header options are passed explicitly to the encoded-word codec and
    to every HeaderField, so tests can override them per instance.
    """

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # =========================================================================
    # Header output
    # =========================================================================
    max_line_length: int = Field(
        default=DEFAULT_MAX_LINE_LENGTH,
        ge=MIN_MAX_LINE_LENGTH,
        le=HARD_LINE_LENGTH_LIMIT,
        description="Maximum physical line length of a serialized header",
    )
    charset: str = Field(default=CHARSET_UTF8, description="Charset of emitted encoded words")
    ascii_charset: str = Field(default=CHARSET_ASCII, description="Tag for values needing no encoding")
    header_encoding: str = Field(
        default=ENCODING_QUOTED_PRINTABLE,
        description="Encoded-word scheme: Q (quoted-printable) or B (base64)",
    )

    # =========================================================================
    # Parsing
    # =========================================================================
    subject_pre_encoding: bool = Field(
        default=True,
        description="Wrap raw Subject values as UTF-8 base64 encoded words before validation",
    )

    class Config:
        env_prefix = "MAILHEADER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("header_encoding", mode="before")
    @classmethod
    def _check_header_encoding(cls, v):
        v = str(v).strip().upper()
        if v not in SUPPORTED_HEADER_ENCODINGS:
            raise ValueError(f"header_encoding must be one of {SUPPORTED_HEADER_ENCODINGS}")
        return v

    @field_validator("charset")
    @classmethod
    def _check_charset(cls, v):
        if not is_ascii_compatible_charset(v):
            raise ValueError(f"Unknown or non ASCII-compatible charset: {v}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached to avoid re-reading environment on every access.
    Use get_settings.cache_clear() to reload settings.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid mailheader configuration: {e}")
