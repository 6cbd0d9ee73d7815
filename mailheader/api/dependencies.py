"""
mailheader API Dependencies

FastAPI dependency injection for settings and the header codec.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from mailheader.config import Settings
from mailheader.config import get_settings as load_settings
from mailheader.services.header import EncodedWordCodec
from mailheader.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# Global settings instance
_settings: Optional[Settings] = None


def init_settings(**kwargs) -> Settings:
    """Initialize global settings, overriding environment values with kwargs."""
    global _settings
    base = load_settings()
    if kwargs:
        try:
            base = Settings(**{**base.model_dump(), **kwargs})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings override: {e}")
    _settings = base
    logger.info(
        f"Header settings: max_line_length={_settings.max_line_length}, "
        f"charset={_settings.charset}, encoding={_settings.header_encoding}"
    )
    return _settings


def get_settings() -> Settings:
    """Get current settings, loading from env if not initialized."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget initialized settings so the next request reloads them."""
    global _settings
    _settings = None


def get_header_codec() -> EncodedWordCodec:
    """Get a codec bound to the current settings."""
    return EncodedWordCodec(get_settings())
