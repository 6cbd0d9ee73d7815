"""
mailheader Test Configuration

Pytest fixtures and configuration.
"""

import os

import pytest

from mailheader.config import Settings, get_settings
from mailheader.services.header import EncodedWordCodec


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep MAILHEADER_* variables from the environment out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("MAILHEADER_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default header settings."""
    return Settings(_env_file=None)


@pytest.fixture
def codec(settings):
    """Codec bound to the default settings."""
    return EncodedWordCodec(settings)


@pytest.fixture
def base64_codec():
    """Codec emitting "B" encoded words."""
    return EncodedWordCodec(Settings(_env_file=None, header_encoding="b"))


@pytest.fixture
def assert_folded():
    """Check that a serialized value is printable ASCII and properly folded."""
    def _check(line: str, max_length: int = 78):
        physical = line.split("\r\n")
        for i, part in enumerate(physical):
            assert len(part) <= max_length, f"line {i} is {len(part)} chars: {part!r}"
            assert all(0x20 <= ord(c) <= 0x7E or c == "\t" for c in part)
            if i > 0:
                assert part[0] in " \t"
        return physical
    return _check
