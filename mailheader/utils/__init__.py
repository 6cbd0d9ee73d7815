"""
mailheader Utilities Package
============================

Common utilities, constants, validators and exceptions used throughout the application.
"""

from mailheader.utils.constants import (
    APP_NAME,
    APP_FULL_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
    CRLF,
    FOLDING,
    DEFAULT_MAX_LINE_LENGTH,
    CHARSET_ASCII,
    CHARSET_UTF8,
)

from mailheader.utils.exceptions import (
    MailHeaderBaseException,
    ParsingError,
    FormatError,
    ValidationError,
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    UnencodableValueError,
    StateError,
    ConfigurationError,
)

from mailheader.utils.helpers import (
    unfold,
    normalize_header_name,
    truncate_string,
)

from mailheader.utils.validators import (
    is_valid_header_name,
    is_valid_header_value,
    classify_charset,
    is_ascii_compatible_charset,
    filter_header_name,
    filter_header_value,
)

__all__ = [
    # Constants
    "APP_NAME",
    "APP_FULL_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "CRLF",
    "FOLDING",
    "DEFAULT_MAX_LINE_LENGTH",
    "CHARSET_ASCII",
    'CHARSET_UTF8',
    # Exceptions
    "MailHeaderBaseException",
    "ParsingError",
    "FormatError",
    "ValidationError",
    "InvalidHeaderNameError",
    "InvalidHeaderValueError",
    "UnencodableValueError",
    "StateError",
    "ConfigurationError",
    # Helpers
    "unfold",
    "normalize_header_name",
    "truncate_string",
    # Validators
    "is_valid_header_name",
    "is_valid_header_value",
    "classify_charset",
    "is_ascii_compatible_charset",
    "filter_header_name",
    "filter_header_value",
]
