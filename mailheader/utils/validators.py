"""
mailheader Input Validators

Pure predicates for header names and values, the charset classifier,
and sanitizing filters for loosely formed input.
"""

import re
from typing import Optional

from .constants import (
    CHARSET_ASCII,
    CHARSET_UTF8,
    ENCODED_WORD_PREFIX,
    LINEAR_WHITESPACE,
    PRINTABLE_ASCII_MAX,
    PRINTABLE_ASCII_MIN,
)
from .helpers import unfold


# ============================================================================
# Regular Expression Patterns
# ============================================================================

# Field name: printable US-ASCII except colon (RFC 5322 section 2.2)
HEADER_NAME_REGEX = re.compile(r'[\x21-\x39\x3b-\x7e]+')

# Unfolded field value: printable US-ASCII plus SP and HTAB
HEADER_VALUE_REGEX = re.compile(r'[\t\x20-\x7e]*')

# Sample text a usable output charset must encode byte for byte as ASCII
ASCII_SAMPLE = "a"

# Legal fold kept by the value filter
FILTER_FOLD_REGEX = re.compile(r'\r\n[ \t]')


# ============================================================================
# Header Name Validation
# ============================================================================

def is_valid_header_name(name: Optional[str]) -> bool:
    """
    Validate a header field name.

    Args:
        name: Candidate field name

    Returns:
        True if non-empty and composed only of printable US-ASCII
        characters other than colon
    """
    if not name or not isinstance(name, str):
        return False
    return HEADER_NAME_REGEX.fullmatch(name) is not None


# ============================================================================
# Header Value Validation
# ============================================================================

def is_valid_header_value(value: Optional[str]) -> bool:
    """
    Validate a header field value.

    Legal folds (CRLF followed by SP or HTAB) are removed first; everything
    left must be printable US-ASCII or horizontal whitespace. A CR or LF
    that is not part of a legal fold makes the value invalid.

    Args:
        value: Candidate field value, possibly folded

    Returns:
        True if valid
    """
    if value is None or not isinstance(value, str):
        return False
    return HEADER_VALUE_REGEX.fullmatch(unfold(value)) is not None


# ============================================================================
# Charset Classification
# ============================================================================

def classify_charset(
    value: Optional[str],
    ascii_charset: str = CHARSET_ASCII,
    rich_charset: str = CHARSET_UTF8,
) -> str:
    """
    Classify a decoded value as plain ASCII or needing a richer charset.

    Text containing ``=?`` is classified as rich so that it is emitted as
    an encoded word and cannot be mistaken for one when decoded. So is text
    with leading or trailing whitespace, which parsing would trim.
    """
    if not value:
        return ascii_charset
    if HEADER_VALUE_REGEX.fullmatch(value) is None:
        return rich_charset
    if ENCODED_WORD_PREFIX in value:
        return rich_charset
    if value != value.strip(LINEAR_WHITESPACE):
        return rich_charset
    return ascii_charset


def is_ascii_compatible_charset(charset: Optional[str]) -> bool:
    """
    Check that a charset is known and encodes US-ASCII text unchanged.

    Encoded words are built one character at a time, so charsets such as
    UTF-16 that prefix a BOM or widen ASCII cannot be used.
    """
    if not charset:
        return False
    try:
        return ASCII_SAMPLE.encode(charset) == ASCII_SAMPLE.encode('ascii')
    except (LookupError, UnicodeError):
        return False


# ============================================================================
# Sanitization Functions
# ============================================================================

def filter_header_name(name: str) -> str:
    """Drop every character that is not allowed in a header name."""
    if not name:
        return ""
    return ''.join(
        c for c in name
        if PRINTABLE_ASCII_MIN <= ord(c) <= PRINTABLE_ASCII_MAX and c != ':'
    )


def filter_header_value(value: str) -> str:
    """
    Sanitize a header value.

    - Keep legal folds (CRLF + SP/HTAB)
    - Drop bare CR and LF characters
    - Drop other control characters and anything outside US-ASCII
    """
    if not value:
        return ""

    result = []
    i = 0
    while i < len(value):
        if FILTER_FOLD_REGEX.match(value, i):
            result.append(value[i:i + 3])
            i += 3
            continue
        c = value[i]
        if c == '\t' or 0x20 <= ord(c) <= PRINTABLE_ASCII_MAX:
            result.append(c)
        i += 1

    return ''.join(result)
