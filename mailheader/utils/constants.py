"""
mailheader Constants - Central location for ALL constant values.
"""

from typing import Tuple

# APPLICATION INFO
APP_NAME: str = "mailheader"
APP_FULL_NAME: str = "Mail Header Field Toolkit"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "Parse, validate and MIME-encode single email header fields"

# LINE STRUCTURE (RFC 5322)
CR: str = "\r"
LF: str = "\n"
CRLF: str = "\r\n"
FOLDING: str = CRLF + " "
FIELD_SEPARATOR: str = ":"
NAME_VALUE_DELIMITER: str = ": "
LINEAR_WHITESPACE: str = " \t"

# Characters trimmed around the name and value of a raw line
TRIM_CHARACTERS: str = " \t\r\n\0\x0b"

# LINE LENGTHS
DEFAULT_MAX_LINE_LENGTH: int = 78
MIN_MAX_LINE_LENGTH: int = 32
HARD_LINE_LENGTH_LIMIT: int = 998

# PRINTABLE US-ASCII
PRINTABLE_ASCII_MIN: int = 0x21
PRINTABLE_ASCII_MAX: int = 0x7E
DEL: int = 0x7F

# CHARSET TAGS
CHARSET_ASCII: str = "ASCII"
CHARSET_UTF8: str = "UTF-8"
SUPPORTED_CHARSET_TAGS: Tuple[str, ...] = (CHARSET_ASCII, CHARSET_UTF8)

# ENCODED WORDS (RFC 2047)
ENCODED_WORD_PREFIX: str = "=?"
ENCODED_WORD_SUFFIX: str = "?="
ENCODING_BASE64: str = "B"
ENCODING_QUOTED_PRINTABLE: str = "Q"
SUPPORTED_HEADER_ENCODINGS: Tuple[str, ...] = (ENCODING_QUOTED_PRINTABLE, ENCODING_BASE64)

# FIELD-NAME STRATEGIES
SUBJECT_MARKER: str = "subject"
SUBJECT_CHARSET: str = CHARSET_UTF8

# LOGGING
MAX_LOGGED_LINE_LENGTH: int = 120
