"""
mailheader Helper Functions

General utility functions used throughout the application.
"""

import re
from typing import Optional


# Fold: CRLF immediately followed by SP or HTAB
FOLD_REGEX = re.compile(r'\r\n(?=[ \t])')


# ============================================================================
# Folding Helpers
# ============================================================================

def unfold(value: str) -> str:
    """
    Unfold a header value (RFC 5322 section 2.2.3).

    Removes every CRLF that is immediately followed by whitespace; the
    whitespace itself is kept.
    """
    if not value:
        return value
    return FOLD_REGEX.sub('', value)


# ============================================================================
# Name Helpers
# ============================================================================

def normalize_header_name(name: str) -> str:
    """
    Normalize a header name to its canonical capitalized-word form.

    Underscores, dashes and spaces separate words; each word gets an
    upper-case first letter and the words are joined with dashes, so
    ``content_type``, ``content-type`` and ``content type`` all become
    ``Content-Type``.
    """
    words = name.replace('_', ' ').replace('-', ' ').split(' ')
    return '-'.join(word[:1].upper() + word[1:] for word in words)


# ============================================================================
# String Helpers
# ============================================================================

def truncate_string(s: Optional[str], max_length: int = 100, suffix: str = "...") -> Optional[str]:
    """Truncate string to max length with suffix."""
    if not s or len(s) <= max_length:
        return s
    return s[:max_length - len(suffix)] + suffix
