"""
mailheader Encoded-Word Codec

Decode RFC 2047 encoded words found in incoming header values and encode
outgoing values into folded, printable US-ASCII.

The payload transforms themselves ("B" base64 and "Q" quoted-printable)
come from the standard library's email.base64mime and email.quoprimime.
"""

import binascii
import logging
import re
from email import base64mime, quoprimime
from typing import List, Optional

from mailheader.config import Settings, get_settings
from mailheader.utils.constants import (
    CRLF,
    ENCODED_WORD_PREFIX,
    ENCODING_BASE64,
    FOLDING,
    NAME_VALUE_DELIMITER,
)
from mailheader.utils.exceptions import UnencodableValueError
from mailheader.utils.helpers import truncate_string, unfold
from mailheader.utils.validators import classify_charset

logger = logging.getLogger(__name__)

# =?charset?encoding?payload?=
ENCODED_WORD_REGEX = re.compile(
    r'=\?(?P<charset>[^?\s]+)\?(?P<encoding>[bBqQ])\?(?P<payload>[^?\s]*)\?='
)

# Unfolded text that must never reach the wire: C0 controls except HTAB, and DEL
CONTROL_CHAR_REGEX = re.compile(r'[\x00-\x08\x0a-\x1f\x7f]')

# A single fold at the very start of a value
LEADING_FOLD_REGEX = re.compile(r'\A\r\n[ \t]')

# A whitespace run followed by a word, or trailing whitespace
FOLD_TOKEN_REGEX = re.compile(r'[ \t]*[^ \t]+|[ \t]+')


def is_encoded_word_shaped(value: Optional[str]) -> bool:
    """Check whether a raw value already starts as an encoded word."""
    return bool(value) and value.startswith(ENCODED_WORD_PREFIX)


def _is_linear_whitespace(s: str) -> bool:
    return bool(s) and not s.strip(' \t')


def _decode_base64_payload(payload: str) -> bytes:
    # Senders routinely drop the trailing padding
    missing = -len(payload) % 4
    return base64mime.decode(payload + '=' * missing)


class EncodedWordCodec:
    """
    Encode and decode header values.

    The codec holds no state besides its settings, so one instance can be
    shared freely between fields and threads.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    # =========================================================================
    # Decoding
    # =========================================================================

    def decode(self, raw_value: Optional[str]) -> str:
        """
        Decode every encoded word in a raw header value.

        The value is unfolded first, and a fold at its very start is dropped
        together with its whitespace. Literal text passes through unchanged,
        and whitespace separating two encoded words is dropped (RFC 2047
        section 6.2), so a value split over several words decodes as one run.

        Args:
            raw_value: Value as found on the wire

        Returns:
            Decoded text
        """
        if not raw_value:
            return ""

        # encode() starts with a fold when the name fills the first line
        value = unfold(LEADING_FOLD_REGEX.sub('', raw_value, count=1))
        parts: List[str] = []
        position = 0
        previous_decoded = False

        for match in ENCODED_WORD_REGEX.finditer(value):
            literal = value[position:match.start()]
            decoded = self._decode_word(match)

            if not (previous_decoded and decoded is not None and _is_linear_whitespace(literal)):
                parts.append(literal)
            parts.append(match.group(0) if decoded is None else decoded)

            previous_decoded = decoded is not None
            position = match.end()

        parts.append(value[position:])
        return ''.join(parts)

    def _decode_word(self, match: re.Match) -> Optional[str]:
        """Decode a single encoded word, or return None to keep it verbatim."""
        # RFC 2231 allows a language suffix: utf-8*en
        charset = match.group('charset').split('*', 1)[0]
        encoding = match.group('encoding').upper()
        payload = match.group('payload')

        try:
            if encoding == ENCODING_BASE64:
                data = _decode_base64_payload(payload)
            else:
                data = quoprimime.header_decode(payload).encode('latin-1')
        except (binascii.Error, UnicodeEncodeError) as e:
            logger.warning(f"Malformed encoded word {truncate_string(match.group(0), 60)!r} kept verbatim: {e}")
            return None

        try:
            return data.decode(charset, errors='replace')
        except LookupError:
            logger.warning(f"Unknown charset '{charset}' in encoded word, keeping it verbatim")
            return None

    # =========================================================================
    # Encoding
    # =========================================================================

    def can_be_encoded(self, value: Optional[str]) -> bool:
        """
        Check whether a value can be emitted as printable US-ASCII lines.

        Legal folds are allowed. Control characters other than HTAB, and
        characters the output charset cannot represent, are not.
        """
        if value is None:
            return False
        if CONTROL_CHAR_REGEX.search(unfold(value)):
            return False
        try:
            value.encode(self.settings.charset)
        except UnicodeEncodeError:
            return False
        return True

    def encode(
        self,
        value: Optional[str],
        name: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> str:
        """
        Encode a decoded value for the wire.

        Plain ASCII values are folded at whitespace. Anything else, and
        ASCII values holding a word too long for one line, is wrapped into
        encoded words joined by CRLF + SP.

        Args:
            value: Decoded header value
            name: Field name, used to size the first line
            encoding: Explicit charset tag; classified from the value if None

        Returns:
            Wire form of the value, without the name
        """
        if not value:
            return ""

        settings = self.settings
        detected = classify_charset(value, settings.ascii_charset, settings.charset)
        encoding = encoding or detected

        first_line_budget = settings.max_line_length
        if name:
            first_line_budget -= len(name) + len(NAME_VALUE_DELIMITER)

        is_ascii = encoding.upper() == settings.ascii_charset.upper()
        if is_ascii and detected == settings.ascii_charset:
            folded = self._fold(value, first_line_budget)
            if folded is not None:
                return folded
            logger.debug(f"Value for {name or 'header'} has an unbreakable word, using encoded words")

        charset = settings.charset if is_ascii else encoding
        return self._encode_words(value, charset, first_line_budget)

    def _fold(self, value: str, first_line_budget: int) -> Optional[str]:
        """
        Fold an ASCII value by inserting CRLF before whitespace runs.

        Returns None when some line cannot be made short enough.
        """
        limit = self.settings.max_line_length
        lines: List[str] = []
        current = ""
        budget = first_line_budget

        for token in FOLD_TOKEN_REGEX.findall(value):
            breakable = token[0] in ' \t' and token.strip(' \t')
            if current and breakable and len(current) + len(token) > budget:
                lines.append(current)
                current = token
                budget = limit
            else:
                current += token

            if len(current) > budget:
                return None

        lines.append(current)
        return CRLF.join(lines)

    def _encode_words(self, value: str, charset: str, first_line_budget: int) -> str:
        """Split a value into encoded words that each fit on one line."""
        limit = self.settings.max_line_length
        scheme = self.settings.header_encoding
        measure = base64mime.header_length if scheme == ENCODING_BASE64 else quoprimime.header_length
        # =?charset?X??=
        overhead = len(charset) + 7

        words: List[str] = []
        chunk = b""
        budget = first_line_budget

        for char in value:
            try:
                data = char.encode(charset)
            except (UnicodeEncodeError, LookupError) as e:
                raise UnencodableValueError(f"Cannot encode {char!r} as {charset}: {e}")

            if overhead + measure(chunk + data) <= budget:
                chunk += data
                continue

            if overhead + measure(data) > limit - 1:
                raise UnencodableValueError(
                    f"Line length {limit} is too short for an encoded word holding {char!r}"
                )
            # An empty first line leaves the whole value to continuation lines
            words.append(self._make_word(chunk, charset) if chunk else "")
            chunk = data
            budget = limit - 1

        words.append(self._make_word(chunk, charset))
        return FOLDING.join(words)

    def _make_word(self, data: bytes, charset: str) -> str:
        if self.settings.header_encoding == ENCODING_BASE64:
            return base64mime.header_encode(data, charset)
        return quoprimime.header_encode(data, charset)

