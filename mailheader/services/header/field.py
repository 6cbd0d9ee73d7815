"""
mailheader Header Field

The HeaderField entity: parse a raw ``Name: Value`` line, hold the
normalized name and decoded value, and serialize back to a wire line.
"""

import logging
from typing import Optional, Tuple, Union

from mailheader.config import Settings, get_settings
from mailheader.models.header import HeaderFieldModel, HeaderFormat
from mailheader.utils.constants import (
    FIELD_SEPARATOR,
    MAX_LOGGED_LINE_LENGTH,
    NAME_VALUE_DELIMITER,
    TRIM_CHARACTERS,
)
from mailheader.utils.exceptions import (
    FormatError,
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    StateError,
    UnencodableValueError,
    ValidationError,
)
from mailheader.utils.helpers import normalize_header_name, truncate_string
from mailheader.utils.validators import (
    classify_charset,
    is_ascii_compatible_charset,
    is_valid_header_name,
    is_valid_header_value,
)

from .encoded_words import EncodedWordCodec
from .strategies import pre_encode

logger = logging.getLogger(__name__)


def _to_text(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        # Undecodable bytes become lone surrogates and fail validation
        return value.decode('utf-8', errors='surrogateescape')
    return value


class HeaderField:
    """
    A single, generic email header field.

    Instances are not internally synchronized: concurrent reads are safe
    only while no thread mutates the field. Use copy() to hand an
    independent instance to another thread.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        value: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.codec = EncodedWordCodec(self.settings)

        self._name: Optional[str] = None
        self._value: Optional[str] = None
        # None until computed from the value or set explicitly
        self._encoding: Optional[str] = None

        if name:
            self.set_field_name(name)
        if value is not None:
            self.set_field_value(value)

    # =========================================================================
    # Parsing
    # =========================================================================

    @classmethod
    def from_string(
        cls,
        line: Union[str, bytes],
        settings: Optional[Settings] = None,
    ) -> "HeaderField":
        """
        Parse a raw header line.

        Args:
            line: Raw ``name:value`` line, possibly folded

        Returns:
            HeaderField with normalized name and decoded value

        Raises:
            FormatError: If the line has no colon
            ValidationError: If the name or value is not acceptable
        """
        settings = settings or get_settings()
        name, value = cls.split_header_line(line, settings)
        decoded = EncodedWordCodec(settings).decode(value)

        logger.debug(f"Parsed header '{name}' ({len(decoded)} chars)")
        return cls(name, decoded, settings)

    parse_line = from_string

    @staticmethod
    def split_header_line(
        line: Union[str, bytes],
        settings: Optional[Settings] = None,
    ) -> Tuple[str, str]:
        """
        Split a header line into its name and raw value.

        Returns:
            Tuple of (name, value); the value is still encoded

        Raises:
            FormatError: If the line does not match ``name:value``
            InvalidHeaderNameError: If the name has disallowed characters
            InvalidHeaderValueError: If the value has disallowed characters
                or malformed folding
        """
        settings = settings or get_settings()
        line = _to_text(line)

        parts = line.split(FIELD_SEPARATOR, 1)
        name = parts[0].strip(TRIM_CHARACTERS)
        value = parts[1].strip(TRIM_CHARACTERS) if len(parts) == 2 else ""

        value = pre_encode(name, value, settings)

        if len(parts) != 2:
            logger.debug(f"Rejected header line without colon: {truncate_string(line, MAX_LOGGED_LINE_LENGTH)!r}")
            raise FormatError('Header must match with the format "name:value"')

        if not is_valid_header_name(name):
            raise InvalidHeaderNameError("Invalid header name detected")

        if not is_valid_header_value(value):
            logger.debug(f"Rejected header value: {truncate_string(line, MAX_LOGGED_LINE_LENGTH)!r}")
            raise InvalidHeaderValueError(
                f"Invalid header value detected: {truncate_string(line, MAX_LOGGED_LINE_LENGTH)!r}"
            )

        return name, value

    # =========================================================================
    # Name
    # =========================================================================

    def set_field_name(self, name: str) -> "HeaderField":
        """
        Set and normalize the header name.

        ``content_type``, ``content-type`` and ``content type`` all become
        ``Content-Type``.
        """
        if not isinstance(name, str) or not name:
            raise InvalidHeaderNameError("Header name must be a non-empty string")

        name = normalize_header_name(name)

        if not is_valid_header_name(name):
            raise InvalidHeaderNameError(
                "Header name must be composed of printable US-ASCII characters, except colon."
            )

        self._name = name
        return self

    def get_field_name(self) -> Optional[str]:
        return self._name

    # =========================================================================
    # Value
    # =========================================================================

    def set_field_value(self, value) -> "HeaderField":
        """Set the decoded header value and reset the cached encoding."""
        value = "" if value is None else _to_text(value)
        if not isinstance(value, str):
            value = str(value)

        if not self.codec.can_be_encoded(value):
            raise UnencodableValueError(
                "Header value must be composed of printable US-ASCII characters and valid folding sequences."
            )

        self._value = value
        self._encoding = None
        return self

    def get_field_value(self, output_format: Union[HeaderFormat, str] = HeaderFormat.RAW) -> Optional[str]:
        """
        Get the header value.

        Args:
            output_format: HeaderFormat.RAW for the decoded text, HeaderFormat.ENCODED
                for the folded wire form
        """
        if HeaderFormat(output_format) == HeaderFormat.ENCODED:
            return self.codec.encode(self._value, self._name, self.get_encoding())
        return self._value

    # =========================================================================
    # Encoding
    # =========================================================================

    def set_encoding(self, encoding: Optional[str]) -> "HeaderField":
        """Set an explicit charset tag, or None to compute it from the value."""
        if encoding is not None and encoding.upper() != self.settings.ascii_charset.upper():
            if not is_ascii_compatible_charset(encoding):
                raise ValidationError(f"Unknown or non ASCII-compatible header encoding: {encoding}")
        self._encoding = encoding
        return self

    def get_encoding(self) -> str:
        if not self._encoding:
            self._encoding = classify_charset(
                self._value,
                self.settings.ascii_charset,
                self.settings.charset,
            )
        return self._encoding

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_string(self) -> str:
        """
        Serialize the field as a wire line, without the trailing CRLF.

        Raises:
            StateError: If no name has been set
        """
        name = self.get_field_name()
        if not name:
            raise StateError("Header name is not set, use set_field_name()")

        value = self.get_field_value(HeaderFormat.ENCODED)
        return name + NAME_VALUE_DELIMITER + value

    serialize = to_string

    def to_model(self) -> HeaderFieldModel:
        """Snapshot the field as a pydantic model."""
        line = self.to_string()
        return HeaderFieldModel(
            name=self._name,
            value=self._value or "",
            encoding=self.get_encoding(),
            encoded_value=line[len(self._name) + len(NAME_VALUE_DELIMITER):],
            line=line,
        )

    def copy(self) -> "HeaderField":
        """Return an independent copy sharing only the settings."""
        clone = HeaderField(settings=self.settings)
        clone._name = self._name
        clone._value = self._value
        clone._encoding = self._encoding
        return clone

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self.set_field_name(name)

    @property
    def value(self) -> Optional[str]:
        return self._value

    @value.setter
    def value(self, value) -> None:
        self.set_field_value(value)

    @property
    def encoding(self) -> str:
        return self.get_encoding()

    @encoding.setter
    def encoding(self, encoding: Optional[str]) -> None:
        self.set_encoding(encoding)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"HeaderField(name={self._name!r}, value={self._value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, HeaderField):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    __hash__ = None
