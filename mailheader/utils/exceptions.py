"""
mailheader Custom Exceptions

Centralized exception classes for error handling.
"""


class MailHeaderBaseException(Exception):
    """Base exception for all mailheader errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Parsing Exceptions
# ============================================================================

class ParsingError(MailHeaderBaseException):
    """Error parsing a raw header line."""
    pass


class FormatError(ParsingError):
    """Header line does not match the format ``name:value``."""
    pass


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(MailHeaderBaseException):
    """Input validation failed."""
    pass


class InvalidHeaderNameError(ValidationError):
    """Header name is empty or contains disallowed characters."""
    pass


class InvalidHeaderValueError(ValidationError):
    """Header value contains disallowed characters or malformed folding."""
    pass


class UnencodableValueError(ValidationError):
    """Header value cannot be represented as printable US-ASCII lines."""
    pass


# ============================================================================
# State Exceptions
# ============================================================================

class StateError(MailHeaderBaseException):
    """Operation is not possible in the field's current state."""
    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(MailHeaderBaseException):
    """Application configuration error."""
    pass
