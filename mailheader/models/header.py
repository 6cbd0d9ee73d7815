"""
mailheader Header Data Models

Pydantic models for header field snapshots and API payloads.
"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class HeaderFormat(str, Enum):
    """Representation returned by HeaderField.get_field_value()."""
    RAW = "raw"
    ENCODED = "encoded"


class HeaderFieldModel(BaseModel):
    """Snapshot of a parsed or built header field."""
    name: str = Field(..., description="Normalized field name")
    value: str = Field(..., description="Decoded field value")
    encoding: str = Field(..., description="Charset tag: ASCII or UTF-8")
    encoded_value: str = Field(..., description="Value as emitted on the wire")
    line: str = Field(..., description="Serialized header line without trailing CRLF")


class ParseHeaderRequest(BaseModel):
    """Request to parse a raw header line."""
    line: str = Field(..., min_length=1, description="Raw header line, e.g. 'Subject: hello'")
    sanitize: bool = Field(False, description="Strip disallowed characters before parsing")


class SerializeHeaderRequest(BaseModel):
    """Request to build and serialize a header field."""
    name: str = Field(..., min_length=1, description="Field name, normalized on input")
    value: str = Field("", description="Decoded field value")
    encoding: Optional[str] = Field(None, description="Explicit charset tag")


class ValidateHeaderRequest(BaseModel):
    """Request to check a name and/or raw value."""
    name: Optional[str] = Field(None, description="Candidate field name")
    value: Optional[str] = Field(None, description="Candidate raw field value")


class ValidateHeaderResponse(BaseModel):
    """Validator verdicts for a name and/or value."""
    name_valid: Optional[bool] = Field(None, description="Name passes the name validator")
    value_valid: Optional[bool] = Field(None, description="Raw value passes the value validator")
    value_encodable: Optional[bool] = Field(None, description="Value can be emitted as printable ASCII")
    charset: Optional[str] = Field(None, description="Charset the value would be emitted in")
