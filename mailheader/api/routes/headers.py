"""
mailheader Header API Routes

Endpoints for parsing, serializing and validating single header fields.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mailheader.api.dependencies import get_header_codec, get_settings
from mailheader.models.header import (
    HeaderFieldModel,
    ParseHeaderRequest,
    SerializeHeaderRequest,
    ValidateHeaderRequest,
    ValidateHeaderResponse,
)
from mailheader.services.header import HeaderField
from mailheader.utils.constants import FIELD_SEPARATOR
from mailheader.utils.exceptions import ParsingError, StateError, ValidationError
from mailheader.utils.validators import (
    classify_charset,
    filter_header_name,
    filter_header_value,
    is_valid_header_name,
    is_valid_header_value,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/headers", tags=["headers"])


def _sanitize_line(line: str) -> str:
    """Filter the name and value parts of a line separately."""
    if FIELD_SEPARATOR not in line:
        return line
    name, value = line.split(FIELD_SEPARATOR, 1)
    return filter_header_name(name) + FIELD_SEPARATOR + filter_header_value(value)


@router.post("/parse", response_model=HeaderFieldModel)
async def parse_header(
    request: ParseHeaderRequest,
    settings = Depends(get_settings),
):
    """
    Parse a raw header line.

    Returns:
        Normalized name, decoded value and re-encoded wire line
    """
    line = _sanitize_line(request.line) if request.sanitize else request.line

    try:
        field = HeaderField.from_string(line, settings)
        return field.to_model()
    except (ParsingError, ValidationError) as e:
        logger.info(f"Rejected header line: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/serialize", response_model=HeaderFieldModel)
async def serialize_header(
    request: SerializeHeaderRequest,
    settings = Depends(get_settings),
):
    """
    Build a header field from a name and decoded value.

    Returns:
        The field with its wire line
    """
    try:
        field = HeaderField(request.name, request.value, settings)
        if request.encoding:
            field.set_encoding(request.encoding)
        return field.to_model()
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/validate", response_model=ValidateHeaderResponse)
async def validate_header(
    request: ValidateHeaderRequest,
    codec = Depends(get_header_codec),
):
    """Run the name and value validators without building a field."""
    response = ValidateHeaderResponse()

    if request.name is not None:
        response.name_valid = is_valid_header_name(request.name)

    if request.value is not None:
        response.value_valid = is_valid_header_value(request.value)
        response.value_encodable = codec.can_be_encoded(request.value)
        response.charset = classify_charset(
            request.value,
            codec.settings.ascii_charset,
            codec.settings.charset,
        )

    return response
