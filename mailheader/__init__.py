"""
mailheader

Parse, validate, normalize and MIME-encode single email header fields.
"""

from mailheader.services.header import EncodedWordCodec, HeaderField
from mailheader.models.header import HeaderFormat
from mailheader.utils.constants import APP_VERSION as __version__

__all__ = [
    "EncodedWordCodec",
    "HeaderField",
    "HeaderFormat",
    "__version__",
]
