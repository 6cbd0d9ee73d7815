"""
mailheader Header Services

Header field entity, encoded-word codec and field-name strategies.
"""

from .encoded_words import EncodedWordCodec, is_encoded_word_shaped
from .strategies import (
    PreEncodingStrategy,
    SubjectStrategy,
    get_strategy,
    pre_encode,
    register_strategy,
    strategy_registry,
)
from .field import HeaderField

__all__ = [
    'EncodedWordCodec',
    'is_encoded_word_shaped',
    'PreEncodingStrategy',
    'SubjectStrategy',
    'get_strategy',
    'pre_encode',
    'register_strategy',
    'strategy_registry',
    'HeaderField',
]
