"""
mailheader Field-Name Strategies

Per-header behaviour selected by field name, applied to the raw value of a
parsed line before it is validated.
"""

import base64
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from mailheader.config import Settings
from mailheader.utils.constants import SUBJECT_CHARSET, SUBJECT_MARKER
from mailheader.utils.helpers import unfold

from .encoded_words import is_encoded_word_shaped

logger = logging.getLogger(__name__)


class PreEncodingStrategy(ABC):
    """
    Abstract base class for field-name strategies.

    Each strategy must define:
    - strategy_id: Unique identifier
    - description: What the strategy does

    Each strategy must implement:
    - matches(): Whether it applies to a field name
    - apply(): Transform the trimmed raw value
    """

    strategy_id: str = "base"
    description: str = "Base pre-encoding strategy"

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def is_enabled(self, settings: Settings) -> bool:
        return True

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Check whether the strategy applies to a (trimmed) field name."""
        pass

    @abstractmethod
    def apply(self, value: str, settings: Settings) -> str:
        """Return the value to validate and decode in place of the raw one."""
        pass


class StrategyRegistry:
    """Registry of all field-name strategies."""

    _instance = None
    _strategies: List[PreEncodingStrategy] = []

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._strategies = []
        return cls._instance

    def register(self, strategy: PreEncodingStrategy) -> None:
        """Register a strategy; later registrations win for the same id."""
        self._strategies = [s for s in self._strategies if s.strategy_id != strategy.strategy_id]
        self._strategies.append(strategy)

    def unregister(self, strategy_id: str) -> bool:
        """Remove a strategy by id."""
        before = len(self._strategies)
        self._strategies = [s for s in self._strategies if s.strategy_id != strategy_id]
        return len(self._strategies) != before

    def get_all_strategies(self) -> List[PreEncodingStrategy]:
        """Get all registered strategies."""
        return list(self._strategies)

    def find(self, name: str) -> Optional[PreEncodingStrategy]:
        """Get the first strategy matching a field name."""
        for strategy in self._strategies:
            if strategy.matches(name):
                return strategy
        return None


# Global registry
strategy_registry = StrategyRegistry()


def register_strategy(strategy_class: type) -> type:
    """Decorator to register a strategy class."""
    strategy_registry.register(strategy_class())
    return strategy_class


def get_strategy(name: str) -> Optional[PreEncodingStrategy]:
    """Get the strategy selected by a field name, if any."""
    return strategy_registry.find(name)


def pre_encode(name: str, value: str, settings: Settings) -> str:
    """
    Apply the strategy selected by the field name to a raw value.

    Args:
        name: Trimmed field name as found in the line
        value: Trimmed raw value
        settings: Active settings

    Returns:
        The value to validate and decode
    """
    strategy = get_strategy(name)
    if strategy is None or not strategy.is_enabled(settings):
        return value
    return strategy.apply(value, settings)


@register_strategy
class SubjectStrategy(PreEncodingStrategy):
    """
    Accept raw 8-bit subjects.

    Any field whose name contains "subject" and whose value is not already
    an encoded word is wrapped whole into a UTF-8 base64 encoded word, so
    the value validator sees ASCII and decoding restores the original text.
    """

    strategy_id = "subject"
    description = "Wrap raw subject text as a UTF-8 base64 encoded word"

    def is_enabled(self, settings: Settings) -> bool:
        return settings.subject_pre_encoding

    def matches(self, name: str) -> bool:
        return SUBJECT_MARKER in name.lower()

    def apply(self, value: str, settings: Settings) -> str:
        if not value or is_encoded_word_shaped(value):
            return value

        try:
            data = unfold(value).encode(SUBJECT_CHARSET)
        except UnicodeEncodeError:
            # Leave it to the value validator to reject
            return value

        self.logger.debug(f"Pre-encoding subject value of {len(data)} bytes")
        return f"=?{SUBJECT_CHARSET}?B?{base64.b64encode(data).decode('ascii')}?="
