"""Registry for matcher types."""

import logging
from typing import Any

from matchers.base_matcher import BaseMatcher
from matchers.float_matcher import CloseTo
from matchers.type_matcher import TypeOf

logger = logging.getLogger(__name__)


class MatcherRegistry:
    """Registry for matcher types."""

    _matchers = {
        "close_to": CloseTo,
        "type_of": TypeOf,
    }

    @classmethod
    def get(cls, matcher_type: str) -> type:
        """Look up a matcher class by name."""
        matcher_cls = cls._matchers.get(matcher_type.lower())
        if matcher_cls is None:
            raise ValueError(f"Unknown matcher type: {matcher_type}. Available: {cls.available()}")
        return matcher_cls

    @classmethod
    def create(cls, matcher_type: str, *args, **kwargs) -> BaseMatcher:
        """Create matcher by name."""
        return cls.get(matcher_type)(*args, **kwargs)

    @classmethod
    def for_value(cls, matcher_type: str, value: Any, **params) -> BaseMatcher:
        """Create matcher whose expectation is derived from a reference value."""
        return cls.get(matcher_type).for_value(value, **params)

    @classmethod
    def register(cls, matcher_type: str, matcher_cls: type):
        """Register custom matcher."""
        if matcher_type.lower() in cls._matchers:
            logger.info(f"Replacing matcher '{matcher_type}' with {matcher_cls.__name__}")
        cls._matchers[matcher_type.lower()] = matcher_cls

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._matchers)
