"""Runtime type identity matcher."""

import builtins
from typing import Any

from matchers.base_matcher import BaseMatcher, MatchResult, failure, success


def type_name(t: type) -> str:
    """Bare name for builtins, ``module.QualName`` otherwise."""
    if t.__module__ == builtins.__name__:
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


class TypeOf(BaseMatcher):
    """Match values whose type is exactly the expected type (no subclasses)."""

    def __init__(self, expected_type: type):
        if not isinstance(expected_type, type):
            raise TypeError(f"type_of expects a type, got {expected_type!r}")
        self.expected_type = expected_type

    def __str__(self) -> str:
        return f"type_of({type_name(self.expected_type)})"

    def matches(self, actual: Any) -> MatchResult:
        actual_type = type(actual)
        if actual_type is self.expected_type:
            return success()
        return failure(f"type_of({type_name(actual_type)})")

    @classmethod
    def for_value(cls, value: Any, **params) -> "TypeOf":
        return cls(type(value))


def type_of(expected_type: type) -> TypeOf:
    return TypeOf(expected_type)
