"""Base class and outcome type for value matchers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a single match: pass, or fail with a description."""

    matched: bool
    description: str | None = None

    def __bool__(self) -> bool:
        return self.matched

    @property
    def score(self) -> float:
        return 1.0 if self.matched else 0.0


def success() -> MatchResult:
    return MatchResult(True)


def failure(description: str) -> MatchResult:
    return MatchResult(False, description)


class BaseMatcher(ABC):
    """Base class for value matching."""

    @abstractmethod
    def matches(self, actual: Any) -> MatchResult:
        """Return the outcome of comparing ``actual`` with the expectation."""
        pass

    @abstractmethod
    def __str__(self) -> str:
        """Label used in failure summaries."""
        pass

    def __call__(self, actual: Any) -> MatchResult:
        return self.matches(actual)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"

    @classmethod
    def for_value(cls, value: Any, **params) -> "BaseMatcher":
        """Build a matcher expecting ``value``.

        Subclasses whose expectation is not the value itself (e.g. its type)
        override this.
        """
        return cls(value, **params)


def assert_that(actual: Any, matcher: BaseMatcher, reason: str = "") -> None:
    """Raise AssertionError when ``actual`` does not satisfy ``matcher``."""
    result = matcher.matches(actual)
    if result:
        return

    lines = [reason] if reason else []
    lines.append(f"Expected: {matcher}")
    lines.append(f"     but: {result.description}")
    raise AssertionError("\n".join(lines))
