"""Value matchers for test assertions."""

from matchers.base_matcher import BaseMatcher, MatchResult, assert_that, failure, success
from matchers.float_matcher import CloseTo, close_to
from matchers.matcher_registry import MatcherRegistry
from matchers.type_matcher import TypeOf, type_of

__all__ = [
    "BaseMatcher",
    "MatchResult",
    "success",
    "failure",
    "assert_that",
    "CloseTo",
    "close_to",
    "TypeOf",
    "type_of",
    "MatcherRegistry",
]
