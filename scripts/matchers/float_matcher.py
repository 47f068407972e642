"""Approximate equality matcher for binary floating point values."""

import numbers
from typing import Any

import numpy as np

from components.constants import PRECISIONS
from matchers.base_matcher import BaseMatcher, MatchResult, failure, success


def _is_real(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.integer, np.floating))


def _resolve_precision(precision: Any) -> type:
    if isinstance(precision, str):
        if precision.lower() not in PRECISIONS:
            raise ValueError(f"Unknown precision: {precision}. Must be one of {sorted(PRECISIONS)}")
        return PRECISIONS[precision.lower()]

    dtype = np.dtype(precision)
    if dtype.kind != "f":
        raise ValueError(f"Precision must be a floating type, got {dtype}")
    return dtype.type


def _to_float(value: Any, float_type: type):
    try:
        return float_type(value)
    except OverflowError:
        # integers beyond the float range
        return float_type(np.inf if value > 0 else -np.inf)


class CloseTo(BaseMatcher):
    """Compare floating point values using a relative error metric.

    Three checks are tried in order, with a and b the magnitudes of the two
    operands and d = |a - b|:

    1. ``a == b`` (also covers infinities, where subtraction gives NaN);
    2. when either side is zero or d is below the smallest normal value,
       relative error is meaningless, so require
       ``d < epsilon * smallest_normal``;
    3. otherwise require ``d / min(a + b, max) < epsilon``.

    See https://floating-point-gui.de/errors/comparison/ for background.

    Comparisons run in the precision given at construction, or else in the
    widest numpy floating type among expected, epsilon and actual (double
    when all are plain Python numbers).
    """

    def __init__(self, expected: Any, epsilon: Any, precision: Any = None):
        if not _is_real(expected):
            raise TypeError(f"close_to expected value must be numeric, got {expected!r}")
        if not _is_real(epsilon):
            raise TypeError(f"close_to epsilon must be numeric, got {epsilon!r}")

        self.expected = expected
        self.epsilon = epsilon
        self.precision = _resolve_precision(precision) if precision is not None else None

    def __str__(self) -> str:
        return repr(self.expected)

    def _float_type(self, actual: Any) -> type:
        if self.precision is not None:
            return self.precision

        widest = None
        for value in (self.expected, self.epsilon, actual):
            if isinstance(value, np.floating):
                widest = value.dtype if widest is None else np.promote_types(widest, value.dtype)
        return np.float64 if widest is None else widest.type

    def matches(self, actual: Any) -> MatchResult:
        if not _is_real(actual):
            return failure(f"was {actual!r}")

        float_type = self._float_type(actual)
        info = np.finfo(float_type)

        with np.errstate(all="ignore"):
            epsilon = _to_float(self.epsilon, float_type)
            a = abs(_to_float(self.expected, float_type))
            b = abs(_to_float(actual, float_type))
            d = abs(a - b)

            close = (
                # shortcut, handles infinities
                a == b
                # relative error is less meaningful at or near zero
                or ((a == 0 or b == 0 or d < info.smallest_normal) and d < epsilon * info.smallest_normal)
                # a + b may overflow
                or d / np.minimum(a + b, info.max) < epsilon
            )

        if close:
            return success()
        return failure(f"was {actual!r}")


def close_to(expected: Any, epsilon: Any, precision: Any = None) -> CloseTo:
    """Match values within relative tolerance ``epsilon`` of ``expected``."""
    return CloseTo(expected, epsilon, precision=precision)
