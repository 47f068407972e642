"""Check whole records against per-field matchers."""

import logging
from typing import Any

from matchers import BaseMatcher, MatchResult, failure

logger = logging.getLogger(__name__)

_MISSING = object()


def _extract(obj, field_name):
    if isinstance(obj, dict):
        return obj.get(field_name, _MISSING)
    return getattr(obj, field_name, _MISSING)


def check_record(record: Any, field_matchers: dict[str, BaseMatcher]) -> tuple[float, dict]:
    """
    Run every field matcher against its value in ``record``.

    Args:
        record: dict or object holding the actual values
        field_matchers: {field_name: matcher}

    Returns:
        score: mean per-field score in [0, 1]
        details: dict with field-level breakdown
    """
    if not field_matchers:
        return 1.0, {"field_results": {}, "avg_score": 1.0, "failed_fields": 0, "total_fields": 0}

    field_results: dict[str, MatchResult] = {}
    for name, matcher in field_matchers.items():
        value = _extract(record, name)
        if value is _MISSING:
            field_results[name] = failure("missing")
        else:
            field_results[name] = matcher.matches(value)

    avg_score = sum(r.score for r in field_results.values()) / len(field_results)
    failed = [name for name, r in field_results.items() if not r]
    if failed:
        logger.debug(f"Failed fields: {failed}")

    details = {
        "field_results": field_results,
        "avg_score": avg_score,
        "failed_fields": len(failed),
        "total_fields": len(field_results),
    }
    return avg_score, details
