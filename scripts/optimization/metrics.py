"""Matcher-based metrics for DSPy evaluation."""

import logging
import numbers
import re
from typing import Any, Dict

import dspy

from components.constants import DEFAULT_EPSILON, NULL_VALUES
from matchers import MatcherRegistry

logger = logging.getLogger(__name__)


class MatcherMetric:
    """DSPy metric scoring one field of a prediction with a registered matcher."""

    def __init__(self, field_name: str, field_config: Dict[str, Any] | None = None):
        """Initialize metric from field config.

        Args:
            field_name: Name of the field
            field_config: ``matcher`` name (default ``close_to``) and optional
                ``params`` passed to the matcher, e.g. epsilon and precision
        """
        field_config = field_config or {}
        self.field_name = field_name
        self.matcher_name = str(field_config.get("matcher", "close_to")).lower()
        self.params = dict(field_config.get("params", {}))

        # fail fast on unknown matcher names
        MatcherRegistry.get(self.matcher_name)
        if self.matcher_name == "close_to":
            self.params.setdefault("epsilon", DEFAULT_EPSILON)

    @staticmethod
    def _extract(obj, field_name):
        if isinstance(obj, dict):
            return obj.get(field_name)
        return getattr(obj, field_name, None)

    @staticmethod
    def _is_null(val: Any) -> bool:
        if val is None:
            return True
        if isinstance(val, str):
            return val.strip().lower() in NULL_VALUES
        return False

    @staticmethod
    def _parse_number(val: Any) -> Any:
        if isinstance(val, str):
            # "5%" -> 5.0, "$1,234.56" -> 1234.56
            s = val.strip().replace("%", "")
            s = re.sub(r"[$€¥£]", "", s)
            s = s.replace(",", "").replace(" ", "")
            try:
                return float(s)
            except ValueError:
                return None
        if isinstance(val, numbers.Real) and not isinstance(val, bool):
            return val
        return None

    def evaluate(self, gold: Any, pred: Any) -> dspy.Prediction:
        """Score ``pred`` against ``gold`` and explain the result."""
        gold_val = self._extract(gold, self.field_name)
        pred_val = self._extract(pred, self.field_name)

        gold_is_null = self._is_null(gold_val)
        pred_is_null = self._is_null(pred_val)

        if gold_is_null and pred_is_null:
            return dspy.Prediction(score=1.0, feedback=f"✓ {self.field_name}: Both null")
        if gold_is_null:
            return dspy.Prediction(score=0.0, feedback=f"✗ {self.field_name}: Hallucination (predicted {str(pred_val)[:50]} when gold is null)")
        if pred_is_null:
            return dspy.Prediction(score=0.0, feedback=f"✗ {self.field_name}: Missing (expected {str(gold_val)[:50]}, got null)")

        if self.matcher_name == "close_to":
            # LM outputs arrive as text
            gold_num, pred_num = self._parse_number(gold_val), self._parse_number(pred_val)
            if gold_num is None or pred_num is None:
                return dspy.Prediction(score=0.0, feedback=f"✗ {self.field_name}: Parse error (gold={gold_val}, pred={pred_val})")
            gold_val, pred_val = gold_num, pred_num

        matcher = MatcherRegistry.for_value(self.matcher_name, gold_val, **self.params)
        result = matcher.matches(pred_val)
        if result:
            return dspy.Prediction(score=1.0, feedback=f"✓ {self.field_name}: {gold_val} → {pred_val}")
        return dspy.Prediction(score=0.0, feedback=f"✗ {self.field_name}: expected {matcher}, {result.description}")

    def __call__(self, gold: Any, pred: Any, trace=None, pred_name=None, pred_trace=None) -> float:
        """Evaluate prediction using matcher."""
        result = self.evaluate(gold, pred)
        logger.debug(result.feedback)
        return result.score
