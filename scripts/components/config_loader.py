"""Load field expectations from YAML and turn them into matchers."""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from components.constants import DEFAULT_EPSILON, TYPE_NAMES
from matchers import BaseMatcher, MatcherRegistry

logger = logging.getLogger(__name__)


def load_config(config_path: str | Path) -> Dict[str, Any]:
    """Load YAML expectations file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict) or not isinstance(config.get("fields"), dict):
        raise ValueError(f"Invalid config file: 'fields' mapping not found in {config_path}")

    return config


def _as_float(value: Any, key: str, field_name: str) -> float:
    # PyYAML reads exponents without a dot ("1e-5") as strings
    if isinstance(value, bool):
        raise ValueError(f"Field '{field_name}': '{key}' must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Field '{field_name}': '{key}' must be a number, got {value!r}") from None


def build_matcher(field_name: str, field_config: Dict[str, Any]) -> BaseMatcher:
    """Create matcher for a single field config."""
    if not isinstance(field_config, dict):
        raise ValueError(f"Field '{field_name}': config must be a mapping, got {field_config!r}")

    matcher_type = str(field_config.get("matcher", "close_to")).lower()

    if "expected" not in field_config:
        raise ValueError(f"Field '{field_name}': 'expected' is required")
    expected = field_config["expected"]

    if matcher_type == "type_of":
        type_key = str(expected).lower()
        if type_key not in TYPE_NAMES:
            raise ValueError(f"Field '{field_name}': unknown type '{expected}'. Must be one of {sorted(TYPE_NAMES)}")
        return MatcherRegistry.create("type_of", TYPE_NAMES[type_key])

    if matcher_type == "close_to":
        return MatcherRegistry.create(
            "close_to",
            _as_float(expected, "expected", field_name),
            _as_float(field_config.get("epsilon", DEFAULT_EPSILON), "epsilon", field_name),
            precision=field_config.get("precision"),
        )

    params = {k: v for k, v in field_config.items() if k not in ("matcher", "expected")}
    return MatcherRegistry.create(matcher_type, expected, **params)


def load_field_matchers(config_path: str | Path) -> Dict[str, BaseMatcher]:
    """Load {field_name: matcher} from a YAML expectations file."""
    fields = load_config(config_path)["fields"]

    field_matchers = {}
    for name, field_config in fields.items():
        field_matchers[name] = build_matcher(name, {} if field_config is None else field_config)
        logger.debug(f"{name}: {field_matchers[name]!r}")

    logger.info(f"Loaded {len(field_matchers)} field matchers from {config_path}")
    return field_matchers
