"""Shared constants for value matchers and their configuration."""

import numpy as np

# Relative tolerance used when a close_to expectation omits epsilon
DEFAULT_EPSILON = 1e-5

# Floating precisions accepted by close_to, by name
PRECISIONS = {
    "float32": np.float32,
    "single": np.float32,
    "f32": np.float32,
    "float64": np.float64,
    "double": np.float64,
    "f64": np.float64,
}

# Type names accepted by type_of expectations in YAML configs
TYPE_NAMES = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "list": list,
    "dict": dict,
    "null": type(None),
    "none": type(None),
    "float32": np.float32,
    "float64": np.float64,
}

# Values treated as "no value" by the metric adapter
NULL_VALUES = {
    "",
    "null",
    "none",
    "n/a",
}
