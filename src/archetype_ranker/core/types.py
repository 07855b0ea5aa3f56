"""
Core types and constants for the ranking engine.

This module provides:
- ScoreMethod: the closed set of scoring methods
- DegenerateAnglePolicy: what angular scoring does at a zero angle
- ModelFormat: the on-disk model formats the loader understands
"""

from enum import Enum
from pathlib import Path

import numpy as np


# Reserved record field holding the entity name; every other field is a facet.
NAME_KEY = "name"

# Rank value given to an exact angular match under the sentinel policy.
# Larger than any finite reciprocal angle a float32 computation can produce.
EXACT_MATCH_RANK = float(np.finfo(np.float32).max)


class ScoreMethod(str, Enum):
    """Scoring methods available to the classifier."""

    VECTOR_PROJECTION = "vector_projection"
    ANGULAR_DISTANCE = "angular_distance"


class DegenerateAnglePolicy(str, Enum):
    """Angular-distance handling when profile and archetype coincide."""

    SENTINEL = "sentinel"  # rank at EXACT_MATCH_RANK, above all finite values
    ERROR = "error"  # raise DegenerateAngleError


class ModelFormat(str, Enum):
    """Supported model file formats."""

    CSV = "csv"
    JSON = "json"

    @classmethod
    def from_path(cls, path: str | Path) -> "ModelFormat":
        """
        Infer the format from a file suffix.

        Raises:
            ValueError: If the suffix is not a known format
        """
        suffix = Path(path).suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            raise ValueError(
                f"Cannot infer model format from {path!s}; "
                f"expected one of: {', '.join(f.value for f in cls)}"
            ) from None
