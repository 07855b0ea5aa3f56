"""
Named-facet vector entity with similarity primitives.

A VectorEntity maps facet names to weights held at float32 precision.
Arithmetic is carried out in float64 over those stored values, so that
identities such as angle(v, v) == 0 hold well inside a 1e-6 tolerance.

Comparisons require identical facet key sets on both sides. A partial
overlap is never silently reduced to the shared keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..core.errors import (
    FacetKeyMismatchError,
    MalformedRecordError,
    ZeroMagnitudeVectorError,
)

# Default tolerance for "is this a unit vector" checks
UNIT_TOLERANCE = 1e-6

FLOAT32_MAX = float(np.finfo(np.float32).max)


def _to_float32(name: str, facet: str, value: Any) -> float:
    """Coerce a facet weight to float32 precision, rejecting non-numeric input."""
    if isinstance(value, bool):
        raise MalformedRecordError(
            f"could not parse value {value!r} for facet {facet!r} of {name!r}"
        )
    try:
        weight = float(value)
    except (TypeError, ValueError):
        raise MalformedRecordError(
            f"could not parse value {value!r} for facet {facet!r} of {name!r}"
        ) from None
    if not math.isfinite(weight) or abs(weight) > FLOAT32_MAX:
        raise MalformedRecordError(
            f"value {value!r} for facet {facet!r} of {name!r} is not a finite float32"
        )
    return float(np.float32(weight))


@dataclass(eq=True)
class VectorEntity:
    """
    A named point in facet space.

    Attributes:
        name: Identifier of the entity (archetype or profile name)
        facets: Facet name -> weight, stored at float32 precision

    Entities are built once from loaded records and normalized in place
    right after construction. Nothing mutates them afterwards.
    """

    name: str
    facets: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise MalformedRecordError("entity name must be a non-empty string")
        if not self.facets:
            raise MalformedRecordError(f"entity {self.name!r} has no facets")
        self.facets = {
            str(facet): _to_float32(self.name, facet, value)
            for facet, value in self.facets.items()
        }

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def facet_names(self) -> frozenset[str]:
        """The facet key set of this entity."""
        return frozenset(self.facets)

    def __len__(self) -> int:
        """Number of facets."""
        return len(self.facets)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON model record shape."""
        return {"name": self.name, "facets": dict(self.facets)}

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def _aligned(self, other: "VectorEntity") -> tuple[np.ndarray, np.ndarray]:
        """
        Pair up the weights of both entities over the keys of self.

        Raises:
            FacetKeyMismatchError: If the facet key sets are not identical
        """
        if self.facets.keys() != other.facets.keys():
            raise FacetKeyMismatchError(
                self.name,
                other.name,
                missing=self.facets.keys() - other.facets.keys(),
                extra=other.facets.keys() - self.facets.keys(),
            )
        keys = list(self.facets)
        left = np.fromiter((self.facets[k] for k in keys), dtype=np.float64, count=len(keys))
        right = np.fromiter((other.facets[k] for k in keys), dtype=np.float64, count=len(keys))
        return left, right

    def dot(self, other: "VectorEntity") -> float:
        """Dot product over the shared facet schema."""
        left, right = self._aligned(other)
        return float(np.dot(left, right))

    def magnitude(self) -> float:
        """Euclidean norm; 0.0 for an all-zero vector."""
        values = np.fromiter(self.facets.values(), dtype=np.float64, count=len(self.facets))
        return float(np.sqrt(np.dot(values, values)))

    def is_normalized(self, tolerance: float = UNIT_TOLERANCE) -> bool:
        """Whether this entity is a unit vector within tolerance."""
        return abs(self.magnitude() - 1.0) <= tolerance

    def normalize(self) -> None:
        """
        Scale every facet weight in place so the vector has unit length.

        Raises:
            ZeroMagnitudeVectorError: If the vector is all zeros
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroMagnitudeVectorError(self.name)
        self.facets = {
            facet: float(np.float32(weight / mag)) for facet, weight in self.facets.items()
        }

    def normalized(self) -> "VectorEntity":
        """Return a normalized copy, leaving this entity untouched."""
        copy = VectorEntity(name=self.name, facets=dict(self.facets))
        copy.normalize()
        return copy

    def cos_theta(self, other: "VectorEntity") -> float:
        """
        Cosine of the angle between two entities.

        Mathematically in [-1, 1]; rounding can push it slightly outside.
        Evaluated as dot / sqrt(|a|^2 * |b|^2), which yields exactly 1.0 for
        two entities with identical weights.

        Raises:
            FacetKeyMismatchError: If the facet key sets differ
            ZeroMagnitudeVectorError: If either entity is all zeros
        """
        left, right = self._aligned(other)
        squared_self = float(np.dot(left, left))
        if squared_self == 0.0:
            raise ZeroMagnitudeVectorError(self.name)
        squared_other = float(np.dot(right, right))
        if squared_other == 0.0:
            raise ZeroMagnitudeVectorError(other.name)
        return float(np.dot(left, right)) / math.sqrt(squared_self * squared_other)

    def angle(self, other: "VectorEntity") -> float:
        """Angle in radians, with the cosine clamped into arccos' domain."""
        cos = min(1.0, max(-1.0, self.cos_theta(other)))
        return math.acos(cos)


# =============================================================================
# Functional helpers
# =============================================================================


def dot(a: VectorEntity, b: VectorEntity) -> float:
    return a.dot(b)


def magnitude(v: VectorEntity) -> float:
    return v.magnitude()


def normalize(v: VectorEntity) -> None:
    v.normalize()


def cos_theta(a: VectorEntity, b: VectorEntity) -> float:
    return a.cos_theta(b)


def angle(a: VectorEntity, b: VectorEntity) -> float:
    return a.angle(b)


def radians_to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * 180.0 / math.pi
