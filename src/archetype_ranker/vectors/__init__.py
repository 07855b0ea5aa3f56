"""
Vector entity module.

Named-facet vectors and the similarity primitives the ranking engine
builds on: dot product, magnitude, normalization, cosine and angle.
"""

from .entity import (
    VectorEntity,
    angle,
    cos_theta,
    dot,
    magnitude,
    normalize,
    radians_to_degrees,
)

__all__ = [
    "VectorEntity",
    "angle",
    "cos_theta",
    "dot",
    "magnitude",
    "normalize",
    "radians_to_degrees",
]
