"""
Scoring methods and the ranking algorithm.

Two interchangeable methods, selected per classification request:

- Vector projection: rank = profile . archetype. On unit vectors this is
  the cosine of the angle between them.
- Angular distance: rank = 1 / angle(archetype, profile). A zero angle
  is resolved by the DegenerateAnglePolicy rather than dividing by zero.

Both produce "higher is more similar" rank values.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..core.errors import DegenerateAngleError
from ..core.types import EXACT_MATCH_RANK, DegenerateAnglePolicy, ScoreMethod
from ..vectors.entity import VectorEntity
from .ranking import Ranking, Score

logger = logging.getLogger(__name__)

Scorer = Callable[[VectorEntity, VectorEntity, DegenerateAnglePolicy], Score]


def vector_projection(
    profile: VectorEntity,
    archetype: VectorEntity,
    degenerate_policy: DegenerateAnglePolicy = DegenerateAnglePolicy.SENTINEL,
) -> Score:
    """Score an archetype by the projection of the profile onto it."""
    return Score(name=archetype.name, rank_value=profile.dot(archetype))


def angular_distance(
    profile: VectorEntity,
    archetype: VectorEntity,
    degenerate_policy: DegenerateAnglePolicy = DegenerateAnglePolicy.SENTINEL,
) -> Score:
    """
    Score an archetype by the reciprocal of its angle to the profile.

    Raises:
        DegenerateAngleError: If the angle is 0 and the policy is ERROR
    """
    theta = archetype.angle(profile)
    if theta == 0.0:
        if degenerate_policy is DegenerateAnglePolicy.ERROR:
            raise DegenerateAngleError(profile.name, archetype.name)
        logger.debug("Exact angular match: %s ~ %s", profile.name, archetype.name)
        return Score(name=archetype.name, rank_value=EXACT_MATCH_RANK)
    return Score(name=archetype.name, rank_value=1.0 / theta)


SCORERS: dict[ScoreMethod, Scorer] = {
    ScoreMethod.VECTOR_PROJECTION: vector_projection,
    ScoreMethod.ANGULAR_DISTANCE: angular_distance,
}


def get_scorer(method: ScoreMethod | str) -> Scorer:
    """
    Resolve a scoring method to its scoring function.

    Raises:
        ValueError: If the method is not a known ScoreMethod
    """
    return SCORERS[ScoreMethod(method)]


def rank(
    profile: VectorEntity,
    archetypes: Iterable[VectorEntity],
    method: ScoreMethod | str = ScoreMethod.VECTOR_PROJECTION,
    degenerate_policy: DegenerateAnglePolicy = DegenerateAnglePolicy.SENTINEL,
) -> Ranking:
    """
    Score a profile against every archetype and order the results.

    Args:
        profile: Normalized profile sharing the archetypes' facet schema
        archetypes: Normalized reference entities
        method: Scoring method
        degenerate_policy: Zero-angle handling for angular distance

    Returns:
        Ranking yielding the most similar archetype first
    """
    scorer = get_scorer(method)
    ranking = Ranking()
    for archetype in archetypes:
        ranking.push(scorer(profile, archetype, degenerate_policy))
    return ranking
