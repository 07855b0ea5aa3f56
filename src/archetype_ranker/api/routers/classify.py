"""
Classification router - ranks archetypes against a submitted profile.

Endpoints:
- GET /archetypes - List loaded archetypes and the shared facet schema
- POST /classify - Rank every archetype against one profile
"""

import logging

from fastapi import APIRouter

from ..dependencies import ClassifierDependency, SettingsDependency
from ..errors import DataError
from ...core.errors import ArchetypeError
from ...core.models import (
    ArchetypesResponse,
    ArchetypeSummary,
    ClassifyRequest,
    RankingResponse,
)
from ...report import ranking_to_response
from ...vectors import VectorEntity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/archetypes", response_model=ArchetypesResponse)
def list_archetypes(classifier: ClassifierDependency) -> ArchetypesResponse:
    """List the loaded archetypes with their normalized facets."""
    return ArchetypesResponse(
        count=len(classifier),
        facet_names=sorted(classifier.facet_names),
        archetypes=[
            ArchetypeSummary(name=a.name, facets=dict(a.facets)) for a in classifier
        ],
    )


@router.post("/classify", response_model=RankingResponse)
def classify_profile(
    payload: ClassifyRequest,
    classifier: ClassifierDependency,
    settings: SettingsDependency,
) -> RankingResponse:
    """
    Rank every archetype against the submitted profile.

    The profile must use exactly the archetypes' facet names. It is
    normalized first unless `normalize` is false, in which case it must
    already be a unit vector.

    Errors:
    - FACET_KEY_MISMATCH: facet names differ from the archetypes'
    - ZERO_MAGNITUDE_VECTOR: all facet weights are zero
    - PROFILE_NOT_NORMALIZED: `normalize` is false but the profile is not a unit vector
    - DEGENERATE_ANGLE: exact angular match under the "error" policy
    """
    method = payload.method or settings.default_method
    normalize = settings.normalize_profiles if payload.normalize is None else payload.normalize

    try:
        profile = VectorEntity(name=payload.profile.name, facets=dict(payload.profile.facets))
        if normalize:
            profile.normalize()
        elif not profile.is_normalized():
            raise ArchetypeError(
                f"profile {profile.name!r} is not a unit vector", code="PROFILE_NOT_NORMALIZED"
            )
        ranking = classifier.classify(profile, method)
    except ArchetypeError as e:
        logger.info("Rejected profile %s: %s", payload.profile.name, e.message)
        raise DataError(e) from e

    return ranking_to_response(profile.name, ranking, method, limit=payload.limit)
