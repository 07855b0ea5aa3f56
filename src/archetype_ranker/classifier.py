"""
Archetype classifier.

Owns the archetype collection for its whole lifetime and ranks profiles
against it. The collection is loaded and normalized before construction
and never modified afterwards, so concurrent classify() calls need no
locking once the constructor has returned.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .core.errors import ArchetypeError, FacetKeyMismatchError
from .core.types import DegenerateAnglePolicy, ModelFormat, ScoreMethod
from .loaders import load_entities
from .ranking import Ranking, rank
from .vectors import VectorEntity

logger = logging.getLogger(__name__)


class Classifier:
    """
    Ranks profiles against a fixed set of archetypes.

    Usage:
        classifier = Classifier.from_file("assets/archetypes.json")
        ranking = classifier.classify(profile, ScoreMethod.VECTOR_PROJECTION)
        while ranking:
            best = ranking.pop()
    """

    def __init__(
        self,
        archetypes: Iterable[VectorEntity],
        degenerate_policy: DegenerateAnglePolicy | str = DegenerateAnglePolicy.SENTINEL,
    ):
        """
        Initialize the classifier.

        Args:
            archetypes: Normalized archetypes sharing one facet schema
            degenerate_policy: Zero-angle handling for angular distance

        Raises:
            ArchetypeError: If no archetypes are given
            FacetKeyMismatchError: If the archetypes' facet schemas differ
        """
        self._archetypes: tuple[VectorEntity, ...] = tuple(archetypes)
        self._degenerate_policy = DegenerateAnglePolicy(degenerate_policy)

        if not self._archetypes:
            raise ArchetypeError("classifier needs at least one archetype")

        first = self._archetypes[0]
        for archetype in self._archetypes[1:]:
            if archetype.facet_names != first.facet_names:
                raise FacetKeyMismatchError(
                    first.name,
                    archetype.name,
                    missing=first.facet_names - archetype.facet_names,
                    extra=archetype.facet_names - first.facet_names,
                )
        self._facet_names = first.facet_names

        logger.debug(
            "Classifier ready: %d archetypes over %d facets",
            len(self._archetypes),
            len(self._facet_names),
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        model_format: ModelFormat | str | None = None,
        degenerate_policy: DegenerateAnglePolicy | str = DegenerateAnglePolicy.SENTINEL,
    ) -> "Classifier":
        """Load, normalize and own the archetypes stored in a model file."""
        return cls(load_entities(path, model_format), degenerate_policy=degenerate_policy)

    # =========================================================================
    # Archetype Access
    # =========================================================================

    @property
    def archetypes(self) -> tuple[VectorEntity, ...]:
        """The owned archetype collection, in load order."""
        return self._archetypes

    @property
    def facet_names(self) -> frozenset[str]:
        """Facet schema every profile must match."""
        return self._facet_names

    @property
    def degenerate_policy(self) -> DegenerateAnglePolicy:
        return self._degenerate_policy

    def __len__(self) -> int:
        return len(self._archetypes)

    def __iter__(self) -> Iterator[VectorEntity]:
        return iter(self._archetypes)

    # =========================================================================
    # Classification
    # =========================================================================

    def classify(
        self,
        profile: VectorEntity,
        method: ScoreMethod | str = ScoreMethod.VECTOR_PROJECTION,
    ) -> Ranking:
        """
        Rank every archetype against a profile.

        Args:
            profile: Normalized profile with the archetypes' facet schema
            method: Scoring method

        Returns:
            Fresh Ranking, most similar archetype first

        Raises:
            FacetKeyMismatchError: If the profile's facet schema differs
            DegenerateAngleError: On an exact angular match under the ERROR policy
        """
        method = ScoreMethod(method)
        ranking = rank(profile, self._archetypes, method, self._degenerate_policy)
        logger.debug(
            "Classified %s with %s against %d archetypes",
            profile.name,
            method.value,
            len(ranking),
        )
        return ranking
