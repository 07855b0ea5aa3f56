"""
Archetype Ranker

Ranks a profile against a fixed set of archetypes by similarity in a
named-facet trait space, producing archetypes ordered from most to least
similar.

Key Features:
- Named-facet vectors with dot product, normalization and angle primitives
- Two scoring methods: vector projection and angular distance
- CSV and JSON model files, normalized on load
- Command-line runner and HTTP API

Usage:
    from archetype_ranker import Classifier, ScoreMethod, load_entities

    classifier = Classifier.from_file("assets/archetypes.json")
    for profile in load_entities("assets/profiles/example.csv"):
        ranking = classifier.classify(profile, ScoreMethod.VECTOR_PROJECTION)
        while ranking:
            score = ranking.pop()
            print(score.name, score.rank_value)
"""

from .classifier import Classifier
from .core import (
    ArchetypeError,
    DegenerateAngleError,
    DegenerateAnglePolicy,
    FacetKeyMismatchError,
    MalformedRecordError,
    ModelFormat,
    ScoreMethod,
    ZeroMagnitudeVectorError,
)
from .loaders import LoadResult, entities_from_records, load_entities, try_load_entities
from .ranking import Ranking, Score
from .vectors import VectorEntity

__version__ = "0.3.0"

__all__ = [
    # Engine
    "Classifier",
    "Ranking",
    "Score",
    "VectorEntity",
    # Loading
    "LoadResult",
    "entities_from_records",
    "load_entities",
    "try_load_entities",
    # Types
    "DegenerateAnglePolicy",
    "ModelFormat",
    "ScoreMethod",
    # Errors
    "ArchetypeError",
    "DegenerateAngleError",
    "FacetKeyMismatchError",
    "MalformedRecordError",
    "ZeroMagnitudeVectorError",
]
