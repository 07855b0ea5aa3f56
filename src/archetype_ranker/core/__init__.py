"""
Core module for the archetype ranker.

This module provides the foundational components:
- Configuration management (config.py)
- Error taxonomy (errors.py)
- Data models (models.py)
- Enums and constants (types.py)

Usage:
    from archetype_ranker.core import Settings, get_settings
    from archetype_ranker.core import ScoreMethod, ModelFormat
    from archetype_ranker.core import FacetKeyMismatchError
"""

# Configuration
from .config import Settings, get_settings

# Errors
from .errors import (
    ArchetypeError,
    DegenerateAngleError,
    FacetKeyMismatchError,
    MalformedRecordError,
    ZeroMagnitudeVectorError,
)

# Types
from .types import (
    EXACT_MATCH_RANK,
    NAME_KEY,
    DegenerateAnglePolicy,
    ModelFormat,
    ScoreMethod,
)

# Models
from .models import (
    ArchetypesResponse,
    ArchetypeSummary,
    ClassifyRequest,
    EntityRecord,
    RankEntry,
    RankingResponse,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ArchetypeError",
    "DegenerateAngleError",
    "FacetKeyMismatchError",
    "MalformedRecordError",
    "ZeroMagnitudeVectorError",
    # Types
    "EXACT_MATCH_RANK",
    "NAME_KEY",
    "DegenerateAnglePolicy",
    "ModelFormat",
    "ScoreMethod",
    # Models
    "ArchetypesResponse",
    "ArchetypeSummary",
    "ClassifyRequest",
    "EntityRecord",
    "RankEntry",
    "RankingResponse",
]
