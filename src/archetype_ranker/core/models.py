"""
Pydantic models for the ranking engine.

These models are used for:
- Validating JSON model files before they become vector entities
- API request parsing and response serialization
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from .types import ScoreMethod


# =============================================================================
# Model File Records
# =============================================================================


class EntityRecord(BaseModel):
    """One entity as stored in a JSON model file."""

    name: str = Field(min_length=1)
    facets: dict[str, float] = Field(min_length=1)


# =============================================================================
# API Request Models
# =============================================================================


class ClassifyRequest(BaseModel):
    """Profile to classify against the loaded archetypes."""

    profile: EntityRecord
    method: Optional[ScoreMethod] = None  # server default when omitted
    normalize: Optional[bool] = None  # server default when omitted
    limit: Optional[int] = Field(default=None, ge=1)


# =============================================================================
# API Response Models
# =============================================================================


class RankEntry(BaseModel):
    """Single entry in a ranking, best first."""

    position: int
    name: str
    rank_value: float
    exact_match: bool = False


class RankingResponse(BaseModel):
    """Full ranking of archetypes for one profile."""

    profile: str
    method: ScoreMethod
    rankings: list[RankEntry]

    @computed_field
    @property
    def best_match(self) -> Optional[str]:
        """Name of the top-ranked archetype."""
        return self.rankings[0].name if self.rankings else None


class ArchetypeSummary(BaseModel):
    """Archetype listing entry."""

    name: str
    facets: dict[str, float]


class ArchetypesResponse(BaseModel):
    """All loaded archetypes and the shared facet schema."""

    count: int
    facet_names: list[str]
    archetypes: list[ArchetypeSummary]
