"""
Human-readable ranking reports.

Vector projection values are unit-vector cosines and print as
percentages; angular distance values are reciprocal radians and print
as plain numbers.
"""

from __future__ import annotations

from typing import Optional

from .core.models import RankEntry, RankingResponse
from .core.types import ScoreMethod
from .ranking import Ranking, Score


def format_score(position: int, score: Score, method: ScoreMethod) -> str:
    """Format one ranking line."""
    if score.is_exact_match:
        return f"{position}. {score.name} - exact match"
    if method is ScoreMethod.VECTOR_PROJECTION:
        return f"{position}. {score.name} - {score.rank_value * 100.0:3.2f}%"
    return f"{position}. {score.name} - {score.rank_value:.4f}"


def format_ranking(
    profile_name: str,
    ranking: Ranking,
    method: ScoreMethod | str = ScoreMethod.VECTOR_PROJECTION,
    limit: Optional[int] = None,
) -> list[str]:
    """
    Render a ranking as report lines, consuming it.

    Args:
        profile_name: Name of the classified profile
        ranking: Ranking to drain
        method: Method the ranking was produced with
        limit: Only print the top N archetypes

    Returns:
        Header line followed by one numbered line per archetype
    """
    method = ScoreMethod(method)
    lines = [f"Ranking of archetypes for profile '{profile_name}':"]
    for position, score in enumerate(ranking.drain(), start=1):
        if limit is not None and position > limit:
            break
        lines.append(format_score(position, score, method))
    return lines


def ranking_to_response(
    profile_name: str,
    ranking: Ranking,
    method: ScoreMethod | str,
    limit: Optional[int] = None,
) -> RankingResponse:
    """Drain a ranking into its API response model."""
    entries = []
    for position, score in enumerate(ranking.drain(), start=1):
        if limit is not None and position > limit:
            break
        entries.append(
            RankEntry(
                position=position,
                name=score.name,
                rank_value=score.rank_value,
                exact_match=score.is_exact_match,
            )
        )
    return RankingResponse(profile=profile_name, method=ScoreMethod(method), rankings=entries)
