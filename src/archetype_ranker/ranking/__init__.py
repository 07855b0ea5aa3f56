"""
Ranking module.

Turns pairwise profile/archetype scores into a best-first Ranking.
"""

from .ranking import Ranking, Score
from .scoring import SCORERS, angular_distance, get_scorer, rank, vector_projection

__all__ = [
    "Ranking",
    "Score",
    "SCORERS",
    "angular_distance",
    "get_scorer",
    "rank",
    "vector_projection",
]
