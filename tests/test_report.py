"""
Tests for report formatting and API response conversion.
"""

from archetype_ranker.core.types import EXACT_MATCH_RANK, ScoreMethod
from archetype_ranker.ranking import Ranking, Score
from archetype_ranker.report import format_ranking, format_score, ranking_to_response


class TestFormatting:
    """Report lines per scoring method."""

    def test_vector_projection_as_percent(self):
        assert format_score(1, Score("A", 0.5), ScoreMethod.VECTOR_PROJECTION) == "1. A - 50.00%"

    def test_angular_distance_as_value(self):
        assert format_score(2, Score("B", 1.25), ScoreMethod.ANGULAR_DISTANCE) == "2. B - 1.2500"

    def test_exact_match(self):
        line = format_score(1, Score("C", EXACT_MATCH_RANK), ScoreMethod.ANGULAR_DISTANCE)
        assert line == "1. C - exact match"

    def test_format_ranking(self):
        ranking = Ranking([Score("A", 0.25), Score("B", 0.75)])
        lines = format_ranking("Alex", ranking, "vector_projection")
        assert lines == [
            "Ranking of archetypes for profile 'Alex':",
            "1. B - 75.00%",
            "2. A - 25.00%",
        ]

    def test_format_ranking_limit(self):
        ranking = Ranking([Score("A", 0.25), Score("B", 0.75), Score("C", 0.5)])
        lines = format_ranking("Alex", ranking, limit=2)
        assert lines[1:] == ["1. B - 75.00%", "2. C - 50.00%"]


class TestResponse:
    """Ranking -> RankingResponse."""

    def test_positions_and_flags(self):
        ranking = Ranking([Score("A", 0.25), Score("B", EXACT_MATCH_RANK)])
        response = ranking_to_response("P", ranking, ScoreMethod.ANGULAR_DISTANCE)
        assert response.best_match == "B"
        assert [(e.position, e.name, e.exact_match) for e in response.rankings] == [
            (1, "B", True),
            (2, "A", False),
        ]
        assert len(ranking) == 0
