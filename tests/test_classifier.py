"""
Tests for the Classifier orchestrator.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from archetype_ranker import Classifier
from archetype_ranker.core.errors import (
    ArchetypeError,
    DegenerateAngleError,
    FacetKeyMismatchError,
)
from archetype_ranker.core.types import DegenerateAnglePolicy, ScoreMethod

TOLERANCE = 1e-6


def _pop_all(ranking):
    popped = []
    while ranking:
        popped.append(ranking.pop())
    return popped


class TestClassify:
    """classify(profile, method) end to end."""

    def test_equidistant_archetypes_tie(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=1, y=1, normalize=True)
        assert profile.facets["x"] == pytest.approx(0.707, abs=1e-3)

        scores = _pop_all(classifier.classify(profile, ScoreMethod.VECTOR_PROJECTION))

        # Tie order is unspecified: check membership and values only
        assert {s.name for s in scores} == {"A", "B"}
        for s in scores:
            assert s.rank_value == pytest.approx(0.70710678, abs=TOLERANCE)

    def test_identical_archetype_scores_one(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=5, y=0, normalize=True)

        best, other = _pop_all(classifier.classify(profile))

        assert best.name == "A"
        assert best.rank_value == pytest.approx(1.0, abs=TOLERANCE)
        assert other.name == "B"
        assert other.rank_value == pytest.approx(0.0, abs=TOLERANCE)

    def test_method_accepts_string(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=1, y=0.2, normalize=True)
        assert classifier.classify(profile, "angular_distance").pop().name == "A"

    def test_profile_facet_mismatch_raises(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=1, z=1, normalize=True)
        with pytest.raises(FacetKeyMismatchError):
            classifier.classify(profile)

    def test_error_policy_propagates(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes, degenerate_policy=DegenerateAnglePolicy.ERROR)
        profile = make_entity("P", x=1, y=0, normalize=True)
        with pytest.raises(DegenerateAngleError):
            classifier.classify(profile, ScoreMethod.ANGULAR_DISTANCE)

    def test_sentinel_policy_ranks_exact_match_first(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=0, y=1, normalize=True)
        best = classifier.classify(profile, ScoreMethod.ANGULAR_DISTANCE).pop()
        assert best.name == "B"
        assert best.is_exact_match

    def test_each_call_returns_fresh_ranking(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        profile = make_entity("P", x=1, y=1, normalize=True)
        first = classifier.classify(profile)
        _pop_all(first)
        assert len(classifier.classify(profile)) == 2

    def test_classification_does_not_mutate_archetypes(self, axis_archetypes, make_entity):
        classifier = Classifier(axis_archetypes)
        before = [a.to_dict() for a in classifier]
        classifier.classify(make_entity("P", x=3, y=1, normalize=True))
        classifier.classify(make_entity("Q", x=1, y=3, normalize=True), ScoreMethod.ANGULAR_DISTANCE)
        assert [a.to_dict() for a in classifier] == before

    def test_concurrent_calls_agree(self, make_entity):
        archetypes = [
            make_entity(f"arch{i}", x=i + 1, y=10 - i, z=(i * 3) % 7 + 1, normalize=True)
            for i in range(10)
        ]
        classifier = Classifier(archetypes)
        profile = make_entity("P", x=2, y=5, z=3, normalize=True)
        expected = [s.name for s in classifier.classify(profile).sorted()]

        def run(_):
            return [s.name for s in _pop_all(classifier.classify(profile))]

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, range(32)))

        assert all(r == expected for r in results)


class TestConstruction:
    """Classifier construction and ownership of archetypes."""

    def test_owns_immutable_collection(self, axis_archetypes):
        source = list(axis_archetypes)
        classifier = Classifier(source)
        source.clear()
        assert len(classifier) == 2
        assert isinstance(classifier.archetypes, tuple)
        assert classifier.facet_names == frozenset({"x", "y"})

    def test_empty_collection_rejected(self):
        with pytest.raises(ArchetypeError):
            Classifier([])

    def test_mixed_schemas_rejected(self, make_entity):
        with pytest.raises(FacetKeyMismatchError):
            Classifier(
                [
                    make_entity("A", x=1, y=0, normalize=True),
                    make_entity("B", x=0, z=1, normalize=True),
                ]
            )

    def test_duplicate_names_allowed(self, make_entity):
        classifier = Classifier(
            [
                make_entity("twin", x=1, y=0, normalize=True),
                make_entity("twin", x=0, y=1, normalize=True),
            ]
        )
        profile = make_entity("P", x=1, y=2, normalize=True)
        assert [s.name for s in _pop_all(classifier.classify(profile))] == ["twin", "twin"]

    @pytest.mark.parametrize("filename", ["archetypes.csv", "archetypes.json"])
    def test_from_file(self, fixtures_dir, filename):
        classifier = Classifier.from_file(fixtures_dir / filename)
        assert [a.name for a in classifier] == ["A", "B", "C"]
        assert all(a.is_normalized() for a in classifier)

    def test_policy_from_string(self, axis_archetypes):
        classifier = Classifier(axis_archetypes, degenerate_policy="error")
        assert classifier.degenerate_policy is DegenerateAnglePolicy.ERROR

    def test_default_policy_is_sentinel(self, axis_archetypes, fixtures_dir):
        assert Classifier(axis_archetypes).degenerate_policy is DegenerateAnglePolicy.SENTINEL
        from_file = Classifier.from_file(fixtures_dir / "archetypes.csv")
        assert from_file.degenerate_policy is DegenerateAnglePolicy.SENTINEL
