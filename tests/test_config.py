"""
Tests for settings and enum parsing.
"""

from pathlib import Path

import pytest

from archetype_ranker.core.config import Settings, get_settings
from archetype_ranker.core.types import DegenerateAnglePolicy, ModelFormat, ScoreMethod


class TestSettings:
    """Environment-driven configuration."""

    def test_defaults(self):
        settings = Settings()
        assert settings.default_method is ScoreMethod.VECTOR_PROJECTION
        assert settings.degenerate_angle_policy is DegenerateAnglePolicy.SENTINEL
        assert settings.effective_archetypes_format is ModelFormat.JSON

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ARCHETYPE_ARCHETYPES_PATH", "/srv/models/roles.csv")
        monkeypatch.setenv("ARCHETYPE_DEFAULT_METHOD", "angular_distance")
        monkeypatch.setenv("ARCHETYPE_DEGENERATE_ANGLE_POLICY", "error")

        settings = get_settings()

        assert settings.archetypes_path == Path("/srv/models/roles.csv")
        assert settings.effective_archetypes_format is ModelFormat.CSV
        assert settings.default_method is ScoreMethod.ANGULAR_DISTANCE
        assert settings.degenerate_angle_policy is DegenerateAnglePolicy.ERROR

    def test_explicit_format_wins(self):
        settings = Settings(archetypes_path="model.data", archetypes_format="csv")
        assert settings.effective_archetypes_format is ModelFormat.CSV

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestModelFormat:
    """Model format inference from file suffixes."""

    @pytest.mark.parametrize(
        "path, expected",
        [("a.csv", ModelFormat.CSV), ("a.JSON", ModelFormat.JSON), ("dir/a.json", ModelFormat.JSON)],
    )
    def test_from_path(self, path, expected):
        assert ModelFormat.from_path(path) is expected

    def test_unknown_suffix(self):
        with pytest.raises(ValueError):
            ModelFormat.from_path("a.yaml")
