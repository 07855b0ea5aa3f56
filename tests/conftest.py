"""
Pytest configuration for archetype-ranker tests.
"""

from pathlib import Path

import pytest

from archetype_ranker.core.config import get_settings
from archetype_ranker.vectors import VectorEntity

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so environment tweaks do not leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def make_entity():
    """Factory for entities: make_entity("name", x=1, y=0, normalize=True)."""

    def _make(name: str, normalize: bool = False, **facets: float) -> VectorEntity:
        entity = VectorEntity(name=name, facets=facets)
        if normalize:
            entity.normalize()
        return entity

    return _make


@pytest.fixture
def axis_archetypes(make_entity) -> list[VectorEntity]:
    """Two unit archetypes along the x and y axes."""
    return [
        make_entity("A", x=1.0, y=0.0, normalize=True),
        make_entity("B", x=0.0, y=1.0, normalize=True),
    ]
