"""Contains configurations for the test run."""

from pathlib import Path

import pytest

from typecoverage.coverage.models import TypedEntity
from typecoverage.utils.type_chart import Type


@pytest.fixture(scope="session")
def resources_folder() -> Path:
    """Returns the path to the test resources folder."""
    return Path(__file__).parents[1] / "resources"


@pytest.fixture
def fire_water_roster() -> list[TypedEntity]:
    """Two single-typed members: Fire and Water."""
    return [TypedEntity(Type.FIRE), TypedEntity(Type.WATER)]


@pytest.fixture
def flying_heavy_roster() -> list[TypedEntity]:
    """Three members sharing a Rock/Electric/Ice weakness through Flying."""
    return [
        TypedEntity(Type.FIRE, Type.FLYING, name="Charizard"),
        TypedEntity(Type.ICE, Type.FLYING, name="Articuno"),
        TypedEntity(Type.BUG, Type.FLYING, name="Butterfree"),
    ]
