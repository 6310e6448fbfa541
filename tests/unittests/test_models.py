# ABOUTME: Unit tests for the coverage data classes.
# ABOUTME: Tests TypedEntity boundary validation, parsing, and CoverageResult accessors.

import pytest

from typecoverage.coverage.models import Classification, CoverageResult, HasTypes, TypedEntity, typing_label
from typecoverage.utils.type_chart import Type


class TestTypedEntity:
    """Tests for TypedEntity construction and parsing."""

    def test_missing_second_type_normalized(self) -> None:
        entity = TypedEntity(Type.FIRE)
        assert entity.type2 is Type.FIRE
        assert entity.is_single_typed

    def test_names_and_ordinals_accepted(self) -> None:
        entity = TypedEntity("water", 4)  # type: ignore[arg-type]
        assert entity.has_types() == (Type.WATER, Type.GROUND)
        assert not entity.is_single_typed

    @pytest.mark.parametrize(("type1", "type2"), [("Stellar", None), (Type.FIRE, 18), (-1, None)])
    def test_invalid_types_rejected(self, type1: object, type2: object) -> None:
        with pytest.raises(ValueError):
            TypedEntity(type1, type2)  # type: ignore[arg-type]

    def test_satisfies_has_types(self) -> None:
        assert isinstance(TypedEntity(Type.BUG), HasTypes)

    def test_name_ignored_in_equality(self) -> None:
        assert TypedEntity(Type.BUG, name="Scyther") == TypedEntity(Type.BUG)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Fire", (Type.FIRE, Type.FIRE)),
            ("water/ground", (Type.WATER, Type.GROUND)),
            (" Steel / Fairy ", (Type.STEEL, Type.FAIRY)),
            ("Ice/Ice", (Type.ICE, Type.ICE)),
        ],
    )
    def test_from_string(self, value: str, expected: tuple[Type, Type]) -> None:
        assert TypedEntity.from_string(value).has_types() == expected

    @pytest.mark.parametrize("value", ["", "Fire/", "/Water", "Fire/Water/Grass", "Sound"])
    def test_from_string_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            TypedEntity.from_string(value)

    def test_label(self) -> None:
        assert TypedEntity(Type.WATER, Type.FLYING, name="Gyarados").label() == "Gyarados (Water/Flying)"
        assert TypedEntity(Type.FIRE).label() == "Fire"

    @pytest.mark.parametrize(
        ("type1", "type2", "name", "expected"),
        [
            (Type.FIRE, Type.FIRE, None, "Fire"),
            (Type.FIRE, Type.FLYING, None, "Fire/Flying"),
            (Type.FIRE, Type.FLYING, "Charizard", "Charizard (Fire/Flying)"),
            (Type.WATER, Type.WATER, "Blastoise", "Blastoise (Water)"),
            (Type.WATER, Type.WATER, "", "Water"),
        ],
    )
    def test_typing_label(self, type1: Type, type2: Type, name: str | None, expected: str) -> None:
        assert typing_label(type1, type2, name) == expected


class TestCoverageResult:
    """Tests for CoverageResult accessors."""

    def test_default_is_empty(self) -> None:
        result = CoverageResult()
        assert result.is_empty
        assert len(result.offensive) == 18
        assert len(result.defensive) == 18

    def test_accessors_use_ordinal(self) -> None:
        offensive = tuple(float(i) for i in range(18))
        result = CoverageResult(offensive=offensive, defensive=offensive[::-1], roster_size=1)
        assert result.offensive_against(Type.FIRE) == 9.0
        assert result.defensive_against(Type.NORMAL) == 17.0
        assert not result.is_empty


class TestClassification:
    def test_str(self) -> None:
        assert str(Classification.WEAK) == "Weak"
