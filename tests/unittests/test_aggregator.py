# ABOUTME: Unit tests for the coverage aggregator.
# ABOUTME: Tests offensive max folding, multiplicative dual-type defense, and roster monotonicity.

import pytest

from typecoverage.coverage.aggregator import compute, own_defense
from typecoverage.coverage.models import CoverageResult, HasTypes, TypedEntity
from typecoverage.utils.type_chart import TYPE_CHART, TYPES, Type, get_effectiveness


class _Creature:
    """Minimal stand-in for a richer creature model exposing has_types()."""

    def __init__(self, type1: Type, type2: Type) -> None:
        self._types = (type1, type2)

    def has_types(self) -> tuple[Type, Type]:
        return self._types


class TestEmptyRoster:
    """Tests for the defined empty-roster result."""

    def test_all_zero_vectors(self) -> None:
        result = compute([])
        assert result.offensive == tuple([0.0] * 18)
        assert result.defensive == tuple([0.0] * 18)

    def test_emptiness_reported_separately(self) -> None:
        """All-zero vectors alone must not be read as immunity."""
        result = compute([])
        assert result.is_empty
        assert result.roster_size == 0

    def test_equals_default_result(self) -> None:
        assert compute([]) == CoverageResult()

    def test_accepts_generator(self) -> None:
        result = compute(m for m in [TypedEntity(Type.FIRE)])
        assert result.roster_size == 1


class TestSingleTypeIdentity:
    """A single mono-typed member reproduces the table row and column."""

    @pytest.mark.parametrize("type_", list(TYPES))
    def test_offense_is_table_row(self, type_: Type) -> None:
        result = compute([TypedEntity(type_, type_)])
        assert result.offensive == TYPE_CHART.row(type_)

    @pytest.mark.parametrize("type_", list(TYPES))
    def test_defense_is_table_column(self, type_: Type) -> None:
        result = compute([TypedEntity(type_, type_)])
        assert result.defensive == TYPE_CHART.column(type_)

    def test_single_type_not_squared(self) -> None:
        """Water vs Fire/Fire stays 2x, Fire vs Fire/Fire stays 0.5x."""
        result = compute([TypedEntity(Type.FIRE, Type.FIRE)])
        assert result.defensive_against(Type.WATER) == 2.0
        assert result.defensive_against(Type.FIRE) == 0.5


class TestDualTypeComposition:
    """Offense takes the max of a member's two types; defense takes the product."""

    def test_ghost_vs_normal_flying_is_immune(self) -> None:
        """0 * 1 = 0: full immunity despite the neutral Flying half."""
        assert own_defense(Type.GHOST, Type.NORMAL, Type.FLYING) == 0.0
        result = compute([TypedEntity(Type.NORMAL, Type.FLYING)])
        assert result.defensive_against(Type.GHOST) == 0.0

    def test_rock_vs_ice_flying_is_4x(self) -> None:
        result = compute([TypedEntity(Type.ICE, Type.FLYING)])
        assert result.defensive_against(Type.ROCK) == 4.0

    def test_dual_defense_is_product(self) -> None:
        """own_defense(X) == table[X][A] * table[X][B] for every attacker."""
        a, b = Type.WATER, Type.GROUND
        result = compute([TypedEntity(a, b)])
        for attack in TYPES:
            expected = TYPE_CHART.multiplier(attack, a) * TYPE_CHART.multiplier(attack, b)
            assert result.defensive_against(attack) == expected

    def test_dual_offense_is_max_not_product(self) -> None:
        """Water/Ground hits Fire for 2x (max of 2 and 2), not 4x."""
        result = compute([TypedEntity(Type.WATER, Type.GROUND)])
        assert result.offensive_against(Type.FIRE) == 2.0
        for defend in TYPES:
            expected = max(TYPE_CHART.multiplier(Type.WATER, defend), TYPE_CHART.multiplier(Type.GROUND, defend))
            assert result.offensive_against(defend) == expected

    @pytest.mark.parametrize("type1", list(TYPES))
    def test_own_defense_matches_get_effectiveness(self, type1: Type) -> None:
        for type2 in TYPES:
            for attack in TYPES:
                assert own_defense(attack, type1, type2) == get_effectiveness(attack, type1, type2)

    def test_type_order_irrelevant(self) -> None:
        first = compute([TypedEntity(Type.STEEL, Type.FAIRY)])
        second = compute([TypedEntity(Type.FAIRY, Type.STEEL)])
        assert first == second


class TestRosterFolding:
    """Tests for reductions across roster members."""

    def test_fire_water_scenario(self, fire_water_roster: list[TypedEntity]) -> None:
        """Grass is covered by Fire (2x); Electric hits Water for 2x."""
        result = compute(fire_water_roster)
        assert result.offensive_against(Type.GRASS) == 2.0
        assert result.defensive_against(Type.ELECTRIC) == 2.0
        assert result.roster_size == 2
        assert not result.is_empty

    def test_deterministic(self, flying_heavy_roster: list[TypedEntity]) -> None:
        assert compute(flying_heavy_roster) == compute(flying_heavy_roster)

    def test_offense_monotonic(self, fire_water_roster: list[TypedEntity]) -> None:
        """Adding a member never lowers any offensive entry."""
        before = compute(fire_water_roster)
        after = compute([*fire_water_roster, TypedEntity(Type.NORMAL)])
        for old, new in zip(before.offensive, after.offensive, strict=True):
            assert new >= old

    def test_defense_monotonic(self, fire_water_roster: list[TypedEntity]) -> None:
        """Adding a very bulky member never improves the roster's worst case."""
        before = compute(fire_water_roster)
        after = compute([*fire_water_roster, TypedEntity(Type.STEEL, Type.FAIRY)])
        for old, new in zip(before.defensive, after.defensive, strict=True):
            assert new >= old

    def test_monotonic_over_every_addition(self) -> None:
        """Every single-type addition to a mixed roster is monotonic in both vectors."""
        base = [TypedEntity(Type.GHOST, Type.DARK), TypedEntity(Type.DRAGON, Type.GROUND)]
        before = compute(base)
        for extra in TYPES:
            after = compute([*base, TypedEntity(extra)])
            assert all(n >= o for o, n in zip(before.offensive, after.offensive, strict=True))
            assert all(n >= o for o, n in zip(before.defensive, after.defensive, strict=True))

    def test_worst_member_dominates_defense(self) -> None:
        """A single 4x-weak member makes the roster 4x weak."""
        roster = [TypedEntity(Type.STEEL), TypedEntity(Type.GRASS, Type.FLYING)]
        result = compute(roster)
        assert result.defensive_against(Type.ICE) == 4.0

    def test_duck_typed_members(self) -> None:
        """Any object exposing has_types() is accepted."""
        creature = _Creature(Type.ELECTRIC, Type.FLYING)
        assert isinstance(creature, HasTypes)
        result = compute([creature])
        assert result.defensive_against(Type.GROUND) == 0.0
        assert result.defensive_against(Type.ROCK) == 2.0
