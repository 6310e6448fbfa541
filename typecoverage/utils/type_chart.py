# ABOUTME: Pokemon-style type effectiveness chart for Gen 6+ (18 types including Fairy).
# ABOUTME: Provides the Type enum, the immutable EffectivenessTable, and dual-type matchup helpers.

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

# Effectiveness thresholds
SUPER_EFFECTIVE_THRESHOLD = 2.0
RESISTANCE_THRESHOLD = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0

ALLOWED_MULTIPLIERS: frozenset[float] = frozenset({0.0, 0.5, 1.0, 2.0})


class TypeChartError(ValueError):
    """Raised when the effectiveness table literal is malformed."""


class Type(Enum):
    """The 18 elemental types. The value is the ordinal used to index tables and vectors."""

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17

    @property
    def index(self) -> int:
        """Ordinal position of the type."""
        return self.value

    @property
    def display_name(self) -> str:
        return TYPE_INFO[self].name

    @property
    def abbreviation(self) -> str:
        return TYPE_INFO[self].abbreviation

    @property
    def color(self) -> tuple[int, int, int]:
        """RGB display colour."""
        return TYPE_INFO[self].color

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def parse(cls, value: "Type | str | int") -> "Type":
        """Resolve a type from an enum member, a case-insensitive name, or an ordinal.

        Args:
            value: The value to resolve (e.g., Type.FIRE, "fire", 9).

        Returns:
            The matching Type.

        Raises:
            ValueError: If the value does not name one of the 18 types.
        """
        if isinstance(value, Type):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid type: {value!r}")
        if isinstance(value, int):
            if 0 <= value < len(cls):
                return cls(value)
            raise ValueError(f"Type ordinal out of range: {value}")
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            raise ValueError(f"Unknown type: {value!r}")
        raise ValueError(f"Invalid type: {value!r}")


class TypeInfo(NamedTuple):
    """Display data attached to a type."""

    name: str
    abbreviation: str
    color: tuple[int, int, int]


TYPE_INFO: dict[Type, TypeInfo] = {
    Type.NORMAL: TypeInfo("Normal", "NRM", (168, 168, 120)),
    Type.FIGHTING: TypeInfo("Fighting", "FGT", (192, 48, 40)),
    Type.FLYING: TypeInfo("Flying", "FLY", (168, 144, 240)),
    Type.POISON: TypeInfo("Poison", "PSN", (160, 64, 160)),
    Type.GROUND: TypeInfo("Ground", "GRD", (224, 192, 104)),
    Type.ROCK: TypeInfo("Rock", "RCK", (184, 160, 56)),
    Type.BUG: TypeInfo("Bug", "BUG", (168, 184, 32)),
    Type.GHOST: TypeInfo("Ghost", "GHT", (112, 88, 152)),
    Type.STEEL: TypeInfo("Steel", "STL", (184, 184, 208)),
    Type.FIRE: TypeInfo("Fire", "FIR", (240, 128, 48)),
    Type.WATER: TypeInfo("Water", "WTR", (104, 144, 240)),
    Type.GRASS: TypeInfo("Grass", "GRS", (120, 200, 80)),
    Type.ELECTRIC: TypeInfo("Electric", "ELC", (248, 208, 48)),
    Type.PSYCHIC: TypeInfo("Psychic", "PSY", (248, 88, 136)),
    Type.ICE: TypeInfo("Ice", "ICE", (152, 216, 216)),
    Type.DRAGON: TypeInfo("Dragon", "DRG", (112, 56, 248)),
    Type.DARK: TypeInfo("Dark", "DRK", (112, 88, 72)),
    Type.FAIRY: TypeInfo("Fairy", "FRY", (238, 153, 172)),
}

TYPES: tuple[Type, ...] = tuple(Type)

# One row per attacking type; columns follow TYPES order:
# Nrm  Fgt  Fly  Psn  Grd  Rck  Bug  Ght  Stl  Fir  Wtr  Grs  Elc  Psy  Ice  Drg  Drk  Fry
CHART_DATA: dict[str, tuple[float, ...]] = {
    "Normal": (1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    "Fighting": (2.0, 1.0, 0.5, 0.5, 1.0, 2.0, 0.5, 0.0, 2.0, 1.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 2.0, 0.5),
    "Flying": (1.0, 2.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 0.5, 1.0, 1.0, 2.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0),
    "Poison": (1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 0.5, 0.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0),
    "Ground": (1.0, 1.0, 0.0, 2.0, 1.0, 2.0, 0.5, 1.0, 2.0, 2.0, 1.0, 0.5, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    "Rock": (1.0, 0.5, 2.0, 1.0, 0.5, 1.0, 2.0, 1.0, 0.5, 2.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0),
    "Bug": (1.0, 0.5, 0.5, 0.5, 1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 2.0, 0.5),
    "Ghost": (0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 1.0),
    "Steel": (1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 0.5, 0.5, 1.0, 0.5, 1.0, 2.0, 1.0, 1.0, 2.0),
    "Fire": (1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 2.0, 1.0, 2.0, 0.5, 0.5, 2.0, 1.0, 1.0, 2.0, 0.5, 1.0, 1.0),
    "Water": (1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 1.0, 1.0, 1.0, 2.0, 0.5, 0.5, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0),
    "Grass": (1.0, 1.0, 0.5, 0.5, 2.0, 2.0, 0.5, 1.0, 0.5, 0.5, 2.0, 0.5, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0),
    "Electric": (1.0, 1.0, 2.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 0.5, 0.5, 1.0, 1.0, 0.5, 1.0, 1.0),
    "Psychic": (1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 0.0, 1.0),
    "Ice": (1.0, 1.0, 2.0, 1.0, 2.0, 1.0, 1.0, 1.0, 0.5, 0.5, 0.5, 2.0, 1.0, 1.0, 0.5, 2.0, 1.0, 1.0),
    "Dragon": (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 0.0),
    "Dark": (1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 1.0, 1.0, 0.5, 0.5),
    "Fairy": (1.0, 2.0, 1.0, 0.5, 1.0, 1.0, 1.0, 1.0, 0.5, 0.5, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 1.0),
}


def _build_matrix(data: Mapping[str, Sequence[float]]) -> tuple[tuple[float, ...], ...]:
    """Validate the chart literal and convert it into an immutable matrix.

    Args:
        data: Mapping of attacking type name to its 18 multipliers in TYPES order.

    Returns:
        Tuple of 18 rows, each a tuple of 18 floats.

    Raises:
        TypeChartError: If a row is missing or unknown, a row has the wrong length,
            or a value falls outside {0, 0.5, 1, 2}.
    """
    names = [t.display_name for t in TYPES]

    unknown = sorted(set(data) - set(names))
    if unknown:
        raise TypeChartError(f"Unknown attacking types in chart: {', '.join(unknown)}")

    rows: list[tuple[float, ...]] = []
    for name in names:
        if name not in data:
            raise TypeChartError(f"Missing chart row for attacking type {name}")

        values = data[name]
        if len(values) != len(TYPES):
            raise TypeChartError(f"Chart row {name} has {len(values)} cells, expected {len(TYPES)}")

        for defend, value in zip(TYPES, values, strict=True):
            if value not in ALLOWED_MULTIPLIERS:
                raise TypeChartError(f"Invalid multiplier {value!r} for {name} vs {defend.display_name}")

        rows.append(tuple(float(v) for v in values))

    return tuple(rows)


class EffectivenessTable:
    """Immutable 18x18 matrix: multiplier(attack, defend) for single defending types.

    The table is validated once at construction and never mutated, so a single
    instance can be shared freely between readers.
    """

    __slots__ = ("_matrix",)

    def __init__(self, data: Mapping[str, Sequence[float]] = CHART_DATA) -> None:
        self._matrix = _build_matrix(data)
        logger.debug("Built effectiveness table with %d cells", len(TYPES) * len(TYPES))

    def multiplier(self, attack: Type, defend: Type) -> float:
        """Damage multiplier when an attack of type `attack` hits single type `defend`."""
        return self._matrix[attack.index][defend.index]

    def row(self, attack: Type) -> tuple[float, ...]:
        """All 18 multipliers for one attacking type, indexed by defending ordinal."""
        return self._matrix[attack.index]

    def column(self, defend: Type) -> tuple[float, ...]:
        """All 18 multipliers against one defending type, indexed by attacking ordinal."""
        return tuple(row[defend.index] for row in self._matrix)

    def rows(self) -> tuple[tuple[float, ...], ...]:
        return self._matrix


TYPE_CHART = EffectivenessTable()


def get_effectiveness(
    atk_type: Type,
    def_type1: Type,
    def_type2: Type | None = None,
    table: EffectivenessTable = TYPE_CHART,
) -> float:
    """Calculate type effectiveness multiplier against a possibly dual-typed defender.

    Args:
        atk_type: The attacking type (e.g., Type.FIRE).
        def_type1: The defender's primary type.
        def_type2: The defender's secondary type, or None for monotype.
        table: Effectiveness table to read from.

    Returns:
        Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.

    Note:
        If def_type1 == def_type2, the multiplier is applied only once
        (e.g., Water vs Fire/Fire = 2x, NOT 4x).
    """
    multiplier = table.multiplier(atk_type, def_type1)

    # Only apply second type if it exists AND is different from the first
    if def_type2 is not None and def_type2 != def_type1:
        multiplier *= table.multiplier(atk_type, def_type2)

    return multiplier


def get_weaknesses(
    def_type1: Type,
    def_type2: Type | None = None,
    table: EffectivenessTable = TYPE_CHART,
) -> list[Type]:
    """Return types that are super effective (>=2x) against the defender."""
    return [
        atk_type for atk_type in TYPES if get_effectiveness(atk_type, def_type1, def_type2, table) >= SUPER_EFFECTIVE_THRESHOLD
    ]


def get_resistances(
    def_type1: Type,
    def_type2: Type | None = None,
    table: EffectivenessTable = TYPE_CHART,
) -> list[Type]:
    """Return types that are resisted (<=0.5x, excluding 0x) by the defender."""
    return [
        atk_type
        for atk_type in TYPES
        if IMMUNITY_VALUE < get_effectiveness(atk_type, def_type1, def_type2, table) <= RESISTANCE_THRESHOLD
    ]


def get_immunities(
    def_type1: Type,
    def_type2: Type | None = None,
    table: EffectivenessTable = TYPE_CHART,
) -> list[Type]:
    """Return types that the defender is immune to (0x effectiveness)."""
    return [atk_type for atk_type in TYPES if get_effectiveness(atk_type, def_type1, def_type2, table) == IMMUNITY_VALUE]


def get_neutral(
    def_type1: Type,
    def_type2: Type | None = None,
    table: EffectivenessTable = TYPE_CHART,
) -> list[Type]:
    """Return types at neutral (1x) effectiveness against the defender."""
    return [atk_type for atk_type in TYPES if get_effectiveness(atk_type, def_type1, def_type2, table) == NEUTRAL_VALUE]
