"""ABOUTME: Data classes for roster coverage analysis.
ABOUTME: Contains HasTypes, TypedEntity, CoverageResult, and Classification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from typecoverage.utils.type_chart import TYPES, Type

EMPTY_VECTOR: tuple[float, ...] = tuple(0.0 for _ in TYPES)


def typing_label(type1: Type, type2: Type, name: str | None = None) -> str:
    """Display label, e.g. "Gyarados (Water/Flying)" or "Fire"."""
    typing = str(type1) if type1 == type2 else f"{type1}/{type2}"
    return f"{name} ({typing})" if name else typing


@runtime_checkable
class HasTypes(Protocol):
    """Anything that can report its (type1, type2) pair."""

    def has_types(self) -> tuple[Type, Type]: ...


@dataclass(frozen=True)
class TypedEntity:
    """A roster member, reduced to its types.

    Attributes:
        type1: Primary type.
        type2: Secondary type; equal to type1 for single-typed members.
        name: Optional label used only for display.
    """

    type1: Type
    type2: Type | None = None
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        type1 = Type.parse(self.type1)
        type2 = type1 if self.type2 is None else Type.parse(self.type2)
        object.__setattr__(self, "type1", type1)
        object.__setattr__(self, "type2", type2)

    @classmethod
    def from_string(cls, value: str, name: str | None = None) -> "TypedEntity":
        """Parse "Fire" or "Water/Ground" into an entity.

        Raises:
            ValueError: If the string is empty, has more than two parts, or names an unknown type.
        """
        parts = [p.strip() for p in value.split("/")]
        if not parts or len(parts) > 2 or not all(parts):
            raise ValueError(f"Invalid typing: {value!r}")
        return cls(Type.parse(parts[0]), Type.parse(parts[-1]), name=name)

    @property
    def is_single_typed(self) -> bool:
        return self.type1 == self.type2

    def has_types(self) -> tuple[Type, Type]:
        return self.type1, self.type2  # type: ignore[return-value]

    def label(self) -> str:
        return typing_label(self.type1, self.type2, self.name)  # type: ignore[arg-type]


@dataclass(frozen=True)
class CoverageResult:
    """Offensive and defensive vectors for a roster, indexed by type ordinal.

    Attributes:
        offensive: Best multiplier any member inflicts on each defending type.
        defensive: Worst multiplier any member takes from each attacking type.
        roster_size: Number of members the vectors were computed from.
    """

    offensive: tuple[float, ...] = EMPTY_VECTOR
    defensive: tuple[float, ...] = EMPTY_VECTOR
    roster_size: int = 0

    @property
    def is_empty(self) -> bool:
        """True when no members contributed; all-zero vectors then mean "no data", not immunity."""
        return self.roster_size == 0

    def offensive_against(self, defend: Type) -> float:
        return self.offensive[defend.index]

    def defensive_against(self, attack: Type) -> float:
        return self.defensive[attack.index]


class Classification(Enum):
    """Defensive bucket for a single multiplier."""

    RESIST = "Resist"
    NEUTRAL = "Neutral"
    WEAK = "Weak"

    def __str__(self) -> str:
        return self.value
