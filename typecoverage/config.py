"""ABOUTME: Configuration loaders for roster files.
ABOUTME: Handles loading and validating roster YAML into TypedEntity lists."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from typecoverage.coverage.models import TypedEntity
from typecoverage.settings import settings
from typecoverage.utils.type_chart import Type


class MemberConfig(BaseModel):
    """A single roster member as written in YAML."""

    name: str | None = None
    type1: str
    type2: str | None = None

    @field_validator("type1", "type2")
    @classmethod
    def _known_type(cls, value: str | None) -> str | None:
        if value is not None:
            Type.parse(value)
        return value

    def to_entity(self) -> TypedEntity:
        """Convert to the engine's TypedEntity."""
        return TypedEntity(Type.parse(self.type1), None if self.type2 is None else Type.parse(self.type2), self.name)


class RosterConfig(BaseModel):
    """A roster file: an ordered list of members."""

    members: list[MemberConfig] = []

    def to_entities(self) -> list[TypedEntity]:
        """Return members as TypedEntity values, in file order."""
        return [member.to_entity() for member in self.members]


def load_roster(config_path: Path, max_size: int | None = None) -> list[TypedEntity]:
    """Load a roster from a YAML file.

    Args:
        config_path: Path to the roster file.
        max_size: Largest allowed roster. Defaults to settings.MAX_ROSTER_SIZE.

    Returns:
        List of TypedEntity in file order.

    Raises:
        FileNotFoundError: If the roster file doesn't exist.
        ValueError: If the roster file is not valid YAML, fails validation, or has too many members.
        OSError: If the roster path cannot be read (e.g., it is a directory).
    """
    if max_size is None:
        max_size = settings.MAX_ROSTER_SIZE

    if not config_path.exists():
        raise FileNotFoundError(f"Roster file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
        roster = RosterConfig.model_validate(raw_config)
    except (yaml.YAMLError, ValidationError) as e:
        raise ValueError(f"Invalid roster file {config_path}: {e}") from e

    if len(roster.members) > max_size:
        raise ValueError(f"Roster has {len(roster.members)} members, at most {max_size} allowed")

    return roster.to_entities()
