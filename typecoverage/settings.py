"""ABOUTME: Configuration logic and path settings for the project.
ABOUTME: Provides analysis thresholds and paths for config files."""

from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typecoverage import __version__


def _get_project_root() -> Path:
    """Find project root by looking for pyproject.toml."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Contains settings for this project."""

    model_config = SettingsConfigDict(env_prefix="TYPECOVERAGE_")

    VERSION: str = __version__
    """Project version."""

    PROJECT_ROOT: Path = _get_project_root()
    """Root directory of the project."""

    CRITICAL_WEAKNESS_THRESHOLD: int = Field(default=3, ge=1)
    """Weak members needed before an attacking type is a critical team weakness."""

    MAX_ROSTER_SIZE: int = Field(default=6, ge=1)
    """Largest roster accepted from a roster file."""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def configs_dir(self) -> Path:
        """Directory containing configuration files."""
        return self.PROJECT_ROOT / "configs"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def logging_config_path(self) -> Path:
        """Path to the logging.yml configuration file."""
        return self.configs_dir / "logging.yml"


settings = Settings()
