"""Configuration management for noconflict."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from noconflict.errors import ConfigurationError


class ManagerOptions(BaseModel):
    """Options for a conflict manager."""

    model_config = ConfigDict(extra="forbid")

    # Prefer a value's own ``no_conflict`` over cache-based restoration.
    use_native: bool = True
    # Restore the manager's own global slot only if its prior value existed.
    ensure_defined: bool = False
    # Give a derived manager its own empty binding cache.
    private_cache: bool = False


class NoConflictConfig(BaseModel):
    """Main noconflict configuration."""

    options: ManagerOptions = Field(default_factory=ManagerOptions)
    preload: List[str] = Field(default_factory=list)
    log_level: str = "WARNING"

    @classmethod
    def load_from_file(cls, config_path: Path) -> "NoConflictConfig":
        """Load configuration from YAML file."""
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path}: expected a mapping at the top level")
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigurationError(f"{config_path}: {exc}") from exc

    @classmethod
    def load_default(cls) -> "NoConflictConfig":
        """Load default configuration."""
        return cls()

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


def load_config(config_path: Optional[str] = None) -> NoConflictConfig:
    """Load configuration from file or defaults."""
    if config_path:
        return NoConflictConfig.load_from_file(Path(config_path))

    standard_paths = [
        Path("noconflict.yaml"),
        Path("config/noconflict.yaml"),
        Path.home() / ".noconflict" / "config.yaml",
    ]

    for path in standard_paths:
        if path.exists():
            return NoConflictConfig.load_from_file(path)

    return NoConflictConfig.load_default()
