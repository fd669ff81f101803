"""Configuration handling for deps-sweeper"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from deps_sweeper.constants import RUN_MODES, RunMode


@dataclass
class Config:
    """Configuration for deps-sweeper with validation."""

    # Workflow applied to each folder
    mode: str = RunMode.UPDATE

    # Directory whose immediate subfolders are processed
    root_path: Path = field(default_factory=lambda: Path(os.getcwd()))

    # Output
    debug: bool = False
    quiet: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_mode()
        self._validate_root_path()
        self._validate_output_flags()

    def _validate_mode(self):
        """Validate mode is one of allowed values."""
        if self.mode not in RUN_MODES:
            raise ValueError(f"mode must be one of {RUN_MODES}, got '{self.mode}'")

    def _validate_root_path(self):
        """Normalize root_path to a Path."""
        if not self.root_path:
            raise ValueError("root_path cannot be empty")
        self.root_path = Path(self.root_path)

    def _validate_output_flags(self):
        """Debug and quiet cannot both be set."""
        if self.debug and self.quiet:
            raise ValueError("debug and quiet are mutually exclusive")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "mode": self.mode,
            "root_path": str(self.root_path),
            "debug": self.debug,
            "quiet": self.quiet,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"mode", "root_path", "debug", "quiet"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
