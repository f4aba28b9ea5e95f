"""
Configuration for word order computations.
"""

from dataclasses import dataclass, asdict, fields
from typing import Optional, Dict, Any
import json
import yaml
from pathlib import Path

from word_order.anagram.combinatorics import DEFAULT_DTYPE, max_value_for
from word_order.anagram.order import DIRECTIONS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass
class OrderConfig:
    """Settings for ranking a word and for reporting the result.

    The integer width is given as a numpy dtype name. Setting unbounded
    removes the limit entirely and ranks words of any length.
    """

    # Arithmetic configuration
    dtype: str = DEFAULT_DTYPE
    unbounded: bool = False
    direction: str = "insert"

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "console"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate and normalize the settings."""
        # raises ValueError for non-integer dtypes
        max_value_for(self.dtype)

        if not isinstance(self.unbounded, bool):
            raise ValueError(f"unbounded must be true or false, got {self.unbounded!r}")
        for name in ("direction", "log_level", "log_format"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a path string, got {self.log_file!r}")

        if self.direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got {self.direction!r}")

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

    @property
    def max_value(self) -> Optional[int]:
        """Largest intermediate value allowed, or None when unbounded."""
        if self.unbounded:
            return None
        return max_value_for(self.dtype)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    def save(self, path: Path):
        """Save configuration to file (JSON or YAML based on extension)."""
        path = Path(path)
        config_dict = self.to_dict()

        if path.suffix == ".yaml" or path.suffix == ".yml":
            with open(path, "w") as f:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
        else:
            with open(path, "w") as f:
                json.dump(config_dict, f, indent=2)

    @classmethod
    def load(cls, path: Path) -> "OrderConfig":
        """Load configuration from file."""
        path = Path(path)

        if path.suffix == ".yaml" or path.suffix == ".yml":
            with open(path, "r") as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            with open(path, "r") as f:
                config_dict = json.load(f)

        if not isinstance(config_dict, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_dict).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = set(config_dict) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(map(str, unknown))}")

        return cls(**config_dict)

    def override(self, **changes) -> "OrderConfig":
        """Return a copy with every non-None keyword applied."""
        config_dict = self.to_dict()
        config_dict.update({k: v for k, v in changes.items() if v is not None})
        return OrderConfig(**config_dict)

    def __str__(self) -> str:
        width = "unbounded" if self.unbounded else self.dtype
        return f"OrderConfig(width={width}, direction={self.direction}, log_level={self.log_level})"
