"""
Configuration module for OpenRG.

This module provides configuration management for the OpenRG library,
including numerical tolerances, the default separation strategy, the
random seed used by randomized oracles, and logging.

Configuration can be set via:
1. Environment variables (OPENRG_LOG_LEVEL, OPENRG_SEED)
2. Config file (./openrg.toml or ~/.openrg/config.toml)
3. Programmatic API

Example:
    >>> from openrg.config import config
    >>> config.get_tolerance("violation")
    1e-06
    >>> config.seed = 42
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s | %(name)s | %(message)s"


def _get_default_seed() -> Optional[int]:
    """Get the default seed from the environment (None = platform seeding)."""
    env_seed = os.environ.get('OPENRG_SEED')
    if env_seed:
        return int(env_seed)
    return None


def _get_default_log_level() -> str:
    """Get the default log level from the environment."""
    return os.environ.get('OPENRG_LOG_LEVEL', 'INFO').upper()


@dataclass
class OpenRGConfig:
    """
    Configuration for the OpenRG library.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        default_strategy: Separation policy used by applications ('max', 'first', 'random')
        seed: Seed for default random generators (None = platform seeding)
        tolerances: Numerical tolerances
    """

    # Logging
    log_level: str = field(default_factory=_get_default_log_level)

    # Separation
    default_strategy: str = "max"
    seed: Optional[int] = field(default_factory=_get_default_seed)

    # Numerical tolerances
    tolerances: dict[str, float] = field(default_factory=lambda: {
        "violation": 1e-6,
        "optimality": 1e-6,
        "integrality": 1e-6,
    })

    def __post_init__(self):
        """Normalize field types."""
        self.log_level = str(self.log_level).upper()
        if isinstance(self.seed, str):
            self.seed = int(self.seed)

    # =========================================================================
    # Tolerance helpers
    # =========================================================================

    def get_tolerance(self, name: str) -> float:
        """Get a tolerance value by name."""
        return self.tolerances.get(name, 1e-6)

    def set_tolerance(self, name: str, value: float) -> None:
        """Set a tolerance value."""
        self.tolerances[name] = value

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "log_level": self.log_level,
            "default_strategy": self.default_strategy,
            "seed": self.seed,
            "tolerances": self.tolerances.copy(),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> 'OpenRGConfig':
        """Create config from dictionary."""
        tolerances = cls().tolerances
        tolerances.update(d.get("tolerances", {}))
        return cls(
            log_level=d.get("log_level", "INFO"),
            default_strategy=d.get("default_strategy", "max"),
            seed=d.get("seed"),
            tolerances=tolerances,
        )

    def save(self, path: Optional[Path] = None) -> None:
        """
        Save configuration to a TOML file.

        Args:
            path: Path to save to (default: ./openrg.toml)
        """
        if path is None:
            path = Path("openrg.toml")

        lines = [
            "# OpenRG Configuration",
            "",
            "[general]",
            f'log_level = "{self.log_level}"',
            f'default_strategy = "{self.default_strategy}"',
        ]
        if self.seed is not None:
            lines.append(f"seed = {self.seed}")

        lines.extend([
            "",
            "[tolerances]",
        ])
        for name, value in self.tolerances.items():
            lines.append(f"{name} = {value}")

        path.write_text("\n".join(lines) + "\n")

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'OpenRGConfig':
        """
        Load configuration from a TOML file.

        Args:
            path: Path to load from (default: ./openrg.toml or ~/.openrg/config.toml)

        Returns:
            Loaded configuration (or default if file not found)
        """
        if path is None:
            local_config = Path("openrg.toml")
            user_config = Path.home() / ".openrg" / "config.toml"

            if local_config.exists():
                path = local_config
            elif user_config.exists():
                path = user_config
            else:
                return cls()

        if not path.exists():
            return cls()

        # Simple TOML-like parsing (no dependency needed)
        config_dict: dict[str, Any] = {"tolerances": {}}
        current_section = None

        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if line.startswith("[") and line.endswith("]"):
                current_section = line[1:-1]
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()

                if value.startswith('"'):
                    value = value.strip('"')
                elif value.lstrip("-").isdigit():
                    value = int(value)
                else:
                    value = float(value)

                if current_section == "tolerances":
                    config_dict["tolerances"][key] = float(value)
                else:
                    config_dict[key] = value

        return cls.from_dict(config_dict)


# Global configuration instance
config = OpenRGConfig()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts and benchmarks.

    The library itself only creates module loggers; call this from
    entry points that want console output.

    Args:
        level: Logging level name (default: config.log_level)
    """
    name = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
