"""Generator settings and the YAML/TOML loaders that fill them in."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml

from dungeon3d.errors import ConfigError

log = structlog.get_logger(__name__)

# Upper bound of the primary path length relative to the requested room count.
PATH_PORTION = 0.6
# How strongly branch length favours rooms near the end of the path; the
# effective modifier grows to 1.0 at the final path room.
RANDOM_MODIFIER = 0.1


@dataclass
class GeneratorSettings:
    path_portion: float = PATH_PORTION
    random_modifier: float = RANDOM_MODIFIER
    # Replays the legacy direction scan that wraps modulo 5 instead of 6.
    legacy_direction_wrap: bool = False
    # Run the full invariant check on every generated dungeon.
    validate: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("path_portion", "random_modifier"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
        for name in ("legacy_direction_wrap", "validate"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false, got {getattr(self, name)!r}")
        if not 0.0 < self.path_portion <= 1.0:
            raise ConfigError(
                f"path_portion must be in (0, 1], got {self.path_portion!r}"
            )
        if self.random_modifier <= 0.0:
            raise ConfigError(
                f"random_modifier must be positive, got {self.random_modifier!r}"
            )
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0
        ):
            raise ConfigError(f"seed must be a non-negative integer, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorSettings":
        """Build settings from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown generator settings: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as f:  # tomllib requires bytes mode
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        log.error("Error parsing TOML settings", path=str(path), error=str(e))
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error("Error parsing YAML settings", path=str(path), error=str(e))
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        log.warning("Settings file is empty", path=str(path))
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a mapping")
    return data


def load_settings(path: str | Path) -> GeneratorSettings:
    """Load :class:`GeneratorSettings` from a ``.yaml``/``.yml`` or ``.toml`` file.

    Values may sit at the top level or under a ``generator`` table.
    """
    config_path = Path(path)
    if not config_path.is_file():
        log.error("Settings file not found", path=str(config_path))
        raise ConfigError(f"Settings file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix == ".toml":
        data = _read_toml(config_path)
    elif suffix in (".yaml", ".yml"):
        data = _read_yaml(config_path)
    else:
        raise ConfigError(f"Unsupported settings format: {config_path.suffix!r}")

    section = data.get("generator", data)
    if not isinstance(section, dict):
        raise ConfigError("'generator' section must be a mapping")
    settings = GeneratorSettings.from_dict(section)
    log.info("Generator settings loaded", path=str(config_path), **settings.to_dict())
    return settings


__all__ = ["GeneratorSettings", "load_settings", "PATH_PORTION", "RANDOM_MODIFIER"]
