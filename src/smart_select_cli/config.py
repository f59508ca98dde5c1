import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from smart_select.config import EngineConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be used"""


class SelectConfig:
    """Handles loading and validation of .smart-select.toml configuration"""

    def __init__(self, config_path: Path | None = None, strict: bool = False):
        self.data: dict[str, Any] = {}
        self.strict = strict

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            if self.strict:
                raise ConfigError(f"Cannot read {path}: {e}") from e
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return

        self.data = data.get("tool", {}).get("smart-select", {})

    def to_engine_config(self, **overrides: Any) -> EngineConfig:
        """Build the engine config; explicit non-None overrides win over the file"""
        values = {key.replace("-", "_"): value for key, value in self.data.items()}
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return EngineConfig(**values)
        except ValidationError as e:
            if self.strict:
                raise ConfigError(str(e)) from e
            logger.warning("Invalid smart-select configuration, using defaults: %s", e)
            return EngineConfig(**{key: value for key, value in overrides.items() if value is not None})
