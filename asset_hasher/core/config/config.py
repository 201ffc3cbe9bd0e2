"""Top-level configuration for asset-hasher.

Sources are layered, lowest precedence first:
1. Defaults
2. JSON config file (``--config``)
3. Environment variables (ASSET_HASHER_*)
4. CLI arguments
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field

from asset_hasher.core.exceptions import ConfigurationError

from .hasher_config import HasherConfig
from .logging_config import LoggingConfig


def _deep_update(target: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
    return target


class Config(BaseModel):
    """Aggregated hashing and logging configuration."""

    hasher: HasherConfig = Field(default_factory=HasherConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load_file(cls, config_file: Path) -> dict[str, Any]:
        """Read a JSON config file.

        The file may either hold ``{"hasher": {...}, "logging": {...}}`` or a
        flat object of hashing options.

        Raises:
            ConfigurationError: If the file is not a JSON object
            OSError: If the file cannot be read
        """
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a JSON object, got {type(data).__name__}"
            )

        if isinstance(data.get("hasher"), dict) or isinstance(data.get("logging"), dict):
            return data
        return {"hasher": data}

    @classmethod
    def from_sources(
        cls, config_file: Path | None = None, args: Any | None = None
    ) -> "Config":
        """Build configuration from file, environment and CLI arguments.

        Args:
            config_file: Optional JSON config file
            args: Optional parsed command line arguments

        Returns:
            Validated Config instance
        """
        data: dict[str, Any] = {"hasher": {}, "logging": {}}

        if config_file is not None:
            logger.debug(f"Loading configuration from {config_file}")
            _deep_update(data, cls.load_file(config_file))

        _deep_update(data, {"hasher": HasherConfig.load_from_env()})

        if args is not None:
            _deep_update(data, {"hasher": HasherConfig.extract_cli_overrides(args)})
            if logging_overrides := LoggingConfig.extract_cli_overrides(args):
                _deep_update(data, {"logging": logging_overrides})

        hasher = HasherConfig().merged(data.get("hasher") or {})
        return cls(hasher=hasher, logging=LoggingConfig.model_validate(data.get("logging") or {}))
