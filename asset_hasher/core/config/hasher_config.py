"""Hashing configuration for asset-hasher.

This module provides the typed option set consumed by the hashing
orchestrator, plus a side-channel store for arbitrary caller keys.
"""

import argparse
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_hasher.core.constants import (
    DEFAULT_HASH_KEY,
    DEFAULT_HASH_LENGTH,
    DEFAULT_HASHER,
    DEFAULT_MANIFEST_NAME,
    DEFAULT_TEMPLATE,
    ENV_PREFIX,
    HASH_PLACEHOLDER,
)
from asset_hasher.core.utils.digest import is_supported_hasher

_TRUTHY = ("true", "1", "yes")


class HasherConfig(BaseModel):
    """Options controlling how files are hashed and where results go.

    Configuration can be provided via:
    - Environment variables (ASSET_HASHER_*)
    - Configuration files
    - CLI arguments
    - Per-call overrides passed to ``AssetHasher.hash_files``
    - Default values

    Keys that are not known options are accepted and kept in ``extras``.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    hasher: str = Field(default=DEFAULT_HASHER, description="Digest algorithm name")
    hash_key: str = Field(
        default=DEFAULT_HASH_KEY,
        alias="hashKey",
        min_length=1,
        description="Literal marker prefixed to every digest",
    )
    length: int = Field(
        default=DEFAULT_HASH_LENGTH, ge=1, description="Max digest characters kept"
    )
    replace: bool = Field(
        default=False, description="Delete the original once the artifact is written"
    )
    manifest: str | bool = Field(
        default=DEFAULT_MANIFEST_NAME,
        description="Manifest file name; False or empty disables persistence",
    )
    base: str = Field(default=".", description="Root directory for recorded paths")
    path: str = Field(default=".", description="Directory the manifest is written to")
    save: bool = Field(default=True, description="Write hashed artifacts to disk")
    template: str = Field(
        default=DEFAULT_TEMPLATE, description="Hashed filename template"
    )
    extras: dict[str, Any] = Field(
        default_factory=dict, description="Arbitrary caller-defined keys"
    )

    @field_validator("hasher")
    @classmethod
    def validate_hasher(cls, v: str) -> str:
        """Validate the digest algorithm is available."""
        if not is_supported_hasher(v):
            raise ValueError(
                f"Invalid hasher '{v}'. Must be one of the names returned by get_hashers()"
            )
        return v

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Validate the template carries a hash placeholder."""
        if HASH_PLACEHOLDER not in v:
            raise ValueError(f"Template '{v}' must contain {HASH_PLACEHOLDER}")
        return v

    @field_validator("manifest")
    @classmethod
    def validate_manifest(cls, v: str | bool) -> str | bool:
        """Normalize manifest values; True means the default name."""
        if v is True:
            return DEFAULT_MANIFEST_NAME
        return v

    @field_validator("base", "path", mode="before")
    @classmethod
    def validate_directory(cls, v: Any) -> Any:
        """Accept Path objects for directory options."""
        if isinstance(v, Path):
            return str(v)
        return v

    @property
    def manifest_enabled(self) -> bool:
        """Check if manifest persistence is enabled."""
        return bool(self.manifest)

    @property
    def manifest_file(self) -> Path | None:
        """Full path of the manifest file, or None when disabled."""
        if not self.manifest_enabled:
            return None
        return Path(self.path) / str(self.manifest)

    @classmethod
    def known_options(cls) -> set[str]:
        """Names (and aliases) of documented options."""
        names: set[str] = set()
        for name, info in cls.model_fields.items():
            if name == "extras":
                continue
            names.add(name)
            if info.alias:
                names.add(info.alias)
        return names

    def merged(self, options: dict[str, Any] | None = None) -> "HasherConfig":
        """Return a validated copy with ``options`` applied.

        Unknown keys are merged into ``extras``. The receiver is not modified.

        Args:
            options: Option overrides

        Returns:
            New HasherConfig instance
        """
        data = self.model_dump()
        data["extras"] = dict(self.extras)
        if options:
            known = self.known_options()
            for key, value in options.items():
                if key in known:
                    data["hash_key" if key == "hashKey" else key] = value
                else:
                    data["extras"][key] = value
        return type(self).model_validate(data)

    def get_option(self, key: str) -> Any:
        """Get a single option value.

        Args:
            key: Option name, alias, or extras key

        Returns:
            Option value, or an empty string if the key is unknown
        """
        if key == "hashKey":
            key = "hash_key"
        if key in type(self).model_fields and key != "extras":
            return getattr(self, key)
        return self.extras.get(key, "")

    def as_flat_dict(self) -> dict[str, Any]:
        """All options and extras in one flat dictionary."""
        data = self.model_dump(exclude={"extras"})
        data.update(self.extras)
        return data

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add hashing-related CLI arguments."""
        parser.add_argument(
            "--hasher",
            type=str,
            help=f"Digest algorithm (default: {DEFAULT_HASHER})",
        )
        parser.add_argument(
            "--hash-key",
            type=str,
            help=f"Marker prefixed to every digest (default: {DEFAULT_HASH_KEY})",
        )
        parser.add_argument(
            "--length",
            type=int,
            help=f"Maximum digest length (default: {DEFAULT_HASH_LENGTH})",
        )
        parser.add_argument(
            "--replace",
            action="store_true",
            default=None,
            help="Delete original files once hashed copies are written",
        )
        parser.add_argument(
            "--no-save",
            dest="save",
            action="store_false",
            default=None,
            help="Record hashed names without writing hashed files",
        )
        parser.add_argument(
            "--template",
            type=str,
            help=f"Hashed filename template (default: {DEFAULT_TEMPLATE})",
        )
        parser.add_argument(
            "--base",
            type=Path,
            help="Base directory recorded paths are relative to (default: .)",
        )
        parser.add_argument(
            "--manifest",
            type=str,
            help=f"Manifest file name (default: {DEFAULT_MANIFEST_NAME})",
        )
        parser.add_argument(
            "--no-manifest",
            action="store_true",
            help="Do not read or write a manifest file",
        )
        parser.add_argument(
            "--manifest-path",
            type=Path,
            help="Directory the manifest file is written to (default: .)",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load hashing config from environment variables."""
        config: dict[str, Any] = {}
        for option in ("hasher", "hash_key", "manifest", "base", "path", "template"):
            if value := os.getenv(f"{ENV_PREFIX}{option.upper()}"):
                config[option] = value
        if length := os.getenv(f"{ENV_PREFIX}LENGTH"):
            try:
                config["length"] = int(length)
            except ValueError:
                pass
        for flag in ("replace", "save"):
            if value := os.getenv(f"{ENV_PREFIX}{flag.upper()}"):
                config[flag] = value.lower() in _TRUTHY
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract hashing config from CLI arguments."""
        overrides: dict[str, Any] = {}
        for option in ("hasher", "hash_key", "length", "template", "manifest"):
            value = getattr(args, option, None)
            if value is not None:
                overrides[option] = value
        if getattr(args, "replace", None) is not None:
            overrides["replace"] = args.replace
        if getattr(args, "save", None) is not None:
            overrides["save"] = args.save
        if getattr(args, "base", None) is not None:
            overrides["base"] = str(args.base)
        if getattr(args, "manifest_path", None) is not None:
            overrides["path"] = str(args.manifest_path)
        if getattr(args, "no_manifest", False):
            overrides["manifest"] = False
        return overrides

    def __repr__(self) -> str:
        """String representation of hashing configuration."""
        parts = [
            f"hasher={self.hasher}",
            f"hash_key={self.hash_key}",
            f"length={self.length}",
            f"template={self.template}",
        ]
        if self.replace:
            parts.append("replace=True")
        if not self.save:
            parts.append("save=False")
        return f"HasherConfig({', '.join(parts)})"
