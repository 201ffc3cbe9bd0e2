"""Asset hashing service - content-addressed filenames and manifest reconciliation.

For each source file the service derives a content hash, decides whether the
current hashed artifact is still valid, writes the new artifact while removing
superseded ones, and records the outcome in its asset library. The library is
what ``save_manifest`` persists.

Processing is synchronous and strictly ordered: every read, write and delete
for one file completes before the next file is looked at. Filesystem errors
propagate unwrapped and abort the remaining batch; files already processed in
that batch keep their results.
"""

import stat
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from asset_hasher.core.config.hasher_config import HasherConfig
from asset_hasher.core.file_reference import FileReference
from asset_hasher.core.models import AssetRecord
from asset_hasher.core.utils.digest import generate_hash, get_hashers
from asset_hasher.core.utils.file_utils import DEFAULT_FILE_MODE, write_atomic
from asset_hasher.core.utils.path_utils import relative_to_base, split_asset_name
from asset_hasher.core.utils.template import render_filename
from asset_hasher.interfaces.manifest_store import ManifestStore
from asset_hasher.services.artifact_locator import find_stale_artifacts
from asset_hasher.services.asset_library import AssetLibrary
from asset_hasher.services.file_discovery import HashInput, iter_file_references
from asset_hasher.services.manifest_store import JsonManifestStore


class AssetHasher:
    """Hashes asset files and owns the asset library mirrored to the manifest.

    Each instance has its own configuration and library, so independent
    hashers can coexist (e.g. one per output directory, or per test).

    Usage:
        hasher = AssetHasher({"base": "public", "path": "public"})
        hasher.load_manifest()

        record = hasher.hash_files("public/logo.png")
        records = hasher.hash_files(["public/css", "public/js/*.js"], {"replace": True})

        hasher.save_manifest()
    """

    def __init__(
        self,
        config: HasherConfig | dict[str, Any] | None = None,
        manifest_store: ManifestStore | None = None,
    ):
        """Initialize asset hasher.

        Args:
            config: Session configuration (HasherConfig or option dict)
            manifest_store: Manifest persistence backend (JSON by default)
        """
        if isinstance(config, HasherConfig):
            self._config = config
        else:
            self._config = HasherConfig().merged(config)
        self._library = AssetLibrary()
        self._manifest_store: ManifestStore = manifest_store or JsonManifestStore()

    @property
    def config(self) -> HasherConfig:
        """Session default configuration."""
        return self._config

    @property
    def library(self) -> AssetLibrary:
        """Asset library owned by this hasher."""
        return self._library

    # -- configuration ----------------------------------------------------
    def get(self, key: str | None = None) -> Any:
        """Get a config option.

        Args:
            key: Option name. If omitted or empty, the whole configuration is
                returned as a flat dict.

        Returns:
            Option value, or an empty string if the key is not present
        """
        if not key:
            return self._config.as_flat_dict()
        return self._config.get_option(key)

    def set(self, options: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Update session config options without dropping earlier ones.

        Raises:
            pydantic.ValidationError: If an option value is invalid
        """
        self._config = self._config.merged({**(options or {}), **kwargs})
        logger.debug(f"Updated configuration: {self._config!r}")

    def get_hashers(self) -> list[str]:
        """List digest algorithms usable for the ``hasher`` option."""
        return get_hashers()

    # -- hashing ----------------------------------------------------------
    def hash_files(
        self,
        paths: HashInput | Iterable[HashInput],
        options: dict[str, Any] | None = None,
    ) -> AssetRecord | list[AssetRecord] | None:
        """Hash files for the given inputs.

        Options override the session config for this call only.

        Args:
            paths: File path, directory, glob pattern, file reference, or an
                iterable mixing them
            options: Per-call config overrides

        Returns:
            A single record when exactly one file was processed, a list in
            traversal order when several were, None when nothing matched
        """
        config = self._config.merged(options)
        results = [
            self.hash_file(reference, config)
            for reference in iter_file_references(paths)
        ]

        logger.debug(f"Processed {len(results)} file(s)")
        if not results:
            return None
        return results[0] if len(results) == 1 else results

    def hash_file(
        self, reference: FileReference, config: HasherConfig | None = None
    ) -> AssetRecord:
        """Hash one file and publish its hashed artifact.

        Args:
            reference: File to hash
            config: Effective configuration (session default if omitted)

        Returns:
            Record describing the file's current artifact

        Raises:
            OSError: If reading, writing or deleting a file fails
        """
        config = config or self._config
        file_path = reference.path
        original = relative_to_base(file_path, config.base)
        name, ext = split_asset_name(file_path)
        file_type = ext.lower()

        # Paths carrying the hash key are generated artifacts, never sources
        if config.hash_key in original:
            logger.debug(f"Skipping hashed artifact: {original}")
            return AssetRecord.unhashed(original, file_type)

        existing = self._library.get(original)

        content = reference.read_content()
        digest = generate_hash(content, config.hasher, config.length)
        if not digest:
            logger.debug(f"No content to hash: {original}")
            return AssetRecord.unhashed(original, file_type)

        new_hash = config.hash_key + digest
        if existing is not None and existing.hash == new_hash:
            logger.debug(f"Unchanged: {original} -> {existing.path}")
            return existing

        directory = file_path.parent
        artifact_file = directory / render_filename(
            config.template, name, new_hash, ext
        )

        for stale in find_stale_artifacts(
            directory, name, ext, config.template, config.hash_key
        ):
            # Rewritten in place below; without save nothing may remain at the path
            if config.save and stale == artifact_file:
                continue
            stale.unlink()
            logger.debug(f"Removed stale artifact: {stale}")

        if config.save:
            write_atomic(artifact_file, content, mode=self._file_mode(reference))
        if config.replace:
            file_path.unlink(missing_ok=not reference.from_disk)
            logger.debug(f"Removed original: {file_path}")

        record = self._library.put(
            AssetRecord(
                original=original,
                path=relative_to_base(artifact_file, config.base),
                hash=new_hash,
                hashed=True,
                type=file_type,
            )
        )
        logger.info(f"Hashed {record.original} -> {record.path}")
        return record

    @staticmethod
    def _file_mode(reference: FileReference) -> int:
        if reference.from_disk:
            return stat.S_IMODE(reference.path.stat().st_mode)
        return DEFAULT_FILE_MODE

    # -- asset library ----------------------------------------------------
    def get_asset(self, original: str) -> AssetRecord | None:
        """Get the record for an original path, or None if never hashed."""
        return self._library.get(original)

    def get_assets(self) -> dict[str, AssetRecord]:
        """Get the live asset library mapping."""
        return self._library.get_all()

    def update_asset(self, original: str, data: dict[str, Any]) -> None:
        """Merge fields into an existing asset record (no-op if absent)."""
        self._library.update(original, data)

    def reset_assets(self) -> dict[str, AssetRecord]:
        """Clear the asset library and return the empty mapping."""
        logger.debug("Asset library reset")
        return self._library.reset()

    # -- manifest ---------------------------------------------------------
    def load_manifest(self, options: dict[str, Any] | None = None) -> int:
        """Populate the asset library from the manifest file.

        A missing or unusable manifest leaves the library unchanged.

        Returns:
            Number of records loaded
        """
        manifest_file = self._config.merged(options).manifest_file
        if manifest_file is None:
            return 0
        return self._manifest_store.load(manifest_file, self._library)

    def save_manifest(self, options: dict[str, Any] | None = None) -> Path | None:
        """Write the asset library to the manifest file.

        Returns:
            Path written, or None when manifest persistence is disabled

        Raises:
            OSError: If the manifest cannot be written
        """
        manifest_file = self._config.merged(options).manifest_file
        if manifest_file is None:
            logger.debug("Manifest disabled, not saving")
            return None
        self._manifest_store.save(manifest_file, self._library)
        return manifest_file
