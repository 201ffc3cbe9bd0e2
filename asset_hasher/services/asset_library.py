"""In-memory asset library.

The library maps each original source path (relative to the base directory)
to its current AssetRecord. It is the source of truth mirrored to the
manifest file and is owned by a single AssetHasher instance.
"""

from typing import Any

from loguru import logger

from asset_hasher.core.models import AssetRecord


class AssetLibrary:
    """Mapping of original path -> AssetRecord.

    Usage:
        library = AssetLibrary()
        library.put(AssetRecord(original="logo.png", path="logo-aH4urS1a2b.png"))
        record = library.get("logo.png")
        library.update("logo.png", {"cdn": True})
        library.reset()
    """

    def __init__(self) -> None:
        self._assets: dict[str, AssetRecord] = {}

    def __contains__(self, original: object) -> bool:
        return original in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def get_all(self) -> dict[str, AssetRecord]:
        """Get the live asset mapping (not a copy)."""
        return self._assets

    def get(self, original: str) -> AssetRecord | None:
        """Get a record by original path.

        Returns:
            The record, or None if the path has never been hashed
        """
        return self._assets.get(original)

    def put(self, record: AssetRecord) -> AssetRecord:
        """Insert a record or update the existing one in place.

        Updating in place keeps metadata merged in by callers and keeps
        references handed out earlier pointing at current data.

        Returns:
            The record stored in the library
        """
        existing = self._assets.get(record.original)
        if existing is None:
            self._assets[record.original] = record
            return record

        existing.path = record.path
        existing.hash = record.hash
        existing.hashed = record.hashed
        existing.type = record.type
        return existing

    def update(self, original: str, data: dict[str, Any]) -> None:
        """Merge fields into an existing record.

        Does nothing if the record does not exist or ``data`` is not a dict.
        """
        record = self._assets.get(original)
        if record is None or not isinstance(data, dict):
            logger.debug(f"Skipping update for unknown asset: {original}")
            return
        record.merge(data)

    def reset(self) -> dict[str, AssetRecord]:
        """Clear the library.

        Returns:
            The now-empty mapping
        """
        self._assets = {}
        return self._assets

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Serialize every record for the manifest."""
        return {original: record.to_dict() for original, record in self._assets.items()}

    def load(self, data: dict[str, Any]) -> int:
        """Populate the library from manifest data.

        Entries that are not objects are skipped. The manifest key wins over
        an ``original`` field inside the entry.

        Returns:
            Number of records loaded
        """
        loaded = 0
        for original, entry in data.items():
            if not isinstance(entry, dict):
                logger.warning(f"Skipping malformed manifest entry for {original}")
                continue
            self._assets[original] = AssetRecord.from_dict({**entry, "original": original})
            loaded += 1
        return loaded
