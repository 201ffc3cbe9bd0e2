"""ManifestStore protocol for asset-hasher - abstract interface for manifest persistence."""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from asset_hasher.services.asset_library import AssetLibrary


class ManifestStore(Protocol):
    """Abstract protocol for manifest persistence.

    The hashing orchestrator decides what to persist and when; stores only
    move the full asset library to and from a location.
    """

    def load(self, manifest_file: Path, library: "AssetLibrary") -> int:
        """Populate ``library`` from ``manifest_file``.

        A missing, unreadable or malformed manifest is not an error and must
        leave the library unchanged.

        Returns:
            Number of records loaded
        """
        ...

    def save(self, manifest_file: Path, library: "AssetLibrary") -> None:
        """Write the full asset library to ``manifest_file``."""
        ...
