"""JSON manifest persistence.

The manifest is a single JSON object keyed by each source's original path,
with the AssetRecord fields as values. Reads are forgiving (a bad manifest is
treated as no manifest); writes go through write-then-rename so readers never
observe a partially written file.
"""

import json
from pathlib import Path

from loguru import logger

from asset_hasher.core.utils.file_utils import write_atomic
from asset_hasher.services.asset_library import AssetLibrary


class JsonManifestStore:
    """Reads and writes the asset library as a flat JSON object.

    USAGE:
        store = JsonManifestStore()
        store.load(Path("assets.json"), library)
        store.save(Path("assets.json"), library)
    """

    def __init__(self, indent: int | None = 2):
        """Initialize manifest store.

        Args:
            indent: JSON indentation (None for compact output)
        """
        self.indent = indent

    def load(self, manifest_file: Path, library: AssetLibrary) -> int:
        """Populate the library from a manifest file.

        Returns:
            Number of records loaded (0 when the manifest is absent or unusable)
        """
        try:
            content = manifest_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No manifest at {manifest_file}")
            return 0
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read manifest {manifest_file}: {e}")
            return 0

        if not content.strip():
            return 0

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring malformed manifest {manifest_file}: {e}")
            return 0

        if not isinstance(data, dict):
            logger.warning(
                f"Ignoring manifest {manifest_file}: expected object, got {type(data).__name__}"
            )
            return 0

        loaded = library.load(data)
        logger.debug(f"Loaded {loaded} asset(s) from {manifest_file}")
        return loaded

    def save(self, manifest_file: Path, library: AssetLibrary) -> None:
        """Write the full asset library to a manifest file.

        Raises:
            OSError: If the manifest cannot be written
        """
        content = json.dumps(library.to_dict(), indent=self.indent)
        write_atomic(manifest_file, content.encode("utf-8"))
        logger.debug(f"Saved {len(library)} asset(s) to {manifest_file}")
