"""Data model for hashed assets."""

from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class AssetRecord:
    """Hashing record for one original source file.

    Attributes:
        original: Source path relative to the configured base directory
        path: Currently valid artifact path (equals ``original`` when not hashed)
        hash: Hash-key prefixed digest, or empty if never hashed
        hashed: Whether ``path`` differs from ``original`` due to hashing
        type: File extension without the leading dot
        metadata: Extra fields merged in by callers, serialized flat
    """

    original: str
    path: str
    hash: str = ""
    hashed: bool = False
    type: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def unhashed(cls, original: str, file_type: str) -> "AssetRecord":
        """Create a record for a file that produced no hash."""
        return cls(original=original, path=original, type=file_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssetRecord":
        """Create AssetRecord from a manifest entry.

        Args:
            data: Dictionary with record fields; unknown keys go to metadata

        Returns:
            AssetRecord instance
        """
        known = {f.name for f in fields(cls)} - {"metadata"}
        original = str(data["original"])
        return cls(
            original=original,
            path=str(data.get("path") or original),
            hash=str(data.get("hash") or ""),
            hashed=data.get("hashed") is True,
            type=str(data.get("type") or ""),
            metadata={k: v for k, v in data.items() if k not in known},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dictionary for the manifest.

        Returns:
            Dictionary representation
        """
        return {
            **self.metadata,
            "original": self.original,
            "path": self.path,
            "hash": self.hash,
            "hashed": self.hashed,
            "type": self.type,
        }

    def merge(self, data: dict[str, Any]) -> None:
        """Merge fields into this record, keeping unknown keys as metadata."""
        for key, value in data.items():
            # original is the library key and stays fixed
            if key in ("metadata", "original"):
                continue
            if key in ("path", "hash", "hashed", "type"):
                setattr(self, key, value)
            else:
                self.metadata[key] = value
