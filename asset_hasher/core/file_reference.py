"""File references accepted by the hashing orchestrator.

A reference is either a path on disk or an in-memory buffer paired with the
path it represents. Both expose the same two members, ``path`` and
``read_content()``, so the orchestrator never probes for attributes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class PathReference:
    """A file read from disk when hashed."""

    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))

    @property
    def from_disk(self) -> bool:
        return True

    def read_content(self) -> bytes:
        """Read file bytes.

        Returns:
            File content, or empty bytes when the file does not exist

        Raises:
            OSError: If the file exists but cannot be read
        """
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""


@dataclass(frozen=True)
class BufferReference:
    """Content already held in memory, addressed by the path it belongs to."""

    path: Path
    content: bytes | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if isinstance(self.content, str):
            object.__setattr__(self, "content", self.content.encode("utf-8"))

    @property
    def from_disk(self) -> bool:
        return False

    def read_content(self) -> bytes:
        return self.content or b""


FileReference = Union[PathReference, BufferReference]
