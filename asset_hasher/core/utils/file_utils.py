"""File writing helpers."""

import os
import tempfile
from pathlib import Path

# Permission bits for newly written artifacts and manifests
DEFAULT_FILE_MODE = 0o644


def write_atomic(target: Path, content: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write bytes to ``target`` through a temp file and ``os.replace``.

    The target either keeps its previous content or holds the complete new
    content; a partially written file is never visible under its final name.

    Args:
        target: Destination path
        content: Bytes to write
        mode: Permission bits applied before the rename

    Raises:
        OSError: If the write or rename fails (target left untouched)
    """
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(
        dir=target.parent, prefix=f".{target.name}.tmp.", suffix=target.suffix
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(temp_path, mode)
        os.replace(temp_path, target)
    except BaseException:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        raise
