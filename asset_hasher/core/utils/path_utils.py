"""Path utility functions for asset-hasher."""

import os
from pathlib import Path


def relative_to_base(input_path: str | Path, base_dir: str | Path) -> str:
    """Express a file path relative to the configured base directory.

    Both paths are made absolute against the current working directory, so
    relative inputs and a relative base (the default ``"."``) line up. Paths
    outside the base are kept as ``../`` relative paths rather than rejected.

    Args:
        input_path: File path (absolute or relative to the working directory)
        base_dir: Base directory recorded paths are relative to

    Returns:
        Relative path with forward slashes
    """
    abs_path = os.path.abspath(input_path)
    abs_base = os.path.abspath(base_dir)
    return Path(os.path.relpath(abs_path, abs_base)).as_posix()


def split_asset_name(file_path: str | Path) -> tuple[str, str]:
    """Split a file path into base name and extension.

    Args:
        file_path: Path to split

    Returns:
        Tuple of (name without extension, extension without the leading dot)
    """
    stem, ext = os.path.splitext(Path(file_path).name)
    return stem, ext[1:]
