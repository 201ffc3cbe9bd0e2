"""Core utilities package."""

from .digest import generate_hash, get_hashers, is_supported_hasher
from .file_utils import write_atomic
from .path_utils import relative_to_base, split_asset_name
from .template import build_artifact_patterns, render_filename

__all__ = [
    "build_artifact_patterns",
    "generate_hash",
    "get_hashers",
    "is_supported_hasher",
    "relative_to_base",
    "render_filename",
    "split_asset_name",
    "write_atomic",
]
