"""asset-hasher: content-hashed asset filenames and manifest generation."""

from asset_hasher.core.file_reference import BufferReference, PathReference
from asset_hasher.core.models import AssetRecord
from asset_hasher.core.utils.digest import get_hashers
from asset_hasher.services.hashing_service import AssetHasher

__version__ = "0.1.0"

__all__ = [
    "AssetHasher",
    "AssetRecord",
    "BufferReference",
    "PathReference",
    "get_hashers",
]
