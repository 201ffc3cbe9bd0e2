"""Service layer for asset-hasher."""

from .asset_library import AssetLibrary
from .hashing_service import AssetHasher
from .manifest_store import JsonManifestStore

__all__ = ["AssetHasher", "AssetLibrary", "JsonManifestStore"]
