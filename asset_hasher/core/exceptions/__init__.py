"""Exceptions raised by asset-hasher."""

from .hasher import AssetHasherError, ConfigurationError, UnsupportedHasherError

__all__ = [
    "AssetHasherError",
    "ConfigurationError",
    "UnsupportedHasherError",
]
