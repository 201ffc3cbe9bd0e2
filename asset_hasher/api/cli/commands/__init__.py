"""Command modules for asset-hasher CLI."""

from .hash import hash_command
from .hashers import hashers_command
from .manifest import manifest_command

__all__ = ["hash_command", "hashers_command", "manifest_command"]
