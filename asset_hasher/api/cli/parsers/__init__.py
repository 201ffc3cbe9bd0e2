"""Argument parser utilities for asset-hasher CLI commands."""

from .hash_parser import add_hash_subparser
from .hashers_parser import add_hashers_subparser
from .main_parser import create_main_parser, setup_subparsers
from .manifest_parser import add_manifest_subparser

__all__ = [
    "add_hash_subparser",
    "add_hashers_subparser",
    "add_manifest_subparser",
    "create_main_parser",
    "setup_subparsers",
]
