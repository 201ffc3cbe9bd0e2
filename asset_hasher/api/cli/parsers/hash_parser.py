"""Hash command argument parser for asset-hasher CLI."""

import argparse
from typing import Any, cast

from .common_arguments import add_common_arguments, add_config_arguments


def add_hash_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add hash command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured hash subparser
    """
    hash_parser = subparsers.add_parser(
        "hash",
        help="Hash asset files and update the manifest",
        description=(
            "Write content-hashed copies of the given files, directories or glob "
            "patterns, remove superseded hashed copies, and update the manifest."
        ),
    )
    hash_parser.add_argument(
        "paths",
        nargs="+",
        type=str,
        help="Files, directories or glob patterns to hash",
    )
    hash_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )

    add_common_arguments(hash_parser)
    add_config_arguments(hash_parser, ["hasher"])

    return cast(argparse.ArgumentParser, hash_parser)


__all__ = ["add_hash_subparser"]
