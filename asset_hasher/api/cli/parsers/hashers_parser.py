"""Hashers command argument parser for asset-hasher CLI."""

import argparse
from typing import Any, cast

from .common_arguments import add_common_arguments


def add_hashers_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add hashers command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured hashers subparser
    """
    hashers_parser = subparsers.add_parser(
        "hashers",
        help="List available digest algorithms",
        description="List the digest algorithms accepted by --hasher on this platform.",
    )
    hashers_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    add_common_arguments(hashers_parser)

    return cast(argparse.ArgumentParser, hashers_parser)


__all__ = ["add_hashers_subparser"]
