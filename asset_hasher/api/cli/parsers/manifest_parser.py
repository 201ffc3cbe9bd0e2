"""Manifest command argument parser for asset-hasher CLI."""

import argparse
from pathlib import Path
from typing import Any, cast

from .common_arguments import add_common_arguments


def add_manifest_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add manifest command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured manifest subparser
    """
    manifest_parser = subparsers.add_parser(
        "manifest",
        help="Show the asset manifest",
        description="Print the records stored in the asset manifest file.",
    )
    manifest_parser.add_argument(
        "--manifest",
        type=str,
        help="Manifest file name (default: from config or assets.json)",
    )
    manifest_parser.add_argument(
        "--manifest-path",
        type=Path,
        help="Directory holding the manifest file (default: .)",
    )
    manifest_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    add_common_arguments(manifest_parser)

    return cast(argparse.ArgumentParser, manifest_parser)


__all__ = ["add_manifest_subparser"]
