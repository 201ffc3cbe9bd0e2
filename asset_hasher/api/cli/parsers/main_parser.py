"""Top-level argument parser for the asset-hasher CLI."""

import argparse
from typing import Any

from asset_hasher import __version__


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser.

    Returns:
        Parser without subcommands attached
    """
    parser = argparse.ArgumentParser(
        prog="asset-hasher",
        description="Generate content-hashed asset filenames and an asset manifest",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"asset-hasher {__version__}",
    )
    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> Any:
    """Attach the subcommand container to the main parser.

    Returns:
        Subparsers object to register commands on
    """
    return parser.add_subparsers(dest="command", help="Available commands")
