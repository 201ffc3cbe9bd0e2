"""Hashers command module - lists available digest algorithms."""

import argparse

from asset_hasher.core.config.config import Config
from asset_hasher.core.utils.digest import get_hashers

from ..utils.rich_output import RichOutputFormatter


def hashers_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the hashers command.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=getattr(args, "verbose", False))
    hashers = get_hashers()

    if getattr(args, "json", False):
        formatter.json_output({"hashers": hashers, "default": config.hasher.hasher})
        return

    formatter.info(f"Available hashers (current: {config.hasher.hasher})")
    formatter.bullet_list(hashers)


__all__ = ["hashers_command"]
