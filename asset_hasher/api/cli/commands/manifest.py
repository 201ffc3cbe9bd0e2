"""Manifest command module - shows the persisted asset manifest."""

import argparse
import sys

from asset_hasher.core.config.config import Config
from asset_hasher.services.hashing_service import AssetHasher

from ..utils.rich_output import RichOutputFormatter


def manifest_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the manifest command.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=getattr(args, "verbose", False))
    hasher = AssetHasher(config.hasher)

    manifest_file = hasher.config.manifest_file
    if manifest_file is None:
        formatter.error("Manifest persistence is disabled")
        sys.exit(1)

    hasher.load_manifest()
    assets = hasher.get_assets()

    if getattr(args, "json", False):
        formatter.json_output(hasher.library.to_dict())
        return

    if not assets:
        formatter.info(f"No assets recorded in {manifest_file}")
        return

    formatter.records_table(list(assets.values()), title=str(manifest_file))


__all__ = ["manifest_command"]
