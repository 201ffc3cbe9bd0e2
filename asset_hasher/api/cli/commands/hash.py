"""Hash command module - hashes assets and updates the manifest."""

import argparse
import sys

from loguru import logger

from asset_hasher.core.config.config import Config
from asset_hasher.core.models import AssetRecord
from asset_hasher.services.hashing_service import AssetHasher

from ..utils.rich_output import RichOutputFormatter


def hash_command(args: argparse.Namespace, config: Config) -> None:
    """Execute the hash command.

    Loads the existing manifest so unchanged files are recognized, hashes the
    requested paths, then saves the manifest.

    Args:
        args: Parsed command-line arguments
        config: Pre-validated configuration instance
    """
    formatter = RichOutputFormatter(verbose=getattr(args, "verbose", False))
    hasher = AssetHasher(config.hasher)

    loaded = hasher.load_manifest()
    formatter.verbose_info(f"Loaded {loaded} asset(s) from manifest")

    try:
        result = hasher.hash_files(args.paths)
    except OSError as e:
        formatter.error(f"Hashing failed: {e}")
        logger.exception("Hash command error details")
        sys.exit(1)

    if result is None:
        records: list[AssetRecord] = []
    elif isinstance(result, list):
        records = result
    else:
        records = [result]

    try:
        manifest_file = hasher.save_manifest()
    except OSError as e:
        formatter.error(f"Failed to save manifest: {e}")
        logger.exception("Manifest save error details")
        sys.exit(1)

    if getattr(args, "json", False):
        formatter.json_output([record.to_dict() for record in records])
        return

    if not records:
        formatter.warning("No files matched the given paths")
        return

    formatter.records_table(records, title="Hashed assets")
    hashed = sum(1 for record in records if record.hashed)
    formatter.success(f"Hashed {hashed} of {len(records)} file(s)")
    if manifest_file is not None:
        formatter.info(f"Manifest written to {manifest_file}")


__all__ = ["hash_command"]
