"""Main entry point for the asset-hasher CLI."""

import argparse
import sys
from typing import Any

from loguru import logger
from pydantic import ValidationError

from asset_hasher.core.config.config import Config
from asset_hasher.core.exceptions import ConfigurationError

from .parsers import (
    add_hash_subparser,
    add_hashers_subparser,
    add_manifest_subparser,
    create_main_parser,
    setup_subparsers,
)
from .utils.rich_output import RichOutputFormatter


def setup_logging(verbose: bool = False, config: Any | None = None) -> None:
    """Configure loguru sinks for a CLI run.

    Console output is DEBUG when verbose, otherwise the configured console
    level. File logging is added when enabled in ``config.logging``.

    Args:
        verbose: Whether to enable verbose console logging
        config: Object with a ``logging`` attribute (LoggingConfig), or None
    """
    logger.remove()

    logging_config = getattr(config, "logging", None) if config is not None else None
    console_level = "DEBUG" if verbose else (
        logging_config.console_level if logging_config is not None else "WARNING"
    )

    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{level: <8}</level> | {message}",
    )

    if logging_config is not None and logging_config.file.enabled:
        file_config = logging_config.file
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the full CLI parser with all subcommands."""
    parser = create_main_parser()
    subparsers = setup_subparsers(parser)
    add_hash_subparser(subparsers)
    add_hashers_subparser(subparsers)
    add_manifest_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the asset-hasher CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    formatter = RichOutputFormatter(verbose=getattr(args, "verbose", False))

    try:
        config = Config.from_sources(config_file=getattr(args, "config", None), args=args)
    except (ConfigurationError, ValidationError, OSError) as e:
        formatter.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(verbose=getattr(args, "verbose", False), config=config)
    logger.debug(f"Running '{args.command}' with {config.hasher!r}")

    if args.command == "hash":
        from .commands.hash import hash_command

        hash_command(args, config)
    elif args.command == "hashers":
        from .commands.hashers import hashers_command

        hashers_command(args, config)
    elif args.command == "manifest":
        from .commands.manifest import manifest_command

        manifest_command(args, config)
    else:
        formatter.error(f"Unknown command: {args.command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
