"""Rich-based output formatting utilities for asset-hasher CLI commands."""

import json
import os
import sys
from typing import Any

import rich.box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from asset_hasher.core.models import AssetRecord


# Constants for fallback message prefixes
class MessagePrefixes:
    """Constants for consistent message prefixes in fallback mode."""

    INFO = "[INFO]"
    SUCCESS = "[SUCCESS]"
    WARN = "[WARN]"
    ERROR = "[ERROR]"
    DEBUG = "[DEBUG]"


class RichOutputFormatter:
    """Terminal output formatter using Rich, with a plain-text fallback."""

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self._terminal_compatible = self._check_terminal_compatibility()
        self.console = Console() if self._terminal_compatible else None

    def _check_terminal_compatibility(self) -> bool:
        """Check if terminal supports Rich formatting."""
        if os.environ.get("ASSET_HASHER_NO_RICH"):
            return False

        try:
            if not sys.stdout.isatty():
                return False
        except (AttributeError, ValueError):
            return False

        term = os.environ.get("TERM", "")
        return term not in ["dumb", "unknown"]

    def _safe_print(self, message: str, fallback_message: str) -> None:
        """Print with Rich or fall back to plain text."""
        if self._terminal_compatible and self.console is not None:
            self.console.print(message)
        else:
            print(fallback_message)

    def info(self, message: str) -> None:
        """Print an info message."""
        self._safe_print(
            f"[blue][INFO][/blue] {escape(message)}", f"{MessagePrefixes.INFO} {message}"
        )

    def success(self, message: str) -> None:
        """Print a success message."""
        self._safe_print(
            f"[green][SUCCESS][/green] {escape(message)}",
            f"{MessagePrefixes.SUCCESS} {message}",
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._safe_print(
            f"[yellow][WARN][/yellow] {escape(message)}",
            f"{MessagePrefixes.WARN} {message}",
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._safe_print(
            f"[red][ERROR][/red] {escape(message)}", f"{MessagePrefixes.ERROR} {message}"
        )

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self._safe_print(
                f"[cyan][DEBUG][/cyan] {escape(message)}",
                f"{MessagePrefixes.DEBUG} {message}",
            )

    def bullet_list(self, items: list[str], indent: int = 2) -> None:
        """Print a clean bullet list."""
        for item in items:
            self._safe_print(f"{' ' * indent}- {escape(item)}", f"{' ' * indent}- {item}")

    def json_output(self, data: Any) -> None:
        """Print data as formatted JSON."""
        json_str = json.dumps(data, indent=2, default=str)
        if self.console is not None:
            from rich.syntax import Syntax

            self.console.print(Syntax(json_str, "json", theme="monokai"))
        else:
            print(json_str)

    def records_table(self, records: list[AssetRecord], title: str | None = None) -> None:
        """Print asset records as a table."""
        if self.console is None:
            if title:
                print(f"\n=== {title} ===\n")
            for record in records:
                status = "hashed" if record.hashed else "skipped"
                print(f"{record.original} -> {record.path} ({status})")
            return

        table = Table(title=title, box=rich.box.ROUNDED)
        table.add_column("Original", style="cyan", no_wrap=True)
        table.add_column("Hashed path", style="white")
        table.add_column("Type", style="magenta")
        table.add_column("Status")

        for record in records:
            status = "[green]hashed[/green]" if record.hashed else "[yellow]skipped[/yellow]"
            table.add_row(
                escape(record.original), escape(record.path), escape(record.type), status
            )

        self.console.print(table)
