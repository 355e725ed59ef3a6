"""CLI for converting a Prisma schema into a Xata schema document.

Usage:
    prisma-to-xata
    prisma-to-xata ./prisma/schema.prisma ./xataSchema.json
    prisma-to-xata --config prisma-to-xata.toml --verbose
    xata schema upload xataSchema.json

Arguments:
    schema_path  - Prisma schema (.prisma) or DMMF dump (.json)
    output_path  - Where to write the Xata schema JSON

Paths given on the command line win over ``prisma-to-xata.toml``, which
wins over the defaults (``./prisma/schema.prisma``, ``./xataSchema.json``).
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prisma_to_xata.config.loader import load_converter_config
from prisma_to_xata.schema.converter import convert_prisma_to_xata
from prisma_to_xata.schema.introspector import SchemaParseError
from prisma_to_xata.schema.models import ConversionWarning
from prisma_to_xata.schema.writer import save_xata_schema_to_file

console = Console()


def _print_warnings(warnings: list[ConversionWarning]) -> None:
    """Show lossy mappings as a table."""
    table = Table(
        title="Lossy Conversions", show_header=True, header_style="bold"
    )
    table.add_column("Table", style="dim")
    table.add_column("Column")
    table.add_column("Issue", style="yellow", no_wrap=True)
    table.add_column("Detail", overflow="fold")

    for warning in warnings:
        table.add_row(
            escape(warning.table),
            escape(warning.column),
            warning.code,
            escape(warning.message),
        )

    console.print(table)


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert the Prisma schema and write the Xata schema file.

    Args:
        args: Parsed arguments with schema_path, output_path and config.

    Returns:
        0 on success, 1 on failure.
    """
    config_path = Path(args.config) if args.config else None

    try:
        config = load_converter_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    schema_path = args.schema_path or config.schema_path
    output_path = args.output_path or config.output_path

    console.print(f"Converting {escape(schema_path)}...", style="dim")

    try:
        result = convert_prisma_to_xata(schema_path)
    except SchemaParseError as e:
        console.print(
            f"[bold red]x[/bold red] Error parsing Prisma schema: {escape(str(e))}"
        )
        return 1
    except OSError as e:
        console.print(
            f"[bold red]x[/bold red] Error reading Prisma schema: {escape(str(e))}"
        )
        return 1

    if result.has_warnings:
        console.print()
        _print_warnings(result.warnings)

    try:
        save_xata_schema_to_file(result.schema, output_path)
    except OSError as e:
        console.print(
            f"[bold red]x[/bold red] Error writing Xata schema: {escape(str(e))}"
        )
        return 1

    console.print()
    console.print(
        f"[bold green]v[/bold green] Wrote {len(result.schema.tables)} tables "
        f"({result.column_count} columns) to "
        f"[bold cyan]{escape(output_path)}[/bold cyan]"
    )
    console.print(
        f"[dim]Upload with[/dim] [cyan]xata schema upload {escape(output_path)}[/cyan]"
    )
    return 0


# ============================================================================
# Main entry point
# ============================================================================


def main() -> int:
    """Main CLI entry point.

    Parses command line arguments and runs the conversion.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = argparse.ArgumentParser(
        prog="prisma-to-xata",
        description="Port your Prisma schema to a Xata schema document",
    )
    parser.add_argument(
        "schema_path",
        nargs="?",
        default=None,
        help="Prisma schema file or DMMF JSON (default: ./prisma/schema.prisma)",
    )
    parser.add_argument(
        "output_path",
        nargs="?",
        default=None,
        help="Output file for the Xata schema (default: ./xataSchema.json)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to prisma-to-xata.toml (default: ./prisma-to-xata.toml if present)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    return cmd_convert(args)


if __name__ == "__main__":
    sys.exit(main())
