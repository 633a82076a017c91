"""
Command-line interface for page code generation.

Reads an editor content document and a component schema, and prints or
writes the generated component module.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    GenerationResult,
    GeneratorConfig,
    generate_code,
    get_generator,
    get_target_info,
    is_target_supported,
    list_supported_targets,
    load_config,
)
from .codegen.core.config import ConfigError
from .codegen.core.imports import format_import_statements
from .codegen.core.schema import SchemaError
from .logging_config import get_logger, setup_logging
from .utils import ContentLoaderError, load_json, load_schema

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the page-codegen command."""
    parser = argparse.ArgumentParser(
        prog="page-codegen",
        description="Generate React components from page-editor content trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  page-codegen page.json --schema components.json
  page-codegen page.json --schema myapp.editor:schema -o Page.jsx
  page-codegen --stdin --schema components.json --jsx-only < page.json
  page-codegen --list-targets
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Editor data JSON file")
    input_group.add_argument("--url", help="URL to fetch editor data from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read editor data from standard input"
    )

    # Core generation options
    parser.add_argument(
        "--schema",
        "-s",
        metavar="SCHEMA",
        help="Component schema: a JSON file or a 'module:attribute' reference",
    )
    parser.add_argument(
        "--target", "-t", default="react", help="Generation target (default: react)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--component-name", metavar="NAME", help="Name of the generated component"
    )
    gen_group.add_argument(
        "--framework-import",
        action="store_true",
        help="Add the framework default import (import React from \"react\")",
    )
    gen_group.add_argument(
        "--preserve-ids", action="store_true", help="Keep editor ids as props"
    )
    gen_group.add_argument(
        "--no-keys",
        action="store_true",
        help="Don't add key attributes to sibling elements",
    )
    gen_group.add_argument("--indent", type=int, metavar="N", help="Indent size")
    gen_group.add_argument(
        "--export-default",
        action="store_true",
        help="Export the component as the module default",
    )
    gen_group.add_argument(
        "--jsx-only",
        action="store_true",
        help="Print import statements and markup without the component wrapper",
    )

    # Informational and diagnostics
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-targets", action="store_true", help="List supported targets and exit"
    )
    info_group.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the page-codegen command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        if args.list_targets:
            return _list_targets()

        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        if not args.schema:
            console.print("[red]✗[/red] --schema is required for code generation")
            return 1

        if not _validate_target(args.target):
            return 1

        data = _get_input_data(args)
        schema = _get_schema(args.schema)
        config = _build_config(args)

        return _generate_and_output(data, schema, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_targets() -> int:
    """List supported targets with details."""
    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target in list_supported_targets():
        info = get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {target}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] page-codegen [dim]page.json[/dim] --schema "
            "[cyan]SCHEMA[/cyan] --target [cyan]TARGET[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _validate_target(target: str) -> bool:
    """Validate that a target is supported."""
    if is_target_supported(target):
        return True
    console.print(f"[red]✗ Unsupported target '{target}'[/red]")
    console.print(f"[dim]Supported targets: {', '.join(list_supported_targets())}[/dim]")
    return False


def _get_input_data(args: argparse.Namespace) -> Any:
    """Get editor data from the selected input source."""
    try:
        if args.file:
            return load_json(file_path=args.file)[1]
        if args.url:
            return load_json(url=args.url)[1]
        return json.load(sys.stdin)
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON input: {e}") from e
    except ContentLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _get_schema(reference: str) -> Any:
    """Load the component schema."""
    try:
        return load_schema(reference)
    except ContentLoaderError as e:
        raise CLIError(f"Failed to load schema: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.component_name:
        overrides["component_name"] = args.component_name
    if args.framework_import:
        overrides["include_framework_import"] = True
    if args.preserve_ids:
        overrides["preserve_ids"] = True
    if args.no_keys:
        overrides["list_keys"] = False
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.export_default:
        overrides["export_default"] = True

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    data: Any, schema: Any, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    generator = get_generator(args.target, config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"[green]Generating {args.target} code...", total=None)
        if args.jsx_only:
            result = _generate_decomposed(generator, data, schema)
        else:
            result = generate_code(generator, data, schema)
        progress.remove_task(task)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if isinstance(result.exception, SchemaError):
            console.print("[dim]Check the component schema document[/dim]")
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(f"[green]✓[/green] Generated code saved to [cyan]{output_path}[/cyan]")
        logger.info("Wrote %s", output_path)
    else:
        console.print(Syntax(result.code, "jsx", theme="monokai"))

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _generate_decomposed(generator, data: Any, schema: Any):
    """Render imports and markup without the module shell."""
    if not hasattr(generator, "render_tree"):
        return GenerationResult.error(
            f"Target '{generator.language_name}' does not support --jsx-only"
        )

    try:
        warnings = generator.validate_content(data, schema)
        tree = generator.render_tree(data, schema)
    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    statements = format_import_statements(tree.imports)
    code = "\n".join(statements) + "\n\n" + tree.jsx if statements else tree.jsx
    metadata = {
        "language": generator.language_name,
        "import_paths": len(tree.imports),
    }
    return GenerationResult(code, warnings, metadata)


if __name__ == "__main__":
    sys.exit(main())
