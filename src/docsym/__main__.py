"""CLI entry point for docsym.

Provides commands for printing document outlines and for
starting the MCP server.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import click
from loguru import logger

from docsym import __version__
from docsym.models.responses import DocumentSymbolItem

if TYPE_CHECKING:
    from docsym.config.models import Config


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Document symbols for Ruby and Rails.

    Builds editor outlines of Ruby files: classes, modules and methods,
    plus Minitest test declarations and Rails lifecycle callbacks.
    """
    pass


def _load_config(path: Path | None) -> "Config":
    from docsym.config.loader import load_config
    from docsym.errors import ConfigurationError

    try:
        return load_config(path)
    except (ConfigurationError, ValueError) as e:
        raise click.ClickException(str(e)) from e


_KIND_LABELS = {code: kind.value for kind, code in DocumentSymbolItem.LSP_KIND_CODES.items()}


def _print_tree(items: list[DocumentSymbolItem], depth: int = 0) -> None:
    for item in items:
        click.echo(f"{'  ' * depth}{item.name} [{_KIND_LABELS.get(item.kind, item.kind)}]")
        _print_tree(item.children, depth + 1)


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "json"]),
    default="tree",
    help="Output format",
)
def outline(files: tuple[Path, ...], config: Path | None, output_format: str) -> None:
    """Print the outline of one or more Ruby files.

    The json format prints LSP DocumentSymbol objects, one
    document per file, keyed by file URI.
    """
    from docsym.errors import DocsymError
    from docsym.handlers.document_symbol import DocumentSymbolHandler
    from docsym.parsing.ruby import RubySyntaxTreeProvider
    from docsym.store import DocumentStore
    from docsym.utils.logging import configure_logging

    cfg = _load_config(config)
    configure_logging(cfg.logging)

    store = DocumentStore()
    handler = DocumentSymbolHandler(
        store,
        RubySyntaxTreeProvider(cfg.parser.position_encoding),
        cfg.dsl.to_table(),
    )

    results: dict[str, list[dict]] = {}
    failed = False
    for path in files:
        try:
            document = store.load_file(path, cfg.parser.max_file_size_kb)
            response = handler.handle(document.uri)
        except (DocsymError, OSError, ValueError) as e:
            logger.error("Failed to outline {}: {}", path, e)
            failed = True
            continue

        for error in response.parse_errors:
            logger.warning(error)

        if output_format == "json":
            results[response.uri] = response.to_lsp()
        else:
            click.echo(f"{path}:")
            _print_tree(response.symbols, depth=1)

    if output_format == "json":
        click.echo(json.dumps(results, indent=2))

    if failed:
        sys.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse"]),
    default=None,
    help="MCP transport type (defaults to server.transport from config)",
)
def serve(config: Path | None, transport: Literal["stdio", "sse"] | None = None) -> None:
    """Start the MCP server.

    Exposes document outlines as MCP tools over the chosen transport.
    """
    from docsym.server import create_server
    from docsym.utils.logging import configure_logging

    cfg = _load_config(config)

    # Configure logging early; stderr only, so stdout stays free for
    # the stdio transport.
    configure_logging(cfg.logging)

    mcp = create_server(cfg)
    selected = transport or cfg.server.transport

    async def main() -> None:
        if selected == "sse":
            await mcp.run_sse_async()
        else:
            await mcp.run_stdio_async()

    asyncio.run(main())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
