"""MCP server entry point.

Creates the FastMCP server exposing document outlines as tools.
Extraction runs in worker threads; every thread gets its own
tree-sitter parser.
"""

import asyncio
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from docsym.config.models import Config
from docsym.errors import DocsymError, DocumentSupersededError
from docsym.extractors.dsl_table import DslTable
from docsym.handlers.document_symbol import DocumentSymbolHandler
from docsym.models.responses import DocumentSymbolResponse
from docsym.parsing.ruby import RubySyntaxTreeProvider
from docsym.store import DocumentStore


@dataclass
class ServerContext:
    """Server runtime context shared by all tool calls."""

    config: Config
    store: DocumentStore = field(default_factory=DocumentStore)
    table: DslTable = field(init=False)
    _local: threading.local = field(default_factory=threading.local, repr=False)

    def __post_init__(self) -> None:
        self.table = self.config.dsl.to_table()

    def handler(self) -> DocumentSymbolHandler:
        """Return a handler bound to this thread's parser."""
        provider = getattr(self._local, "provider", None)
        if provider is None:
            provider = RubySyntaxTreeProvider(self.config.parser.position_encoding)
            self._local.provider = provider
        return DocumentSymbolHandler(self.store, provider, self.table)

    def outline_file(self, path: Path) -> DocumentSymbolResponse:
        """Load a file into the store and outline it."""
        document = self.store.load_file(path, self.config.parser.max_file_size_kb)
        return self.handler().handle(document.uri)

    def outline_source(self, source: str, uri: str, version: int) -> DocumentSymbolResponse:
        """Store inline source and outline it."""
        self.store.set(uri, source, version)
        return self.handler().handle(uri)


async def _run_outline(
    uri: str,
    version: int,
    call: Callable[..., DocumentSymbolResponse],
    *args: Any,
) -> DocumentSymbolResponse:
    """Run an outline call off the event loop and map failures to responses."""
    try:
        return await asyncio.to_thread(call, *args)
    except DocumentSupersededError as e:
        return DocumentSymbolResponse(
            uri=uri,
            version=e.expected_version,
            status="superseded",
            message=str(e),
        )
    except (DocsymError, OSError, ValueError) as e:
        logger.error("Outline failed for {}: {}", uri, e)
        return DocumentSymbolResponse(uri=uri, version=version, status="error", message=str(e))


def create_server(
    config: Config,
    host: str | None = None,
    port: int | None = None,
) -> FastMCP:
    """
    Create the MCP server.

    Args:
        config: Loaded configuration.
        host: Host to bind to for SSE transport (defaults to config).
        port: Port to bind to for SSE transport (defaults to config).

    Returns:
        Configured FastMCP server instance.
    """
    context = ServerContext(config=config)

    mcp = FastMCP(
        "Document Symbols",
        host=host or config.server.host,
        port=port or config.server.port,
    )

    @mcp.tool()
    async def docsym_document_symbols(
        path: Annotated[
            str,
            Field(description="Path to a Ruby source file, absolute or relative to the server"),
        ],
    ) -> DocumentSymbolResponse:
        """Outline a Ruby file.

        Returns the class/module hierarchy with methods, Minitest test
        declarations and Rails lifecycle callbacks, in source order.
        """
        file_path = Path(path)
        return await _run_outline(path, 0, context.outline_file, file_path)

    @mcp.tool()
    async def docsym_outline_source(
        source: Annotated[str, Field(description="Ruby source text to outline")],
        uri: Annotated[
            str,
            Field(description="Identifier for the document, e.g. 'untitled:scratch.rb'"),
        ] = "untitled:source.rb",
        version: Annotated[
            int, Field(description="Document version; newer versions supersede older ones")
        ] = 1,
    ) -> DocumentSymbolResponse:
        """Outline Ruby source passed inline.

        Same output as docsym_document_symbols, for text that is not
        (or not yet) saved to disk.
        """
        return await _run_outline(uri, version, context.outline_source, source, uri, version)

    logger.info("Document symbol server created ({} callbacks)", len(context.table.callbacks))
    return mcp
