"""
LSP server implementation for helis.

Registers a single feature, textDocument/hover. The handshake and
shutdown are answered by pygls. Document sync and workspace folder
support are switched off so initialize advertises hover only.
"""

from __future__ import annotations

import logging

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer
from pygls.protocol import LanguageServerProtocol, lsp_method

from .. import __version__
from ..blame import AttributionSource, GitBlameSource
from .hover import get_blame_hover

logger = logging.getLogger(__name__)

DEFAULT_TCP_HOST = "localhost"
DEFAULT_TCP_PORT = 2087


class HelisLanguageServerProtocol(LanguageServerProtocol):
    """Protocol advertising hover and nothing else.

    pygls counts its builtin didOpen/didClose handlers as features, so the
    computed sync options would still request open/close notifications.
    """

    @lsp_method(lsp.INITIALIZE)
    def lsp_initialize(self, params: lsp.InitializeParams):
        result = yield from super().lsp_initialize(params)
        result.capabilities.text_document_sync = lsp.TextDocumentSyncKind.None_
        result.capabilities.workspace = None
        result.capabilities.execute_command_provider = None
        return result


class HelisLanguageServer(LanguageServer):
    """Language server answering hovers with git blame."""

    def __init__(self, attribution_source: AttributionSource | None = None):
        super().__init__(
            name="helis",
            version=__version__,
            text_document_sync_kind=lsp.TextDocumentSyncKind.None_,
            protocol_cls=HelisLanguageServerProtocol,
        )
        self.attribution_source = attribution_source or GitBlameSource()


def create_server(attribution_source: AttributionSource | None = None) -> HelisLanguageServer:
    """Create and configure the LSP server."""
    server = HelisLanguageServer(attribution_source)

    @server.feature(lsp.TEXT_DOCUMENT_HOVER)
    async def hover(params: lsp.HoverParams) -> lsp.Hover | None:
        """Show commit, author and summary for the hovered line."""
        return await get_blame_hover(
            server.attribution_source,
            params.text_document.uri,
            params.position,
        )

    return server


def start_server(
    transport: str = "stdio",
    host: str = DEFAULT_TCP_HOST,
    port: int = DEFAULT_TCP_PORT,
) -> None:
    """Start the LSP server.

    Args:
        transport: Transport method ("stdio" or "tcp")
        host: Bind address for tcp
        port: Bind port for tcp
    """
    server = create_server()

    if transport == "stdio":
        server.start_io()
    else:
        # TCP transport for debugging
        logger.info(f"Listening on {host}:{port}")
        server.start_tcp(host, port)
