"""
LSP server exposing git blame as hover.

Hovering the first column of a line shows the abbreviated commit id,
author mail and commit summary for that line.
"""

from .server import create_server, start_server

__all__ = ["create_server", "start_server"]
