"""Document URI helpers."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote, urlparse


def uri_to_path(uri: str) -> Path | None:
    """Convert a ``file:`` URI to a Path; other schemes have no path."""
    parsed = urlparse(uri)
    if parsed.scheme != "file":
        return None
    path = unquote(parsed.path)
    if "\x00" in path:
        return None
    if path.startswith("/") and len(path) > 2 and path[2] == ":":
        path = path[1:]  # Remove leading slash for Windows paths
    return Path(path)
