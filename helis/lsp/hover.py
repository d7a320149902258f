"""
Hover provider: git attribution for the line under the cursor.

Editors have no gutter-hover event, so a hover at character 0 stands in
for "the user is pointing at this line". Any other column yields nothing.
"""

from __future__ import annotations

import logging

from lsprotocol import types as lsp

from ..blame import AttributionRecord, AttributionSource, lookup_attribution
from .uris import uri_to_path

logger = logging.getLogger(__name__)

TRIGGER_CHARACTER = 0


def format_attribution(record: AttributionRecord) -> str:
    """Render a record as ``<commit> <author-mail> <summary>``."""
    return f"{record.commit_id} {record.author_identifier} {record.summary}"


async def get_blame_hover(
    source: AttributionSource,
    uri: str,
    position: lsp.Position,
) -> lsp.Hover | None:
    """
    Build the blame hover for a document position.

    Args:
        source: Where raw blame output comes from
        uri: Document URI
        position: Zero-based cursor position

    Returns:
        A hover with a single plain-string content, or None
    """
    if position.character != TRIGGER_CHARACTER:
        return None

    path = uri_to_path(uri)
    if path is None:
        logger.debug(f"Not a file-backed document: {uri}")
        return None

    record = await lookup_attribution(source, path, position.line + 1)
    if record is None:
        return None

    # A scalar string, not a list: several clients only render the last
    # element of a multi-part hover.
    return lsp.Hover(contents=format_attribution(record))
