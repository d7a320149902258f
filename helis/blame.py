"""
Line attribution from ``git blame --porcelain``.

Runs a single-line blame query for one file and parses the porcelain
output into an :class:`AttributionRecord`. Every failure (file outside a
repository, uncommitted file, missing binary, truncated output) is reported
as ``None`` rather than raised.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


# Porcelain field layout (single-line range):
#
#   <40-hex sha> <orig-line> <final-line> [<count>]
#   author <name>
#   author-mail <<email>>
#   ...
#   summary <first line of message>
#
COMMIT_ID_LENGTH = 7
AUTHOR_MAIL_PREFIX = b"author-mail "
SUMMARY_PREFIX = b"summary "


@dataclass(frozen=True)
class AttributionRecord:
    """Who last touched a line, and in which commit."""

    commit_id: str
    author_identifier: str
    summary: str


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def parse_porcelain(raw: bytes) -> AttributionRecord | None:
    """
    Parse ``git blame -p`` output for a single line.

    The commit id is the first ``COMMIT_ID_LENGTH`` characters of the header
    line. ``author-mail`` and ``summary`` values are taken verbatim after
    their labels; the first occurrence of each wins.

    Returns:
        The record, or None if any of the three fields is missing.
    """
    lines = raw.split(b"\n")

    header = lines[0]
    commit_id = _decode(header[:COMMIT_ID_LENGTH]) if len(header) >= COMMIT_ID_LENGTH else None
    author: str | None = None
    summary: str | None = None

    for line in lines[1:]:
        if author is None and line.startswith(AUTHOR_MAIL_PREFIX):
            author = _decode(line[len(AUTHOR_MAIL_PREFIX):])
        elif summary is None and line.startswith(SUMMARY_PREFIX):
            summary = _decode(line[len(SUMMARY_PREFIX):])

    if commit_id is None or author is None or summary is None:
        return None
    return AttributionRecord(commit_id=commit_id, author_identifier=author, summary=summary)


class AttributionSource(Protocol):
    """Anything that can produce raw porcelain blame output for one line."""

    async def blame_line(self, path: Path, line: int) -> bytes | None:
        ...


class GitBlameSource:
    """Runs ``git blame -p -L n,n`` in the file's own directory."""

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def build_command(self, file_name: str, line: int) -> list[str]:
        """Argument vector for a blame of exactly one line."""
        if line < 1:
            raise ValueError(f"line numbers are one-based, got {line}")
        return [self.executable, "blame", "-p", "-L", f"{line},{line}", file_name]

    async def blame_line(self, path: Path, line: int) -> bytes | None:
        """
        Blame one line of ``path``.

        Args:
            path: Absolute path to the file
            line: One-based line number

        Returns:
            Raw stdout bytes, or None if git could not be run or failed.
        """
        if not path.name:
            logger.debug(f"No file name in {path}")
            return None
        args = self.build_command(path.name, line)

        # git resolves the bare name against the repository found from cwd
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                cwd=str(path.parent),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Could not run {self.executable}: {e}")
            return None

        stdout, _ = await proc.communicate()
        if proc.returncode != 0:
            logger.debug(f"git blame exited {proc.returncode} for {path}:{line}")
            return None
        return stdout


async def lookup_attribution(
    source: AttributionSource, path: Path, line: int
) -> AttributionRecord | None:
    """Blame one line through ``source`` and parse the result."""
    raw = await source.blame_line(path, line)
    if raw is None:
        return None
    record = parse_porcelain(raw)
    if record is None:
        logger.debug(f"Incomplete porcelain output for {path}:{line}")
    return record
