"""Pytest configuration and fixtures."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable

import pytest

SCENARIO_PORCELAIN = (
    b"abcdef1234567890abcdef1234567890abcdef12 1 1 1\n"
    b"author Jane Doe\n"
    b"author-mail <jane@example.com>\n"
    b"author-time 1610000000\n"
    b"author-tz +0000\n"
    b"summary Fix bug in parser\n"
)


class StubSource:
    """Attribution source that records calls and returns canned output."""

    def __init__(self, output: bytes | None = SCENARIO_PORCELAIN):
        self.output = output
        self.calls: list[tuple[Path, int]] = []

    async def blame_line(self, path: Path, line: int) -> bytes | None:
        self.calls.append((path, line))
        return self.output


@pytest.fixture
def porcelain() -> bytes:
    """Porcelain output for a single committed line."""
    return SCENARIO_PORCELAIN


@pytest.fixture
def make_source() -> Callable[[bytes | None], StubSource]:
    """Factory for stub sources with custom output."""
    return StubSource


@pytest.fixture
def stub_source() -> StubSource:
    """Stub source returning a complete record."""
    return StubSource()


@pytest.fixture
def failing_source() -> StubSource:
    """Stub source behaving like git exiting non-zero."""
    return StubSource(output=None)


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        [
            "git",
            "-c", "user.name=Jane Doe",
            "-c", "user.email=jane@example.com",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_executable() -> str:
    """Path to git; skips the test when git is not installed."""
    git = shutil.which("git")
    if git is None:
        pytest.skip("git not installed")
    return git


@pytest.fixture
def git_repo(tmp_path: Path, git_executable: str) -> Path:
    """A repository with one commit adding hello.py (two lines)."""
    repo = tmp_path / "repo"
    (repo / "src").mkdir(parents=True)
    _git(repo, "init", "-q")
    (repo / "src" / "hello.py").write_text("print('hello')\nprint('world')\n", encoding="utf-8")
    _git(repo, "add", "src/hello.py")
    _git(repo, "commit", "-q", "-m", "Add greeting\n\nLonger body text.")
    return repo
