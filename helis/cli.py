"""CLI entrypoint for helis."""

import logging
import sys
from pathlib import Path

import click

from . import __version__


@click.group()
@click.version_option(__version__, prog_name="helis")
def cli() -> None:
    """helis - git blame on hover.

    Run `helis lsp` from your editor's language server configuration.
    """


@cli.command("lsp")
@click.option(
    "--transport",
    type=click.Choice(["stdio", "tcp"]),
    default="stdio",
    show_default=True,
    help="Transport method (stdio for editors, tcp for debugging)",
)
@click.option("--host", default="localhost", show_default=True, help="Bind address for --transport tcp")
@click.option("--port", type=int, default=2087, show_default=True, help="Bind port for --transport tcp")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Log verbosity (logs go to stderr)",
)
def lsp(transport: str, host: str, port: int, log_level: str) -> None:
    """Start the LSP server.

    Hover on the first column of a line to see its last commit,
    author mail and summary.

    Examples:

        helis lsp

        helis lsp --transport tcp --port 2087
    """
    from .lsp import start_server

    # stdout carries the JSON-RPC stream
    logging.basicConfig(
        level=log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    start_server(transport=transport, host=host, port=port)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=int)
def blame(file: Path, line: int) -> None:
    """Print the hover text for LINE (one-based) of FILE.

    Example:

        helis blame src/main.py 12
    """
    from .commands.blame_cmd import run_blame

    if line < 1:
        raise click.BadParameter("Line numbers start at 1.", param_hint="LINE")

    sys.exit(run_blame(file, line))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
