"""
Click-based CLI for digestlib.

This module provides the main Click command group and serves as the
entry point for the digestlib CLI.

Usage:
    from digestlib.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import DigestlibException
from .context import DigestlibContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("digestlib")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestlib")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """digestlib - MD5, SHA-1 and SHA-2 digests from the command line.

    \b
    Hashing:
        digestlib sum FILE...          Print digests (sha256 by default)
        digestlib sum -a md5 -         Hash standard input
        digestlib check SUMS           Verify files against a checksum list

    \b
    Information:
        digestlib algorithms           List supported algorithms

    \b
    Configuration:
        digestlib config               View or set configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None and ctx.invoked_subcommand != "config":
        # config must stay usable when the current config is invalid
        try:
            ctx.obj = DigestlibContext.create()
        except DigestlibException as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestlibContext",
    "__version__",
    "cli",
    "register_commands",
]
