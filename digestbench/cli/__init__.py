"""
Click-based CLI for digestbench.

This module provides the main Click command group and serves as the
entry point for the digestbench CLI.

Usage:
    from digestbench.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from ..core.exceptions import DigestBenchException
from .context import DigestBenchContext

# Version is loaded from package metadata
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("digestbench")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestbench")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """digestbench - multi-algorithm text digests

    Computes MD5, SHA-1, SHA-2 and SHA-3 digests of a text string side by
    side, with per-algorithm timing.

    \b
    Digests:
        digestbench hash <text>        Digest text with every algorithm
        digestbench watch              Digest each line typed on stdin
        digestbench copy <alg> <text>  Copy one digest to the clipboard

    \b
    Checks:
        digestbench selftest           Verify known test vectors
        digestbench algorithms         List supported algorithms

    \b
    Configuration:
        digestbench config list        Show configuration options
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        try:
            ctx.obj = DigestBenchContext.create()
        except DigestBenchException as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(e.exit_code)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestBenchContext",
    "__version__",
    "cli",
    "register_commands",
]
