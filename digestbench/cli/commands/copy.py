"""
Native Click implementation of the copy command.

Usage: digestbench copy ALGORITHM TEXT
"""

from __future__ import annotations

import asyncio

import click

from ...utils.clipboard import copy_to_clipboard
from ..context import DigestBenchContext
from ..decorators import handle_errors


@click.command("copy")
@click.argument("algorithm")
@click.argument("text", required=False, default="")
@click.pass_obj
@handle_errors
def copy(ctx: DigestBenchContext, algorithm: str, text: str) -> None:
    """Copy the ALGORITHM digest of TEXT to the clipboard.

    \b
    Examples:

        digestbench copy sha256 abc
    """
    registry = ctx.registry.subset([algorithm])
    results = asyncio.run(ctx.dispatch_service(registry).dispatch(text))
    result = results[0]

    if result.error:
        click.echo(f"Error: {result.algorithm_name}: {result.error}", err=True)
        raise SystemExit(1)
    if not result.enabled:
        click.echo("Nothing to copy.")
        return

    copy_to_clipboard(result.hex_digest)
    click.echo(f"{result.algorithm_name}: {result.hex_digest}")
    click.echo("Copied!")
