"""
Native Click implementation of the algorithms command.

Usage: digestbench algorithms
"""

from __future__ import annotations

import click

from ..context import DigestBenchContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: DigestBenchContext) -> None:
    """List supported algorithms in display order."""
    for spec in ctx.registry:
        click.echo(f"  {spec.name:<10} {spec.engine:<8} {spec.hex_length:>4} hex chars")
