"""
Native Click implementation of the hash command.

Usage: digestbench hash [-a ALGORITHM ...] [--json] TEXT
"""

from __future__ import annotations

import asyncio

import click

from ..context import DigestBenchContext
from ..decorators import handle_errors


@click.command("hash")
@click.argument("text", required=False, default="")
@click.option(
    "--algorithm",
    "-a",
    "algorithms",
    multiple=True,
    help="Only run this algorithm (repeatable). Default: all.",
)
@click.option("--json", "as_json", is_flag=True, help="Output results as JSON.")
@click.pass_obj
@handle_errors
def hash_text(ctx: DigestBenchContext, text: str, algorithms: tuple[str, ...], as_json: bool) -> None:
    """Digest TEXT with every registered algorithm.

    Use '-' as TEXT to read it from stdin. An empty TEXT shows empty
    results rather than the digests of an empty string.

    \b
    Examples:

        digestbench hash abc

        digestbench hash -a sha256 -a sha3-256 abc

        echo -n secret | digestbench hash -
    """
    if text == "-":
        text = click.get_text_stream("stdin").read()

    registry = ctx.registry.subset(list(algorithms)) if algorithms else ctx.registry
    service = ctx.dispatch_service(registry)
    presenter = ctx.presenter(registry, as_json=as_json)

    results = asyncio.run(service.dispatch(text))
    presenter.show_results(results)
