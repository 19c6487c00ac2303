"""
Native Click implementation of the watch command.

Usage: digestbench watch [--debounce-ms N]

Each line read from stdin is an input-change event. Bursts of lines
arriving within the debounce window collapse into the last one.
"""

from __future__ import annotations

import asyncio
from typing import TextIO

import click

from ...services.session import DigestSession
from ..context import DigestBenchContext
from ..decorators import handle_errors


async def _pump(stream: TextIO, session: DigestSession) -> None:
    while True:
        line = await asyncio.to_thread(stream.readline)
        if line == "":
            break
        session.on_input(line.rstrip("\r\n"))
    await session.drain()


@click.command("watch")
@click.option(
    "--debounce-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Quiet window in milliseconds (default: dispatch.debounce_ms).",
)
@click.pass_obj
@handle_errors
def watch(ctx: DigestBenchContext, debounce_ms: int | None) -> None:
    """Digest each line typed on stdin, debounced.

    An empty line clears the results. End input with Ctrl-D.
    """
    if debounce_ms is None:
        debounce_ms = ctx.config.dispatch.debounce_ms

    session = DigestSession(
        ctx.dispatch_service(),
        ctx.presenter(),
        debounce_ms=debounce_ms,
        logger=ctx.logger,
    )
    asyncio.run(_pump(click.get_text_stream("stdin"), session))
