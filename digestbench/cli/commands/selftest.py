"""
Native Click implementation of the selftest command.

Usage: digestbench selftest [--json]
"""

from __future__ import annotations

import asyncio

import click

from ...services.selftest import SelfTestRunner
from ..context import DigestBenchContext
from ..decorators import handle_errors


@click.command("selftest")
@click.option("--json", "as_json", is_flag=True, help="Output records as JSON.")
@click.pass_obj
@handle_errors
def selftest(ctx: DigestBenchContext, as_json: bool) -> None:
    """Verify digests against known test vectors.

    Exits with status 1 if any check fails.
    """
    runner = SelfTestRunner(ctx.registry, logger=ctx.logger)
    records = asyncio.run(runner.run_tests())
    ctx.presenter(as_json=as_json).show_test_records(records)

    if not all(r.passed for r in records):
        raise SystemExit(1)
