"""
Click decorators for digestbench CLI commands.

- handle_errors: Turns DigestBenchException into a clean error message
  and the exception's suggested exit code
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import DigestBenchException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator mapping digestbench errors to CLI exits.

    Usage:
        @click.command()
        @click.pass_obj
        @handle_errors
        def copy(ctx: DigestBenchContext, ...):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except DigestBenchException as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]
