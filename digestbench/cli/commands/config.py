"""
Native Click implementation of the config command.

Usage: digestbench config [list|get] [key]
"""

import click

from ...config import CONFIGURABLE_KEYS, config_get
from ..context import DigestBenchContext
from ..decorators import handle_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .digestbench/config.toml, [tool.digestbench] in
    pyproject.toml, and DIGESTBENCH_<SECTION>__<KEY> environment variables.

    \b
    Examples:

        digestbench config list                 # List all options

        digestbench config get dispatch.debounce_ms
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
@click.pass_obj
def config_list_cmd(ctx: DigestBenchContext) -> None:
    """List all config options with their effective values."""
    if ctx.config_file:
        click.echo(f"Config file: {ctx.config_file}")
    click.echo("Available config options:")
    click.echo("")

    for key, info in CONFIGURABLE_KEYS.items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo(f"    Current: {ctx.config.get(key)}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
@handle_errors
def config_get_cmd(ctx: DigestBenchContext, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. dispatch.debounce_ms)
    """
    value = config_get(key, start_dir=str(ctx.cwd))
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
