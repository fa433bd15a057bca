"""
Native Click implementation of the config command.

Usage: digestlib config [list|get|set] [key] [value]
"""

import click

from ...config import config_get, config_list, config_set
from ...core.exceptions import DigestlibException


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View or set configuration.

    Config is stored in .digestlib/config.toml

    \b
    Examples:

        digestlib config list                         # List all options

        digestlib config get hash.encoding            # Get a value

        digestlib config set hash.default_algorithm sha512
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    keys = config_list()
    click.echo("Available config options:")
    click.echo("")

    for key, info in keys.items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
def config_get_cmd(key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. hash.encoding)
    """
    try:
        value = config_get(key)
    except DigestlibException as e:
        raise click.ClickException(str(e)) from e
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set_cmd(key: str, value: str) -> None:
    """Set a config value.

    Arguments:

        KEY    The config key to set

        VALUE  The value to set
    """
    try:
        config_path, typed_value = config_set(key, value)
    except DigestlibException as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Set {key} = {typed_value}")
    click.echo(f"Saved to {config_path}")
