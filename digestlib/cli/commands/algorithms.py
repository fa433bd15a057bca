"""
Native Click implementation of the algorithms command.

Usage: digestlib algorithms [--names]
"""

import click

from ...hashing import default_registry


@click.command("algorithms")
@click.option("--names", "names_only", is_flag=True, help="Print only the algorithm names.")
def algorithms(names_only: bool) -> None:
    """List supported hash algorithms with digest and block sizes."""
    if names_only:
        for strategy in default_registry:
            click.echo(strategy.algorithm_name)
        return

    click.echo(f"{'NAME':<8} {'DIGEST':>6} {'BLOCK':>5} {'HEX':>4}")
    for strategy in default_registry:
        click.echo(
            f"{strategy.algorithm_name:<8} {strategy.digest_size:>6} "
            f"{strategy.block_size:>5} {strategy.digest_size * 2:>4}"
        )
