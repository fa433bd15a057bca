"""
Native Click implementation of the check command.

Usage: digestlib check [-a ALGO] CHECKFILE
"""

from __future__ import annotations

import click

from ...core.exceptions import DigestlibException
from ...hashing import default_registry
from ...services.checksums import ChecksumEntry, parse_line
from ..context import DigestlibContext


def _entry_algorithm(entry: ChecksumEntry, forced: str | None) -> str | None:
    """Pick the algorithm for a line: tag, then -a, then digest length."""
    if entry.algorithm is not None:
        return entry.algorithm
    if forced is not None:
        return forced
    return default_registry.algorithm_for_digest_size(len(entry.digest) // 2)


@click.command("check")
@click.option(
    "-a",
    "--algorithm",
    default=None,
    help="Algorithm for untagged lines (default: inferred from digest length).",
)
@click.option("--quiet", is_flag=True, help="Don't print OK for each verified file.")
@click.argument("checkfile", type=click.File("r"))
@click.pass_obj
def check(ctx: DigestlibContext, algorithm: str | None, quiet: bool, checkfile) -> None:
    """Verify files against a checksum list.

    CHECKFILE holds lines produced by `digestlib sum` (either layout).
    Use - to read the list from standard input.
    """
    if algorithm is not None:
        try:
            default_registry.resolve(algorithm)
        except DigestlibException as e:
            raise click.ClickException(str(e)) from e

    mismatched = 0
    unreadable = 0
    malformed = 0
    checked = 0

    for line in checkfile:
        entry = parse_line(line)
        if entry is None:
            if line.strip() and not line.lstrip().startswith("#"):
                malformed += 1
            continue

        algo = _entry_algorithm(entry, algorithm)
        if algo is None or algo not in default_registry:
            ctx.logger.debug("Skipping line for %s: no supported algorithm", entry.path)
            malformed += 1
            continue

        try:
            actual = ctx.hashing.compute_file_hash(entry.path, algo)
        except OSError as e:
            ctx.logger.error("Failed to read %s: %s", entry.path, e)
            click.echo(f"digestlib: {entry.path}: {e.strerror or e}", err=True)
            click.echo(f"{entry.path}: FAILED open or read")
            unreadable += 1
            continue

        checked += 1
        if actual == entry.digest:
            if not quiet:
                click.echo(f"{entry.path}: OK")
        else:
            click.echo(f"{entry.path}: FAILED")
            mismatched += 1

    if malformed:
        noun = "line is" if malformed == 1 else "lines are"
        click.echo(f"digestlib: WARNING: {malformed} {noun} improperly formatted", err=True)
    if unreadable:
        noun = "file" if unreadable == 1 else "files"
        click.echo(f"digestlib: WARNING: {unreadable} listed {noun} could not be read", err=True)
    if mismatched:
        noun = "checksum" if mismatched == 1 else "checksums"
        click.echo(f"digestlib: WARNING: {mismatched} computed {noun} did NOT match", err=True)

    if checked == 0 and not (mismatched or unreadable):
        click.echo("digestlib: no properly formatted checksum lines found", err=True)
        raise SystemExit(1)
    if mismatched or unreadable:
        raise SystemExit(1)
