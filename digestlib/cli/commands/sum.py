"""
Native Click implementation of the sum command.

Usage: digestlib sum [-a ALGO ...] [--tag] [--text STRING] [FILE ...]
"""

from __future__ import annotations

import click

from ...core.exceptions import DigestlibException
from ...hashing import default_registry, new
from ...services.checksums import format_line
from ..context import DigestlibContext


@click.command("sum")
@click.option(
    "-a",
    "--algorithm",
    "algorithms",
    multiple=True,
    help="Algorithm to use (repeatable). Defaults to hash.default_algorithm.",
)
@click.option("--tag", is_flag=True, help="Print BSD-style 'ALGO (file) = digest' lines.")
@click.option("--text", "text", default=None, help="Hash this string instead of files.")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, allow_dash=True))
@click.pass_obj
def sum_cmd(
    ctx: DigestlibContext,
    algorithms: tuple[str, ...],
    tag: bool,
    text: str | None,
    files: tuple[str, ...],
) -> None:
    """Print message digests of files, standard input, or a string.

    With no FILE, or when FILE is -, read standard input.

    \b
    Examples:

        digestlib sum data.bin                 # sha256 (default)

        digestlib sum -a md5 -a sha1 data.bin  # several algorithms, one read

        digestlib sum --text "hello" -a sha224
    """
    algos = list(dict.fromkeys(algorithms)) or [ctx.default_algorithm]
    try:
        for algo in algos:
            default_registry.resolve(algo)
    except DigestlibException as e:
        raise click.ClickException(str(e)) from e

    # Several algorithms are only unambiguous in the tagged layout
    tag = tag or len(algos) > 1

    if text is not None:
        if files:
            raise click.UsageError("--text cannot be combined with FILE arguments")
        try:
            encoding = ctx.settings.hash.encoding
            digests = {algo: new(algo, text, encoding=encoding).hexdigest() for algo in algos}
        except DigestlibException as e:
            raise click.ClickException(str(e)) from e
        for algo, digest in digests.items():
            click.echo(format_line(algo, f'"{text}"', digest, tag=tag))
        return

    failed = False
    for path in files or ("-",):
        try:
            if path == "-":
                stream = click.get_binary_stream("stdin")
                hashers = ctx.hashing.hash_stream(stream, algos)
                digests = {algo: h.hexdigest() for algo, h in hashers.items()}
            else:
                digests = ctx.hashing.hash_file(path, algos)
        except OSError as e:
            ctx.logger.error("Failed to read %s: %s", path, e)
            click.echo(f"digestlib: {path}: {e.strerror or e}", err=True)
            failed = True
            continue

        for algo, digest in digests.items():
            click.echo(format_line(algo, path, digest, tag=tag))

    if failed:
        raise SystemExit(1)
