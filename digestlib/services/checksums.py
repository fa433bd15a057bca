"""
Checksum list formatting and parsing.

Two line layouts are understood, matching the coreutils/BSD tools:

    <hexdigest>  <path>              (untagged; "*" instead of the second
                                      space marks binary mode)
    SHA256 (<path>) = <hexdigest>    (tagged)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_TAGGED = re.compile(r"^(?P<algo>[A-Za-z0-9]+) \((?P<path>.*)\) = (?P<digest>[0-9a-fA-F]+)$")
_UNTAGGED = re.compile(r"^(?P<digest>[0-9a-fA-F]+) [ *](?P<path>.+)$")


@dataclass(frozen=True)
class ChecksumEntry:
    """One parsed line of a checksum list."""

    digest: str
    path: str
    algorithm: str | None = None  # None for untagged lines


def format_line(algorithm: str, path: str, digest: str, tag: bool = False) -> str:
    """Render one checksum line in untagged or tagged layout."""
    if tag:
        return f"{algorithm.upper()} ({path}) = {digest}"
    return f"{digest}  {path}"


def parse_line(line: str) -> ChecksumEntry | None:
    """
    Parse one checksum line.

    Returns:
        ChecksumEntry, or None for blank lines, comments and lines in
        neither layout.
    """
    line = line.rstrip("\r\n")
    if not line.strip() or line.lstrip().startswith("#"):
        return None

    match = _TAGGED.match(line)
    if match:
        return ChecksumEntry(
            digest=match["digest"].lower(),
            path=match["path"],
            algorithm=match["algo"].lower(),
        )

    match = _UNTAGGED.match(line)
    if match and len(match["digest"]) % 2 == 0:
        return ChecksumEntry(digest=match["digest"].lower(), path=match["path"])

    return None
