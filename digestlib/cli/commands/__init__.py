"""
Click command implementations for the digestlib CLI.

Each module corresponds to a digestlib command (e.g., sum.py implements
'digestlib sum'). Commands are registered with the main CLI group via the
register_commands() function in digestlib.cli.
"""

from .algorithms import algorithms
from .check import check
from .config import config
from .sum import sum_cmd

COMMANDS = [
    algorithms,
    check,
    config,
    sum_cmd,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "check",
    "config",
    "sum_cmd",
]
