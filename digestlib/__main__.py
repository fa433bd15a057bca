"""
Entry point for the `digestlib` command-line interface.

Usage: python -m digestlib sum -a sha256 FILE ...

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the digestlib CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
