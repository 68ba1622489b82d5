"""CLI entry point for anilibrix.

Thin wrapper that delegates to main.py.
"""

from main import cli as main_cli


def cli() -> None:
    """Entry point for CLI - delegates to main.py."""
    main_cli()


if __name__ == "__main__":
    cli()
