"""Entry point for running uigen as a module."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from uigen.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
