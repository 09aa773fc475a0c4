"""Command-line interface for uigen."""

from uigen.cli.main import app, main

__all__ = ["app", "main"]
