"""CLI command modules."""

from uigen.cli.commands import config_cmd, run_cmd

__all__ = ["config_cmd", "run_cmd"]
