"""CLI helper utilities for uigen commands."""

from __future__ import annotations

import json
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.tree import Tree

from uigen.kernel.config import LoggingConfig
from uigen.kernel.domain.vfs import EntryType
from uigen.kernel.logging import configure_logging
from uigen.kernel.ports.vfs import VFS

console = Console()


def print_output(obj: Any, output_format: str = "pretty") -> None:
    """Print *obj* as ``json``, ``yaml`` or pretty rich output."""
    if output_format == "json":
        typer.echo(json.dumps(obj, default=str, indent=2))
    elif output_format == "yaml":
        typer.echo(yaml.safe_dump(obj, sort_keys=False))
    elif isinstance(obj, (str, int, float)):
        typer.echo(str(obj))
    else:
        console.print(obj)


def build_file_tree(vfs: VFS, label: str = "/") -> Tree:
    """Render the workspace as a rich tree, directories first."""
    tree = Tree(f"[bold]{label}[/bold]")

    def add_children(branch: Tree, path: str) -> None:
        for entry in vfs.list_directory(path):
            if entry.entry_type is EntryType.DIRECTORY:
                add_children(branch.add(f"[blue]{entry.name}/[/blue]"), entry.path)
            else:
                size = vfs.stat(entry.path).size
                branch.add(f"{entry.name} [dim]({size} chars)[/dim]")

    add_children(tree, "/")
    return tree


def apply_logging_config(ctx: typer.Context, config: LoggingConfig) -> None:
    """Configure logging from *config* unless ``-q``/``-V`` already did."""
    if ctx.obj and ctx.obj.get("log_override"):
        return
    configure_logging(
        level=config.level,
        format=config.format,
        output_file=config.output_file,
        use_color=config.use_color,
        include_timestamp=config.include_timestamp,
    )
