"""Configuration management commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from uigen.cli.utils import console, print_output
from uigen.kernel.config import load_config
from uigen.kernel.exceptions import ConfigurationError

app = typer.Typer(help="Configuration management commands")


@app.command("show")
def show_config(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a kind: Config YAML or pyproject.toml"),
    ] = None,
    key: Annotated[
        str | None,
        typer.Option("--key", "-k", help="Only show one section (logging, model, agent)"),
    ] = None,
    yaml_out: Annotated[bool, typer.Option("--yaml", help="Print as YAML")] = False,
) -> None:
    """Show the effective configuration after file and environment overrides."""
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    data = config.to_dict()
    if key:
        if key not in data:
            console.print(f"[red]Error: Unknown section '{key}'[/red]")
            raise typer.Exit(1)
        data = {key: data[key]}
    print_output(data, "yaml" if yaml_out else "json")
