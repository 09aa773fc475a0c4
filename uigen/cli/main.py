"""uigen CLI - Main entrypoint."""

import typer

from uigen import __version__
from uigen.cli.commands import config_cmd, run_cmd
from uigen.cli.utils import console
from uigen.kernel.logging import configure_logging

# Create the main Typer app
app = typer.Typer(
    name="uigen",
    help="uigen - Generate React components into an in-memory workspace.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)

# Add subcommands
app.command("run")(run_cmd.run)
app.add_typer(config_cmd.app, name="config", help="Configuration management")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold blue]uigen[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only log errors"),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """uigen CLI - scripted component generation against a virtual filesystem."""
    ctx.obj = {"log_override": quiet or verbose}
    if quiet:
        configure_logging(level="ERROR", format="console")
    elif verbose:
        configure_logging(level="DEBUG", format="rich")


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
