"""Run the agent against a fresh in-memory workspace."""

from __future__ import annotations

import asyncio
import dataclasses
from pathlib import Path
from typing import Annotated

import typer
from rich.text import Text

from uigen.cli.utils import apply_logging_config, build_file_tree, console, print_output
from uigen.drivers.vfs import InMemoryVFS
from uigen.kernel.config import load_config
from uigen.kernel.domain.stream import TextDelta, TextEnd, ToolCallEvent
from uigen.kernel.exceptions import ConfigurationError
from uigen.kernel.orchestration import AgentLoop, AgentRunResult
from uigen.stdlib.adapters import get_language_model
from uigen.stdlib.tools import ToolInvocation, WorkspaceToolRouter, describe_tool_call

_RESULT_PREVIEW = 200


def _print_tool_result(invocation: ToolInvocation) -> None:
    style = "green" if invocation.succeeded else "red"
    output = invocation.output
    if len(output) > _RESULT_PREVIEW:
        output = output[:_RESULT_PREVIEW] + "..."
    console.print(Text(f"  {output}", style=style))


async def _stream_run(loop: AgentLoop, prompt: str, show_stream: bool) -> AgentRunResult:
    async for event in loop.astream(prompt):
        if not show_stream:
            continue
        match event:
            case TextDelta():
                console.print(event.delta, end="", markup=False, highlight=False)
            case TextEnd():
                console.print()
            case ToolCallEvent():
                label = describe_tool_call(event.tool_name, event.input)
                console.print(f"[cyan]→ {label}[/cyan]")
            case _:
                pass
    if loop.last_result is None:
        raise RuntimeError("agent run ended without a result")
    return loop.last_result


def run(
    ctx: typer.Context,
    prompt: Annotated[str, typer.Argument(help="What component to build")],
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a kind: Config YAML or pyproject.toml"),
    ] = None,
    max_steps: Annotated[
        int | None,
        typer.Option("--max-steps", min=1, help="Override the maximum number of model turns"),
    ] = None,
    no_delay: Annotated[
        bool,
        typer.Option("--no-delay", help="Stream without the simulated typing delay"),
    ] = False,
    json_out: Annotated[
        bool,
        typer.Option("--json", help="Print the run result and workspace snapshot as JSON"),
    ] = False,
) -> None:
    """Run the agent on PROMPT and show the files it produced."""
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
    apply_logging_config(ctx, config.logging)

    if no_delay:
        config.model = dataclasses.replace(config.model, delay_scale=0.0)

    vfs = InMemoryVFS()
    router = WorkspaceToolRouter(vfs)
    loop = AgentLoop(
        get_language_model(config),
        router,
        max_steps=max_steps or config.agent.max_steps,
        on_tool_result=None if json_out else _print_tool_result,
    )

    result = asyncio.run(_stream_run(loop, prompt, show_stream=not json_out))

    if json_out:
        print_output(
            {
                "steps": result.steps,
                "finish_reason": result.finish_reason,
                "truncated": result.truncated,
                "files": vfs.serialize(mode="json"),
            },
            "json",
        )
        return

    console.print()
    if result.truncated:
        console.print(f"[yellow]Stopped after {result.steps} steps (max steps reached)[/yellow]")
    else:
        console.print(f"[green]✓ Finished in {result.steps} steps[/green]")
    console.print(build_file_tree(vfs))
