"""
AIWF Client - Agent CLI Commands

Commands for listing and calling agents on an AIWF server.
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

from aiwf_client.cli.context import (
    client_errors,
    console,
    create_client,
    get_settings,
)

agents_app = typer.Typer(no_args_is_help=True)


@agents_app.command("list")
def list_agents(
    ctx: typer.Context,
    output: str = typer.Option("table", "--output", "-o", help="Output format: table, json"),
):
    """List agents exposed by the server."""
    settings = get_settings(ctx)

    with client_errors():
        with create_client(settings) as client:
            agents = client.list_agents()

    if output == "json":
        data = [a.model_dump(exclude_none=True) for a in agents]
        console.print(JSON(json.dumps(data, indent=2, ensure_ascii=False)))
        return

    if not agents:
        console.print("[yellow]No agents found.[/yellow]")
        return

    table = Table(title=f"Agents at {settings.base_url}")
    table.add_column("Name", style="cyan")
    table.add_column("Input")
    table.add_column("Output")
    table.add_column("Description")

    for agent in agents:
        table.add_row(
            agent.name,
            agent.input_type or "-",
            agent.output_type or "-",
            escape(agent.description or ""),
        )

    console.print(table)


@agents_app.command("call")
def call_agent(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Agent name"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="Agent input as a JSON object"),
    text: Optional[str] = typer.Option(None, "--input", "-i", help="Plain text input for string agents"),
):
    """Call an agent and print its output."""
    if (data is None) == (text is None):
        console.print("[red]Pass exactly one of --data or --input.[/red]")
        raise typer.Exit(1)

    settings = get_settings(ctx)

    if text is not None:
        with client_errors():
            with create_client(settings) as client:
                result = client.call_text_agent(name, text)
        console.print(escape(result))
        return

    try:
        payload = json.loads(data)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON input: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(payload, dict):
        console.print("[red]Agent input must be a JSON object.[/red]")
        raise typer.Exit(1)

    with client_errors():
        with create_client(settings) as client:
            result = client.call_agent(name, payload)

    console.print(JSON(json.dumps(result.data, indent=2, ensure_ascii=False)))

    if result.trace is not None and result.trace.usage is not None:
        usage = result.trace.usage
        console.print(
            f"[dim]Tokens: {usage.total} "
            f"(prompt {usage.prompt}, completion {usage.completion})[/dim]"
        )
