"""
AIWF Client - Server CLI Commands

Commands for checking the AIWF server and the client settings.
"""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.panel import Panel

from aiwf_client.cli.context import (
    client_errors,
    console,
    create_client,
    get_settings,
)

server_app = typer.Typer(no_args_is_help=True)


@server_app.command("health")
def health_check(ctx: typer.Context):
    """Check if the AIWF server is healthy."""
    settings = get_settings(ctx)

    with client_errors():
        with create_client(settings) as client:
            status = client.health()

    if status.is_ok:
        console.print("[green]Server is healthy![/green]")
        console.print(f"  URL: {settings.base_url}")
        console.print(f"  Status: {escape(status.status)}")
    else:
        console.print(f"[red]Server reported status {escape(status.status)}[/red]")
        raise typer.Exit(1)


@server_app.command("config")
def show_config(ctx: typer.Context):
    """Show client configuration."""
    settings = get_settings(ctx)

    console.print(Panel(
        "[bold]Effective Configuration[/bold]\n\n"
        f"Base URL: {settings.base_url}\n"
        f"API Key: {settings.masked_api_key}\n"
        f"Timeout: {settings.timeout:g}s\n\n"
        "[dim]Environment Variables:[/dim]\n"
        "  AIWF_BASE_URL - Server URL\n"
        "  AIWF_API_KEY - API key sent as X-API-Key\n"
        "  AIWF_TIMEOUT - Request timeout in seconds",
        title="Client Configuration",
        expand=False,
    ))
