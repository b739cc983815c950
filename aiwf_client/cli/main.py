"""
AIWF Client - Main CLI Application

This module defines the main Typer application and registers subcommands.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.json import JSON
from rich.markup import escape
from rich.panel import Panel

from aiwf_client.cli.context import (
    client_errors,
    configure_logging,
    console,
    create_client,
    get_settings,
)
from aiwf_client.config import ClientSettings
from aiwf_client.types import TranslateRequest

# Create main app
app = typer.Typer(
    name="aiwf-client",
    help="AIWF Client - call AI agents served by AIWF",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Import and register subcommands
from aiwf_client.cli.agents import agents_app
from aiwf_client.cli.server import server_app

app.add_typer(agents_app, name="agents", help="List and call agents")
app.add_typer(server_app, name="server", help="Server status and settings")


@app.callback()
def callback(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="Server URL [env: AIWF_BASE_URL]"),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-k", help="API key [env: AIWF_API_KEY]"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="Request timeout in seconds [env: AIWF_TIMEOUT]"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    AIWF Client

    Call agents exposed by an AIWF server over HTTP.
    """
    configure_logging(verbose)

    try:
        env = ClientSettings.from_env()
        ctx.obj = ClientSettings(
            base_url=base_url or env.base_url,
            api_key=api_key or env.api_key,
            timeout=timeout if timeout is not None else env.timeout,
        )
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show client version."""
    from aiwf_client import __version__
    console.print(f"[bold cyan]AIWF Client[/bold cyan] v{__version__}")


@app.command()
def translate(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to translate"),
    target_lang: str = typer.Option("en", "--to", "-l", help="Target language code"),
    output: str = typer.Option("panel", "--output", "-o", help="Output format: panel, json"),
):
    """Translate text with the translator agent."""
    settings = get_settings(ctx)

    with client_errors():
        request = TranslateRequest(target_lang=target_lang, text=text)
        with create_client(settings) as client:
            response = client.translator(request)

    if output == "json":
        console.print(JSON(response.model_dump_json()))
        return

    info = (
        f"[bold]Original:[/bold] {escape(request.text)}\n"
        f"[bold]Translated:[/bold] {escape(response.translated)}\n"
        f"[bold]Source Language:[/bold] {escape(response.source_lang)}\n"
        f"[bold]Confidence:[/bold] {response.confidence_percent:.14g}%"
    )
    console.print(Panel(info, title=f"Translation -> {escape(target_lang)}", expand=False))


@app.command()
def demo():
    """Run the translator usage example against the local server."""
    from aiwf_client.demo import run
    raise typer.Exit(run())


if __name__ == "__main__":
    app()
