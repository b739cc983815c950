"""
AIWF Client - CLI Shared Helpers

Settings resolution, client construction and error reporting shared by
all CLI commands.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from aiwf_client.client import AIWFClient
from aiwf_client.config import ClientSettings
from aiwf_client.demo import SERVE_COMMAND
from aiwf_client.errors import AIWFClientError, AIWFConnectionError

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route client logs through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def get_settings(ctx: typer.Context) -> ClientSettings:
    """Settings stored by the root callback, or the environment defaults."""
    settings: Optional[ClientSettings] = ctx.obj if isinstance(ctx.obj, ClientSettings) else None
    return settings or ClientSettings.from_env()


def create_client(settings: ClientSettings) -> AIWFClient:
    """Build the client used by commands."""
    return AIWFClient.from_settings(settings)


@contextmanager
def client_errors() -> Iterator[None]:
    """Report client errors and exit with status 1."""
    try:
        yield
    except AIWFConnectionError as e:
        err_console.print(f"[red]{escape(e.message)}[/red]")
        err_console.print(f"Is the server running? Start it with: {escape(SERVE_COMMAND)}")
        raise typer.Exit(1)
    except AIWFClientError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        err_console.print(f"[red]Invalid input: {escape(str(e))}[/red]")
        raise typer.Exit(1)
