"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from plantilla.adapters.http_client import build_async_client
from plantilla.core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics against the configured gateway."""

    settings = AppSettings()

    table = Table(title="MS Plantilla Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API gateway", "OK", settings.api_gateway)
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Log level", "OK", settings.log_level)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.api_gateway + "/plantilla/", settings))
    table.add_row("Gateway /plantilla/", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Use `plantilla doctor set-gateway URL` or PLANTILLA_API_GATEWAY "
            "to point the client at a running gateway."
        )


@app.command(name="set-gateway")
def set_gateway(url: str = typer.Argument(..., help="Base URL, e.g. http://localhost:8001")) -> None:
    """Store the gateway base URL in the user config .env."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("url must start with http:// or https://")

    env_path = write_user_env_vars({"PLANTILLA_API_GATEWAY": url})
    _console.print(f"[green]Saved gateway config to:[/green] {env_path}")
