"""CLI principal de MS Plantilla.

Cada comando lanza una operación del servicio y sale con código 1 si el
gateway no devolvió nada (el aviso ya se ha mostrado por stderr).
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console

from plantilla.adapters.html_exporter import HtmlFilePresenter
from plantilla.cli import doctor
from plantilla.cli.ui_components import ConsoleNotifier, ConsolePresenter, print_banner
from plantilla.core.config import AppSettings
from plantilla.core.domain.campos import CAMPOS_NUMERICOS, CAMPOS_TEXTO, SUBCAMPOS
from plantilla.core.logging_setup import configure_logging
from plantilla.core.services.plantilla_service import PlantillaService

app = typer.Typer(
    no_args_is_help=True,
    help="Cliente de MS Plantilla: listados y fichas a través del API Gateway.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


@dataclass
class CliState:
    settings: AppSettings
    html_path: Path | None = None


def _build_service(state: CliState) -> PlantillaService:
    presenter = HtmlFilePresenter(state.html_path) if state.html_path else ConsolePresenter(_console)
    return PlantillaService(state.settings, presenter=presenter, notifier=ConsoleNotifier())


def _ejecutar(
    ctx: typer.Context,
    operacion: Callable[[PlantillaService], Awaitable[str | None]],
) -> None:
    state: CliState = ctx.obj
    service = _build_service(state)
    try:
        resultado = asyncio.run(operacion(service))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if resultado is None:
        raise typer.Exit(code=1)
    if state.html_path:
        _console.print(f"[green]Artículo guardado en:[/green] {state.html_path}")


@app.callback()
def main(
    ctx: typer.Context,
    gateway: str | None = typer.Option(
        None,
        "--gateway",
        help="Dirección base del API Gateway (sobrescribe PLANTILLA_API_GATEWAY).",
    ),
    html: Path | None = typer.Option(
        None,
        "--html",
        help="Escribir el artículo en este fichero HTML en lugar de mostrarlo en consola.",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Mostrar el banner."),
) -> None:
    settings = AppSettings(api_gateway=gateway) if gateway else AppSettings()
    configure_logging(settings)
    ctx.obj = CliState(settings=settings, html_path=html)
    if banner and ctx.invoked_subcommand != "doctor":
        print_banner(_console)


@app.command()
def home(ctx: typer.Context) -> None:
    """Mensaje de la ruta home del MS."""

    _ejecutar(ctx, lambda s: s.procesar_home())


@app.command(name="acerca-de")
def acerca_de(ctx: typer.Context) -> None:
    """Autor, email y fecha del MS."""

    _ejecutar(ctx, lambda s: s.procesar_acerca_de())


@app.command()
def listar(ctx: typer.Context) -> None:
    """Tabla con todos los datos de todas las personas."""

    _ejecutar(ctx, lambda s: s.listar())


@app.command()
def nombres(ctx: typer.Context) -> None:
    """Nombre y apellidos de todas las personas."""

    _ejecutar(ctx, lambda s: s.listar_nombres())


@app.command(name="nombres-alfabetico")
def nombres_alfabetico(ctx: typer.Context) -> None:
    """Nombre y apellidos ordenados por apellidos."""

    _ejecutar(ctx, lambda s: s.listar_nombres_alfabetico())


@app.command(name="listar-por")
def listar_por(
    ctx: typer.Context,
    campo: str = typer.Argument(..., help=f"Uno de: {', '.join(CAMPOS_TEXTO)}"),
) -> None:
    """Todas las personas ordenadas por un campo (sin distinguir mayúsculas)."""

    _ejecutar(ctx, lambda s: s.listar_por(campo))


@app.command(name="listar-por-num")
def listar_por_num(
    ctx: typer.Context,
    campo: str = typer.Argument(..., help=f"Uno de: {', '.join(CAMPOS_NUMERICOS)}"),
) -> None:
    """Todas las personas ordenadas numéricamente por un campo."""

    _ejecutar(ctx, lambda s: s.listar_por_num(campo))


@app.command(name="listar-por-varios")
def listar_por_varios(
    ctx: typer.Context,
    campo: str = typer.Argument(..., help=f"Uno de: {', '.join(SUBCAMPOS)}"),
    subcampo: str = typer.Argument(..., help="Subcampo de CAMPO (p.ej. Direccion localidad)."),
) -> None:
    """Todas las personas ordenadas por un subcampo, ignorando tildes."""

    _ejecutar(ctx, lambda s: s.listar_por_varios(campo, subcampo))


@app.command()
def buscar(ctx: typer.Context, nombre: str) -> None:
    """Personas cuyo nombre coincide exactamente con NOMBRE."""

    _ejecutar(ctx, lambda s: s.listar_buscar(nombre))


@app.command(name="buscar-cuatro")
def buscar_cuatro(
    ctx: typer.Context,
    nombre: str,
    localidad: str,
    estilo: str,
    anio: str,
) -> None:
    """Personas que cumplen los cuatro criterios a la vez."""

    _ejecutar(ctx, lambda s: s.listar_buscar_cuatro(nombre, localidad, estilo, anio))


@app.command(name="buscar-por-uno")
def buscar_por_uno(
    ctx: typer.Context,
    nombre: str,
    localidad: str,
    estilo: str,
    pais: str,
) -> None:
    """Personas que cumplen al menos uno de los criterios."""

    _ejecutar(ctx, lambda s: s.listar_buscar_por_uno(nombre, localidad, estilo, pais))


@app.command()
def mostrar(ctx: typer.Context, id_persona: str = typer.Argument(..., metavar="ID")) -> None:
    """Ficha de una persona por su id."""

    _ejecutar(ctx, lambda s: s.mostrar(id_persona))


def run() -> None:
    app()
