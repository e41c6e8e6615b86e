"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("MS Plantilla", style="bold cyan")
    subtitle = Text("Cliente del API Gateway • Listados • Fichas", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_article_panel(titulo: str, contenido: str) -> Panel:
    """Panel con el título del artículo y su cuerpo HTML resaltado."""

    body = Syntax(contenido, "html", word_wrap=True, background_color="default")
    return Panel(body, title=Text(titulo, style="bold yellow"), border_style="yellow")


def build_alert_panel(mensaje: str) -> Panel:
    return Panel(Text(mensaje, style="bold red"), title="Aviso", border_style="red")


class ConsolePresenter:
    """`ArticlePresenter` que imprime el artículo en la consola."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def actualizar(self, titulo: str, contenido: str) -> None:
        self._console.print(build_article_panel(titulo, contenido))


class ConsoleNotifier:
    """`OperatorNotifier` que muestra el aviso en stderr."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def alertar(self, mensaje: str) -> None:
        self._console.print(build_alert_panel(mensaje))
