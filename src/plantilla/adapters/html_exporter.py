"""Exportación del artículo a un fichero HTML.

Por qué existe:
- Permite ver las tablas en un navegador sin servir el front-end completo.
- Útil para depurar el HTML que genera el renderer.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from plantilla.adapters.renderer import render_pagina

logger = structlog.get_logger(__name__)


def export_article_html(*, titulo: str, contenido: str, output_path: Path) -> Path:
    """Escribe una página HTML UTF-8 con el título y el contenido."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_pagina(titulo=titulo, contenido=contenido)
    output_path.write_text(html, encoding="utf-8")
    return output_path


class HtmlFilePresenter:
    """`ArticlePresenter` que vuelca cada actualización a `output_path`.

    Cada llamada sustituye el fichero entero, igual que el área de contenido
    del navegador se sustituye en cada actualización.
    """

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path

    def actualizar(self, titulo: str, contenido: str) -> None:
        path = export_article_html(titulo=titulo, contenido=contenido, output_path=self.output_path)
        logger.info("articulo_exportado", titulo=titulo, path=str(path))
