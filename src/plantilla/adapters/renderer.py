"""Render HTML de listados y mensajes.

Por qué está en adapters:
- El HTML es un detalle de presentación (Jinja2).
- El Core solo conoce `Persona`, `DatosDescargados` y el `FieldSet` elegido.

Cabecera y pie son literales fijos por conjunto de columnas: no dependen de
los datos. Las filas llevan el id del documento en `title` para poder
localizarlas después.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from plantilla.core.domain.field_set import FieldSet
from plantilla.core.domain.models import DatosDescargados, Persona
from plantilla.core.domain.valores import a_texto

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

_CABECERAS: dict[FieldSet, str] = {
    FieldSet.COMPLETO: (
        '<table class="listado-plantilla"><thead>'
        "<th>Nombre</th><th>Apellidos</th><th>Fecha</th><th>Direccion</th>"
        "<th>Años participación</th><th>Nº participaciones mundiales en JJOO</th>"
        "<th>Mejor estilo de natación</th>"
        "</thead><tbody>"
    ),
    FieldSet.NOMBRES: (
        '<table class="listado-plantilla"><thead>'
        "<th>Nombres</th><th>Apellidos</th>"
        "</thead><tbody>"
    ),
}

_PIE = "</tbody></table>"

_PLANTILLAS_FILA: dict[FieldSet, str] = {
    FieldSet.COMPLETO: "fila_completa.html",
    FieldSet.NOMBRES: "fila_nombres.html",
}


@lru_cache(maxsize=1)
def _get_env() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["js"] = a_texto
    return env


def cabecera_table(field_set: FieldSet = FieldSet.COMPLETO) -> str:
    return _CABECERAS[field_set]


def pie_table() -> str:
    return _PIE


def cuerpo_tr(persona: Persona, field_set: FieldSet = FieldSet.COMPLETO) -> str:
    """Una fila `<tr>` con las columnas del conjunto elegido, en orden fijo."""

    template = _get_env().get_template(_PLANTILLAS_FILA[field_set])
    return template.render(persona=persona, d=persona.data)


def render(
    personas: Persona | Iterable[Persona],
    field_set: FieldSet = FieldSet.COMPLETO,
) -> str:
    """Cabecera + una fila por persona (en el orden recibido) + pie.

    Una `Persona` suelta se pinta como un listado de un elemento.
    """

    if isinstance(personas, Persona):
        personas = [personas]
    filas = "".join(cuerpo_tr(p, field_set) for p in personas)
    return cabecera_table(field_set) + filas + pie_table()


def render_acerca_de(datos: DatosDescargados) -> str:
    return _get_env().get_template("acerca_de.html").render(datos=datos)


def render_pagina(*, titulo: str, contenido: str) -> str:
    """Página HTML autocontenida con el título y el contenido ya renderizado."""

    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    return _get_env().get_template("pagina.html").render(
        titulo=titulo,
        contenido=contenido,
        generated_at=generated_at,
    )
