"""Transformaciones puras sobre listados de personas.

Reglas comunes:
- Nunca modifican la lista recibida; devuelven una nueva.
- `sorted` es estable: a igualdad de clave se conserva el orden de descarga.
- Las comparaciones de texto ignoran mayúsculas; solo el orden por subcampo
  quita además las tildes.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Iterable
from typing import Any

from plantilla.core.domain.models import Persona
from plantilla.core.domain.valores import a_texto, parse_float


def quitar_acentos(texto: str) -> str:
    """Descompone (NFD) y elimina las marcas combinantes U+0300–U+036F."""

    descompuesto = unicodedata.normalize("NFD", texto)
    return "".join(ch for ch in descompuesto if not "\u0300" <= ch <= "\u036f")


def _clave_texto(valor: Any) -> str:
    return a_texto(valor).lower()


def _clave_numerica(valor: Any) -> tuple[bool, float]:
    numero = parse_float(valor)
    # NaN al final, conservando su orden relativo.
    if math.isnan(numero):
        return True, 0.0
    return False, numero


def ordenar_por_apellidos(personas: Iterable[Persona]) -> list[Persona]:
    return sorted(
        personas,
        key=lambda p: _clave_texto(p.data.nombre_completo.apellidos),
    )


def ordenar_por_campo(personas: Iterable[Persona], campo: str) -> list[Persona]:
    return sorted(personas, key=lambda p: _clave_texto(p.data.campo(campo)))


def ordenar_por_campo_numerico(personas: Iterable[Persona], campo: str) -> list[Persona]:
    return sorted(personas, key=lambda p: _clave_numerica(p.data.campo(campo)))


def ordenar_por_subcampo(
    personas: Iterable[Persona],
    campo: str,
    subcampo: str,
) -> list[Persona]:
    return sorted(
        personas,
        key=lambda p: quitar_acentos(_clave_texto(p.data.campo(campo).campo(subcampo))),
    )


def filtrar_por_nombre(personas: Iterable[Persona], nombre: str) -> list[Persona]:
    return [p for p in personas if p.data.nombre_completo.nombre == nombre]


def _participa_en(persona: Persona, anio: str) -> bool:
    valor = persona.data.anios_participacion_en_mundial
    valores = valor if isinstance(valor, list) else [valor]
    return any(a_texto(v) == anio for v in valores)


def filtrar_cuatro(
    personas: Iterable[Persona],
    nombre: str,
    localidad: str,
    estilo: str,
    anio: str,
) -> list[Persona]:
    """Personas que cumplen a la vez los cuatro criterios."""

    return [
        p
        for p in personas
        if p.data.nombre_completo.nombre == nombre
        and p.data.direccion.localidad == localidad
        and p.data.mejor_estilo_natacion == estilo
        and _participa_en(p, anio)
    ]


def filtrar_por_uno(
    personas: Iterable[Persona],
    nombre: str,
    localidad: str,
    estilo: str,
    pais: str,
) -> list[Persona]:
    """Personas que cumplen al menos uno de los cuatro criterios."""

    return [
        p
        for p in personas
        if p.data.nombre_completo.nombre == nombre
        or p.data.direccion.localidad == localidad
        or p.data.mejor_estilo_natacion == estilo
        or p.data.direccion.pais == pais
    ]
