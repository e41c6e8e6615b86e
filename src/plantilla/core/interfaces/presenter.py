"""Contratos de presentación.

Por qué Protocol:
- El Core decide *qué* se muestra (título + HTML) pero no *dónde*: consola,
  fichero HTML o un doble de test implementan el mismo contrato estructural.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArticlePresenter(Protocol):
    """Sustituye el área de contenido visible por un título y un cuerpo HTML."""

    def actualizar(self, titulo: str, contenido: str) -> None:
        ...


@runtime_checkable
class OperatorNotifier(Protocol):
    """Avisa al operador de un fallo que corta el flujo (p.ej. gateway caído)."""

    def alertar(self, mensaje: str) -> None:
        ...
