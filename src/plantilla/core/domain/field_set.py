"""Conjuntos de columnas con los que se pinta un listado."""

from __future__ import annotations

from enum import Enum


class FieldSet(str, Enum):
    """Selector de columnas para el renderer."""

    COMPLETO = "completo"
    NOMBRES = "nombres"
