"""Conversión de valores escalares tal y como los trata el navegador.

El front original interpolaba y comparaba los valores de la BBDD con las
reglas de JavaScript (`${v}`, `parseFloat(v)`); estas funciones reproducen esas
reglas para que el HTML y los órdenes no cambien al leer números como `2.0`.
"""

from __future__ import annotations

import math
import re
from typing import Any

_NUMERO = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def a_texto(valor: Any) -> str:
    """Representación textual de un valor, como `String(valor)` en JS."""

    if valor is None:
        return "null"
    if isinstance(valor, bool):
        return "true" if valor else "false"
    if isinstance(valor, float):
        if math.isnan(valor):
            return "NaN"
        if math.isinf(valor):
            return "Infinity" if valor > 0 else "-Infinity"
        if valor.is_integer() and abs(valor) < 1e21:
            return str(int(valor))
        return repr(valor)
    if isinstance(valor, (list, tuple)):
        return ",".join(a_texto(v) for v in valor)
    return str(valor)


def parse_float(valor: Any) -> float:
    """Prefijo numérico del texto del valor; `nan` si no empieza por un número."""

    match = _NUMERO.match(a_texto(valor).lstrip())
    if match is None:
        return math.nan
    texto = match.group()
    if texto.endswith("Infinity"):
        return -math.inf if texto.startswith("-") else math.inf
    return float(texto)
