"""Normalización de los datos descargados de las rutas home y acerca de.

Solo la ausencia de un campo requerido (o un valor inservible en él) lleva a
`DATOS_DESCARGADOS_NULOS`. Un campo opcional que no se puede leer como texto
se descarta y queda con su valor por defecto. Nunca se lanza una excepción.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from plantilla.core.domain.models import DATOS_DESCARGADOS_NULOS, DatosDescargados

CAMPOS_HOME: frozenset[str] = frozenset({"mensaje"})
CAMPOS_ACERCA_DE: frozenset[str] = frozenset({"mensaje", "autor", "email", "fecha"})


def _campos_invalidos(error: ValidationError) -> set[str]:
    return {str(detalle["loc"][0]) for detalle in error.errors() if detalle["loc"]}


def normalizar(
    datos: Any = None,
    campos_requeridos: Iterable[str] = CAMPOS_HOME,
) -> DatosDescargados:
    if not datos or not isinstance(datos, Mapping):
        return DATOS_DESCARGADOS_NULOS

    requeridos = set(campos_requeridos)
    if any(campo not in datos for campo in requeridos):
        return DATOS_DESCARGADOS_NULOS

    valores = {campo: datos[campo] for campo in DatosDescargados.model_fields if campo in datos}
    try:
        return DatosDescargados.model_validate(valores)
    except ValidationError as exc:
        invalidos = _campos_invalidos(exc)

    if invalidos & (requeridos | {"mensaje"}):
        return DATOS_DESCARGADOS_NULOS

    for campo in invalidos:
        valores.pop(campo, None)
    try:
        return DatosDescargados.model_validate(valores)
    except ValidationError:
        return DATOS_DESCARGADOS_NULOS
