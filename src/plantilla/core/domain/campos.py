"""Catálogo de campos por los que se puede ordenar.

Los nombres son los del API (los mismos que usa la BBDD), no los atributos
Python de los modelos.
"""

from __future__ import annotations

CAMPOS_TEXTO: tuple[str, ...] = (
    "Mejor_estilo_natacion",
    "Anios_participacion_en_mundial",
    "Num_participaciones_mundiales_JJOO",
)

CAMPOS_NUMERICOS: tuple[str, ...] = (
    "Anios_participacion_en_mundial",
    "Num_participaciones_mundiales_JJOO",
)

SUBCAMPOS: dict[str, tuple[str, ...]] = {
    "Nombre_completo": ("Nombre", "Apellidos"),
    "Fecha": ("dia", "mes", "año"),
    "Direccion": ("calle", "localidad", "provincia", "pais"),
}


def validar_campo(campo: str, permitidos: tuple[str, ...]) -> str:
    if campo not in permitidos:
        raise ValueError(
            f"Campo desconocido: {campo!r}. Valores válidos: {', '.join(permitidos)}"
        )
    return campo


def validar_subcampo(campo: str, subcampo: str) -> tuple[str, str]:
    validar_campo(campo, tuple(SUBCAMPOS))
    validar_campo(subcampo, SUBCAMPOS[campo])
    return campo, subcampo
