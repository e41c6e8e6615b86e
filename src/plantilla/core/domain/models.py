"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la forma de lo que devuelve el gateway antes de construir nada, en
  lugar de comprobar campos sueltos al pintar.
- Los alias conservan los nombres del API (`Nombre_completo`, `año`, `@ref`)
  mientras el código Python usa atributos normales.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# El MS no es consistente: "4" y 4 aparecen según quién insertó el documento.
Escalar = Union[int, float, str]


class _ModeloPlantilla(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def campo(self, nombre: str) -> Any:
        """Devuelve el valor de un campo por su nombre en el API o en Python.

        Lanza `KeyError` si el modelo no tiene ese campo.
        """

        for attr, info in type(self).model_fields.items():
            if nombre == attr or nombre == info.alias:
                return getattr(self, attr)
        raise KeyError(nombre)


class NombreCompleto(_ModeloPlantilla):
    nombre: Escalar = Field(..., alias="Nombre")
    apellidos: Escalar = Field(..., alias="Apellidos")


class Fecha(_ModeloPlantilla):
    dia: Escalar = Field(..., alias="dia")
    mes: Escalar = Field(..., alias="mes")
    anio: Escalar = Field(..., alias="año")


class Direccion(_ModeloPlantilla):
    calle: Escalar = Field(..., alias="calle")
    localidad: Escalar = Field(..., alias="localidad")
    provincia: Escalar = Field(..., alias="provincia")
    pais: Escalar = Field(..., alias="pais")


class DatosPersona(_ModeloPlantilla):
    """Datos de una persona tal y como los guarda la BBDD del MS."""

    nombre_completo: NombreCompleto = Field(..., alias="Nombre_completo")
    fecha: Fecha = Field(..., alias="Fecha")
    direccion: Direccion = Field(..., alias="Direccion")
    anios_participacion_en_mundial: Union[Escalar, list[Escalar]] = Field(
        ...,
        alias="Anios_participacion_en_mundial",
        description="Años de participación en mundiales (número o lista de años).",
    )
    num_participaciones_mundiales_jjoo: Escalar = Field(
        ...,
        alias="Num_participaciones_mundiales_JJOO",
    )
    mejor_estilo_natacion: Escalar = Field(..., alias="Mejor_estilo_natacion")


class RefInterna(_ModeloPlantilla):
    id: str = Field(..., min_length=1, description="Identificador opaco del documento.")


class Referencia(_ModeloPlantilla):
    documento: RefInterna = Field(..., alias="@ref")


class Persona(_ModeloPlantilla):
    """Un documento de la colección: referencia + datos."""

    ref: Referencia
    data: DatosPersona

    @property
    def id(self) -> str:
        return self.ref.documento.id


class RespuestaListado(_ModeloPlantilla):
    """Envoltorio que devuelve `/plantilla/getTodos`."""

    data: list[Persona]


class DatosDescargados(BaseModel):
    """Mensaje genérico de las rutas home y acerca de."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    mensaje: str
    autor: str = ""
    email: str = ""
    fecha: str = ""


DATOS_DESCARGADOS_NULOS = DatosDescargados(
    mensaje="Datos Descargados No válidos",
    autor="",
    email="",
    fecha="",
)
