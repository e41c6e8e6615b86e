"""Orquestación de las operaciones del front de MS Plantilla.

Cada operación es un pipeline de dos pasos:

1. Descarga del gateway (`descargar_ruta`), que puede terminar sin resultado.
2. Transformación pura (`plantilla.core.operations`) + render + presentación.

El segundo paso solo se ejecuta si el primero devolvió algo: un fallo de red
acaba en "no pasa nada más" (el gateway ya avisó al operador), nunca en una
excepción. El título presentado depende solo de la operación, no de los datos.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from plantilla.adapters.http_client import MENSAJE_GATEWAY_INACCESIBLE, descargar_ruta
from plantilla.adapters.renderer import render, render_acerca_de
from plantilla.core import operations
from plantilla.core.config import AppSettings
from plantilla.core.domain.campos import (
    CAMPOS_NUMERICOS,
    CAMPOS_TEXTO,
    validar_campo,
    validar_subcampo,
)
from plantilla.core.domain.field_set import FieldSet
from plantilla.core.domain.models import Persona, RespuestaListado
from plantilla.core.interfaces.presenter import ArticlePresenter, OperatorNotifier
from plantilla.core.normalizer import CAMPOS_ACERCA_DE, CAMPOS_HOME, normalizar

RUTA_HOME = "/plantilla/"
RUTA_ACERCA_DE = "/plantilla/acercade"
RUTA_TODOS = "/plantilla/getTodos"
RUTA_POR_ID = "/plantilla/getPorId/"

TITULO_HOME = "Plantilla Home"
TITULO_ACERCA_DE = "Plantilla Acerca de"
TITULO_PLANTILLAS = "Listado de plantillas"
TITULO_NOMBRES = "Listado de nombres"
TITULO_UNA_PERSONA = "Mostrar una persona"

logger = structlog.get_logger(__name__)

Transformacion = Callable[[list[Persona]], list[Persona]]
ModeloT = TypeVar("ModeloT", bound=BaseModel)


class PlantillaService:
    """Superficie pública del front: descargas, listados y fichas."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        presenter: ArticlePresenter,
        notifier: OperatorNotifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._presenter = presenter
        self._notifier = notifier
        self._transport = transport

    async def descargar_ruta(self, ruta: str) -> Any | None:
        return await descargar_ruta(
            ruta,
            settings=self._settings,
            notifier=self._notifier,
            transport=self._transport,
        )

    # Descargas

    async def _descargar_modelo(self, ruta: str, modelo: type[ModeloT]) -> ModeloT | None:
        """Descarga `ruta` y la valida contra `modelo`.

        Por qué: un cuerpo de error del gateway (404, 500...) no es un listado
        vacío ni una persona; se trata como una descarga fallida.
        """

        payload = await self.descargar_ruta(ruta)
        if payload is None:
            return None
        try:
            return modelo.model_validate(payload)
        except ValidationError as exc:
            logger.error(
                "gateway_payload_invalido",
                ruta=ruta,
                modelo=modelo.__name__,
                errores=exc.error_count(),
            )
            if self._notifier is not None:
                self._notifier.alertar(MENSAJE_GATEWAY_INACCESIBLE)
            return None

    async def recupera(self) -> list[Persona] | None:
        """Todas las personas de `/plantilla/getTodos`, en el orden del MS."""

        respuesta = await self._descargar_modelo(RUTA_TODOS, RespuestaListado)
        if respuesta is None:
            return None
        return respuesta.data

    async def recupera_una_persona(self, id_persona: str) -> Persona | None:
        return await self._descargar_modelo(RUTA_POR_ID + id_persona, Persona)

    # Render + presentación

    def _presentar(self, titulo: str, contenido: str) -> str:
        self._presenter.actualizar(titulo, contenido)
        return contenido

    def imprime(self, personas: Iterable[Persona]) -> str:
        return self._presentar(TITULO_PLANTILLAS, render(personas, FieldSet.COMPLETO))

    def imprime_nombres(self, personas: Iterable[Persona]) -> str:
        return self._presentar(TITULO_NOMBRES, render(personas, FieldSet.NOMBRES))

    def imprime_una_persona(self, persona: Persona) -> str:
        return self._presentar(TITULO_UNA_PERSONA, render(persona, FieldSet.COMPLETO))

    def mostrar_home(self, datos: Any = None) -> str:
        normalizados = normalizar(datos, CAMPOS_HOME)
        return self._presentar(TITULO_HOME, normalizados.mensaje)

    def mostrar_acerca_de(self, datos: Any = None) -> str:
        normalizados = normalizar(datos, CAMPOS_ACERCA_DE)
        return self._presentar(TITULO_ACERCA_DE, render_acerca_de(normalizados))

    # Operaciones

    async def procesar_home(self) -> str | None:
        datos = await self.descargar_ruta(RUTA_HOME)
        if datos is None:
            return None
        return self.mostrar_home(datos)

    async def procesar_acerca_de(self) -> str | None:
        datos = await self.descargar_ruta(RUTA_ACERCA_DE)
        if datos is None:
            return None
        return self.mostrar_acerca_de(datos)

    async def _listado(
        self,
        operacion: str,
        transformar: Transformacion,
        imprimir: Callable[[list[Persona]], str],
    ) -> str | None:
        personas = await self.recupera()
        if personas is None:
            logger.info("listado_sin_datos", operacion=operacion)
            return None
        resultado = transformar(personas)
        html = imprimir(resultado)
        logger.info(
            "listado_presentado",
            operacion=operacion,
            descargadas=len(personas),
            mostradas=len(resultado),
        )
        return html

    async def listar(self) -> str | None:
        return await self._listado("listar", list, self.imprime)

    async def listar_nombres(self) -> str | None:
        return await self._listado("listar_nombres", list, self.imprime_nombres)

    async def listar_nombres_alfabetico(self) -> str | None:
        return await self._listado(
            "listar_nombres_alfabetico",
            operations.ordenar_por_apellidos,
            self.imprime_nombres,
        )

    async def listar_por(self, campo: str) -> str | None:
        validar_campo(campo, CAMPOS_TEXTO)
        return await self._listado(
            "listar_por",
            lambda ps: operations.ordenar_por_campo(ps, campo),
            self.imprime,
        )

    async def listar_por_num(self, campo: str) -> str | None:
        validar_campo(campo, CAMPOS_NUMERICOS)
        return await self._listado(
            "listar_por_num",
            lambda ps: operations.ordenar_por_campo_numerico(ps, campo),
            self.imprime,
        )

    async def listar_por_varios(self, campo: str, subcampo: str) -> str | None:
        validar_subcampo(campo, subcampo)
        return await self._listado(
            "listar_por_varios",
            lambda ps: operations.ordenar_por_subcampo(ps, campo, subcampo),
            self.imprime,
        )

    async def listar_buscar(self, nombre: str) -> str | None:
        return await self._listado(
            "listar_buscar",
            lambda ps: operations.filtrar_por_nombre(ps, nombre),
            self.imprime,
        )

    async def listar_buscar_cuatro(
        self,
        nombre: str,
        localidad: str,
        estilo: str,
        anio: str,
    ) -> str | None:
        return await self._listado(
            "listar_buscar_cuatro",
            lambda ps: operations.filtrar_cuatro(ps, nombre, localidad, estilo, anio),
            self.imprime,
        )

    async def listar_buscar_por_uno(
        self,
        nombre: str,
        localidad: str,
        estilo: str,
        pais: str,
    ) -> str | None:
        return await self._listado(
            "listar_buscar_por_uno",
            lambda ps: operations.filtrar_por_uno(ps, nombre, localidad, estilo, pais),
            self.imprime,
        )

    async def mostrar(self, id_persona: str) -> str | None:
        persona = await self.recupera_una_persona(id_persona)
        if persona is None:
            logger.info("persona_sin_datos", id_persona=id_persona)
            return None
        return self.imprime_una_persona(persona)
