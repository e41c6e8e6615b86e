"""Fixtures compartidas: personas de ejemplo, dobles de presentación y un
gateway simulado con `httpx.MockTransport`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from plantilla.core.config import AppSettings
from plantilla.core.domain.models import Persona

GATEWAY = "http://gateway.test"


def persona_dict(
    id_: str = "ref persona 1",
    nombre: str = "Mireia",
    apellidos: str = "Belmonte García",
    *,
    calle: str = "Calle Falsa 123",
    localidad: str = "Springfield",
    provincia: str = "Estados Unidos",
    pais: str = "EEUU",
    anios: Any = 2,
    jjoo: Any = 1,
    estilo: str = "Mariposa",
) -> dict[str, Any]:
    return {
        "ref": {"@ref": {"id": id_}},
        "data": {
            "Nombre_completo": {"Nombre": nombre, "Apellidos": apellidos},
            "Fecha": {"dia": 1, "mes": 1, "año": 2000},
            "Direccion": {
                "calle": calle,
                "localidad": localidad,
                "provincia": provincia,
                "pais": pais,
            },
            "Anios_participacion_en_mundial": anios,
            "Num_participaciones_mundiales_JJOO": jjoo,
            "Mejor_estilo_natacion": estilo,
        },
    }


class RecordingPresenter:
    def __init__(self) -> None:
        self.llamadas: list[tuple[str, str]] = []

    def actualizar(self, titulo: str, contenido: str) -> None:
        self.llamadas.append((titulo, contenido))


class RecordingNotifier:
    def __init__(self) -> None:
        self.alertas: list[str] = []

    def alertar(self, mensaje: str) -> None:
        self.alertas.append(mensaje)


@pytest.fixture
def make_persona() -> Callable[..., Persona]:
    def _make(*args: Any, **kwargs: Any) -> Persona:
        return Persona.model_validate(persona_dict(*args, **kwargs))

    return _make


@pytest.fixture
def make_persona_dict() -> Callable[..., dict[str, Any]]:
    return persona_dict


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_gateway=GATEWAY)


@pytest.fixture
def gateway() -> Callable[[dict[str, Any]], httpx.MockTransport]:
    """Construye un transporte que responde JSON según la ruta pedida.

    Las rutas no registradas devuelven 404 con un cuerpo JSON de error.
    Cada transporte guarda las URLs pedidas en `transport.pedidas`.
    """

    def _build(rutas: dict[str, Any]) -> httpx.MockTransport:
        pedidas: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            pedidas.append(str(request.url))
            path = request.url.path
            if path in rutas:
                return httpx.Response(200, json=rutas[path])
            return httpx.Response(404, json={"error": "not found"})

        transport = httpx.MockTransport(handler)
        transport.pedidas = pedidas  # type: ignore[attr-defined]
        return transport

    return _build


@pytest.fixture
def gateway_caido() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)
