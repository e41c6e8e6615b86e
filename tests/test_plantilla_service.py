"""Tests de extremo a extremo del servicio contra un gateway simulado."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from plantilla.adapters.renderer import cabecera_table, cuerpo_tr, pie_table
from plantilla.core.domain.field_set import FieldSet
from plantilla.core.domain.models import DATOS_DESCARGADOS_NULOS
from plantilla.adapters.http_client import MENSAJE_GATEWAY_INACCESIBLE
from plantilla.core.services.plantilla_service import (
    RUTA_TODOS,
    TITULO_ACERCA_DE,
    TITULO_HOME,
    TITULO_NOMBRES,
    TITULO_PLANTILLAS,
    TITULO_UNA_PERSONA,
    PlantillaService,
)

DATOS_PRUEBA = {
    "mensaje": "Mensaje de prueba descargado",
    "autor": "Prueba de autor",
    "email": "Prueba de email",
    "fecha": "00/00/0000",
}


@pytest.fixture
def personas_raw(make_persona_dict):
    return [
        make_persona_dict("ref persona 1", "Mireia", "Belmonte García", localidad="Badalona", jjoo=3),
        make_persona_dict("ref persona 2", "Lionel", "Messi", localidad="Rosario", jjoo="1"),
        make_persona_dict("ref persona 3", "Ana", "belmonte garcía", localidad="Ávila", jjoo="dos"),
    ]


@pytest.fixture
def service_factory(settings, presenter, notifier, gateway):
    def _build(rutas):
        return PlantillaService(
            settings,
            presenter=presenter,
            notifier=notifier,
            transport=gateway(rutas),
        )

    return _build


@pytest.fixture
def service(service_factory, personas_raw):
    return service_factory({RUTA_TODOS: {"data": personas_raw}})


@pytest.fixture
def service_caido(settings, presenter, notifier, gateway_caido):
    return PlantillaService(settings, presenter=presenter, notifier=notifier, transport=gateway_caido)


def _titles(presenter) -> list[str]:
    return [titulo for titulo, _ in presenter.llamadas]


class TestHomeAcercaDe:
    @pytest.mark.parametrize("entrada", [None, 23, {}, {"foo": "bar"}])
    def test_home_muestra_datos_nulos(self, service, presenter, entrada) -> None:
        service.mostrar_home(entrada)
        assert presenter.llamadas == [(TITULO_HOME, DATOS_DESCARGADOS_NULOS.mensaje)]

    def test_home_muestra_el_mensaje(self, service, presenter) -> None:
        service.mostrar_home(DATOS_PRUEBA)
        assert presenter.llamadas == [(TITULO_HOME, DATOS_PRUEBA["mensaje"])]

    @pytest.mark.parametrize(
        "entrada",
        [
            None,
            23,
            {},
            {"autor": "un autor", "email": "un email", "fecha": "una fecha"},
            {"mensaje": "un mensaje", "email": "un email", "fecha": "una fecha"},
            {"mensaje": "un mensaje", "autor": "un autor", "fecha": "una fecha"},
            {"mensaje": "un mensaje", "autor": "un autor", "email": "un email"},
        ],
    )
    def test_acerca_de_muestra_datos_nulos(self, service, presenter, entrada) -> None:
        service.mostrar_acerca_de(entrada)
        [(titulo, contenido)] = presenter.llamadas
        assert titulo == TITULO_ACERCA_DE
        assert DATOS_DESCARGADOS_NULOS.mensaje in contenido

    def test_acerca_de_muestra_autor_email_y_fecha(self, service, presenter) -> None:
        service.mostrar_acerca_de(DATOS_PRUEBA)
        [(titulo, contenido)] = presenter.llamadas
        assert titulo == TITULO_ACERCA_DE
        for campo in ("autor", "email", "fecha"):
            assert DATOS_PRUEBA[campo] in contenido

    def test_procesar_home_descarga_y_muestra(self, service_factory, presenter) -> None:
        service = service_factory({"/plantilla/": {"mensaje": "Microservicio MS Plantilla: home"}})
        html = asyncio.run(service.procesar_home())
        assert html == "Microservicio MS Plantilla: home"
        assert presenter.llamadas == [(TITULO_HOME, html)]

    def test_procesar_acerca_de_descarga_y_muestra(self, service_factory, presenter) -> None:
        service = service_factory({"/plantilla/acercade": DATOS_PRUEBA})
        html = asyncio.run(service.procesar_acerca_de())
        assert "Prueba de autor" in html
        assert _titles(presenter) == [TITULO_ACERCA_DE]


class TestImprime:
    def test_imprime_nombres(self, service, presenter, make_persona) -> None:
        personas = [make_persona("ref persona 1"), make_persona("ref persona 2", "Lionel", "Messi")]
        service.imprime_nombres(personas)
        esperado = (
            cabecera_table(FieldSet.NOMBRES)
            + cuerpo_tr(personas[0], FieldSet.NOMBRES)
            + cuerpo_tr(personas[1], FieldSet.NOMBRES)
            + pie_table()
        )
        assert presenter.llamadas == [(TITULO_NOMBRES, esperado)]

    def test_imprime(self, service, presenter, make_persona) -> None:
        personas = [make_persona("ref persona 1"), make_persona("ref persona 2", "Lionel", "Messi")]
        service.imprime(personas)
        esperado = cabecera_table() + cuerpo_tr(personas[0]) + cuerpo_tr(personas[1]) + pie_table()
        assert presenter.llamadas == [(TITULO_PLANTILLAS, esperado)]

    def test_imprime_una_persona(self, service, presenter, make_persona) -> None:
        persona = make_persona()
        service.imprime_una_persona(persona)
        esperado = cabecera_table() + cuerpo_tr(persona) + pie_table()
        assert presenter.llamadas == [(TITULO_UNA_PERSONA, esperado)]


class TestListados:
    def test_listar(self, service, presenter) -> None:
        html = asyncio.run(service.listar())
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert html.index("ref persona 1") < html.index("ref persona 2") < html.index("ref persona 3")

    def test_listar_nombres(self, service, presenter) -> None:
        html = asyncio.run(service.listar_nombres())
        assert _titles(presenter) == [TITULO_NOMBRES]
        assert html.startswith(cabecera_table(FieldSet.NOMBRES))

    def test_listar_nombres_alfabetico_es_estable(self, service, presenter) -> None:
        html = asyncio.run(service.listar_nombres_alfabetico())
        assert _titles(presenter) == [TITULO_NOMBRES]
        # "Belmonte García" y "belmonte garcía" empatan: se conserva el orden de descarga.
        assert html.index("ref persona 1") < html.index("ref persona 3") < html.index("ref persona 2")

    def test_listar_por_num(self, service, presenter) -> None:
        html = asyncio.run(service.listar_por_num("Num_participaciones_mundiales_JJOO"))
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert html.index("ref persona 2") < html.index("ref persona 1") < html.index("ref persona 3")

    def test_listar_por_varios(self, service, presenter) -> None:
        html = asyncio.run(service.listar_por_varios("Direccion", "localidad"))
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert html.index("ref persona 3") < html.index("ref persona 1") < html.index("ref persona 2")

    def test_listar_por(self, service, presenter) -> None:
        html = asyncio.run(service.listar_por("Mejor_estilo_natacion"))
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert html.count("<tr ") == 3

    def test_listar_buscar(self, service, presenter) -> None:
        html = asyncio.run(service.listar_buscar("Lionel"))
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert html.count("<tr ") == 1
        assert 'title="ref persona 2"' in html

    def test_listar_buscar_sin_coincidencias_pinta_tabla_vacia(self, service, presenter) -> None:
        html = asyncio.run(service.listar_buscar("Nadie"))
        assert html == cabecera_table() + pie_table()

    def test_listar_buscar_cuatro(self, service) -> None:
        html = asyncio.run(service.listar_buscar_cuatro("Mireia", "Badalona", "Mariposa", "2"))
        assert html.count("<tr ") == 1

    def test_listar_buscar_por_uno(self, service) -> None:
        html = asyncio.run(service.listar_buscar_por_uno("Ana", "Rosario", "-", "-"))
        assert html.count("<tr ") == 2

    def test_mostrar(self, service_factory, presenter, make_persona_dict) -> None:
        raw = make_persona_dict("ref persona 1")
        service = service_factory({"/plantilla/getPorId/ref persona 1": raw})
        html = asyncio.run(service.mostrar("ref persona 1"))
        assert _titles(presenter) == [TITULO_UNA_PERSONA]
        assert html.count("<tr ") == 1

    @pytest.mark.parametrize(
        ("metodo", "args"),
        [
            ("listar_por", ("Altura",)),
            ("listar_por_num", ("Mejor_estilo_natacion",)),
            ("listar_por_varios", ("Direccion", "codigo_postal")),
            ("listar_por_varios", ("Mejor_estilo_natacion", "x")),
        ],
    )
    def test_campo_desconocido_falla_antes_de_descargar(self, settings, presenter, gateway, metodo, args) -> None:
        transport = gateway({})
        service = PlantillaService(settings, presenter=presenter, transport=transport)
        with pytest.raises(ValueError):
            asyncio.run(getattr(service, metodo)(*args))
        assert transport.pedidas == []
        assert presenter.llamadas == []


class TestGatewayCaido:
    @pytest.mark.parametrize(
        ("metodo", "args"),
        [
            ("procesar_home", ()),
            ("procesar_acerca_de", ()),
            ("listar", ()),
            ("listar_nombres", ()),
            ("listar_nombres_alfabetico", ()),
            ("listar_por", ("Mejor_estilo_natacion",)),
            ("listar_por_num", ("Anios_participacion_en_mundial",)),
            ("listar_por_varios", ("Fecha", "año")),
            ("listar_buscar", ("Mireia",)),
            ("listar_buscar_cuatro", ("a", "b", "c", "d")),
            ("listar_buscar_por_uno", ("a", "b", "c", "d")),
            ("mostrar", ("ref persona 1",)),
        ],
    )
    def test_no_se_presenta_nada(self, service_caido, presenter, notifier, metodo, args) -> None:
        resultado = asyncio.run(getattr(service_caido, metodo)(*args))
        assert resultado is None
        assert presenter.llamadas == []
        assert len(notifier.alertas) == 1


class TestRespuestaDeError:
    """Un cuerpo de error del gateway cuenta como descarga fallida."""

    def test_mostrar_con_404(self, service_factory, presenter, notifier) -> None:
        service = service_factory({})
        resultado = asyncio.run(service.mostrar("no existe"))
        assert resultado is None
        assert presenter.llamadas == []
        assert notifier.alertas == [MENSAJE_GATEWAY_INACCESIBLE]

    @pytest.mark.parametrize("metodo", ["listar", "listar_nombres", "listar_nombres_alfabetico"])
    def test_listado_con_500(self, settings, presenter, notifier, metodo) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, json={"error": "boom"}))
        service = PlantillaService(settings, presenter=presenter, notifier=notifier, transport=transport)
        resultado = asyncio.run(getattr(service, metodo)())
        assert resultado is None
        assert presenter.llamadas == []
        assert notifier.alertas == [MENSAJE_GATEWAY_INACCESIBLE]

    def test_listado_vacio_sigue_pintando_tabla(self, service_factory, presenter, notifier) -> None:
        service = service_factory({RUTA_TODOS: {"data": []}})
        html = asyncio.run(service.listar())
        assert html is not None
        assert html.count("<tr ") == 0
        assert _titles(presenter) == [TITULO_PLANTILLAS]
        assert notifier.alertas == []
