"""Wrapper de httpx para hablar con el API Gateway.

Por qué un wrapper:
- Estandariza headers, timeouts y logging de todas las llamadas al gateway.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Política de fallos:
- Un único intento por llamada, sin caché ni reintentos.
- Si el gateway no responde (o responde algo que no es JSON) se avisa al
  operador, se deja constancia en el log y se devuelve `None`. Los llamantes
  tratan `None` como "no hay nada que mostrar"; nunca se propaga la excepción.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from plantilla.core.config import AppSettings
from plantilla.core.interfaces.presenter import OperatorNotifier

MENSAJE_GATEWAY_INACCESIBLE = "Error: No se han podido acceder al API Gateway"

logger = structlog.get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del proyecto.

    Sin timeout: una petición en vuelo termina o falla, no se aborta.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(None),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _fallo(
    evento: str,
    *,
    url: str,
    error: Exception,
    notifier: OperatorNotifier | None,
) -> None:
    logger.error(evento, url=url, error=str(error), error_type=type(error).__name__)
    if notifier is not None:
        notifier.alertar(MENSAJE_GATEWAY_INACCESIBLE)


async def descargar_ruta(
    ruta: str,
    *,
    settings: AppSettings | None = None,
    notifier: OperatorNotifier | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any | None:
    """Descarga `ruta` del gateway y devuelve el JSON ya decodificado.

    Devuelve `None` si no se pudo obtener respuesta.
    """

    settings = settings or AppSettings()
    url = settings.api_gateway + ruta

    logger.debug("gateway_request", url=url)
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url)
    except httpx.RequestError as exc:
        _fallo("gateway_unreachable", url=url, error=exc, notifier=notifier)
        return None

    if not response.is_success:
        logger.warning("gateway_status", url=url, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        _fallo("gateway_invalid_json", url=url, error=exc, notifier=notifier)
        return None
