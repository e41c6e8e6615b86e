"""Configuración de logging (structlog sobre logging estándar).

Los módulos piden su logger con `structlog.get_logger(__name__)` y emiten
eventos con nombre (`gateway_unreachable`, `listado_presentado`, ...).
La salida va a stderr para no mezclarse con lo que presenta la CLI.
"""

from __future__ import annotations

import logging
import sys

import structlog

from plantilla.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level, logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
