"""Servicios del Core (orquestación de descargas, transformaciones y render)."""
