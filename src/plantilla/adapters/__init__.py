"""Adaptadores de I/O: gateway HTTP (httpx), render HTML (Jinja2) y exportación."""
