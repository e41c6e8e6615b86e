"""Cliente del microservicio MS Plantilla.

Descarga del API Gateway los datos de la plantilla de nadadores y los
presenta como tablas HTML.
"""

__version__ = "0.1.0"
