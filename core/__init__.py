# Nombre de archivo: __init__.py
# Ubicación de archivo: core/__init__.py
# Descripción: Núcleo compartido de ILUMAP (configuración, secretos, errores y control de acceso)

"""Utilidades transversales usadas por la API, los servicios y los scripts."""

from .errors import PqrError
from .secrets import get_secret

__all__ = ["get_secret", "PqrError"]
