# Nombre de archivo: secrets.py
# Ubicación de archivo: core/secrets.py
# Descripción: Lectura de secretos (JWT, base de datos) desde entorno o Docker secrets

"""Funciones para leer secretos de variables de entorno o archivos en `/run/secrets`.

La API de ILUMAP necesita al menos dos secretos: la clave de firma de tokens
(`JWT_SECRET`) y la contraseña de PostgreSQL (`POSTGRES_PASSWORD`). Si la
variable no está definida se busca un archivo con el mismo nombre en
minúsculas dentro de `SECRETS_DIR` (por defecto `/run/secrets`).
"""

from pathlib import Path
from typing import Optional
import os


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Obtiene el secreto `name` desde variables de entorno o archivo.

    Parameters
    ----------
    name:
        Nombre de la variable de entorno a buscar.
    default:
        Valor a retornar si no se encuentra el secreto.

    Returns
    -------
    Optional[str]
        Valor del secreto o `default` si no está disponible.
    """

    value = os.getenv(name)
    if value:
        return value

    secrets_dir = Path(os.getenv("SECRETS_DIR", "/run/secrets"))
    try:
        content = (secrets_dir / name.lower()).read_text(encoding="utf-8").strip()
    except (FileNotFoundError, NotADirectoryError, PermissionError):
        return default
    return content or default
