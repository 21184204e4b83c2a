# Nombre de archivo: password.py
# Ubicación de archivo: core/password.py
# Descripción: Hashing y verificación de contraseñas de usuarios de la API usando bcrypt

from __future__ import annotations

import logging

import bcrypt

LOGGER = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 10


def _to_bytes(password: str) -> bytes:
    encoded = password.encode("utf-8")
    if len(encoded) > _BCRYPT_MAX_BYTES:
        LOGGER.warning("action=hash_password warning=truncado max_bytes=%s", _BCRYPT_MAX_BYTES)
        return encoded[:_BCRYPT_MAX_BYTES]
    return encoded


def hash_password(password: str, *, rounds: int = DEFAULT_ROUNDS) -> str:
    """Genera un hash bcrypt con el costo indicado."""

    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Verifica la contraseña contra un hash bcrypt; un hash corrupto cuenta como fallo."""

    try:
        return bool(bcrypt.checkpw(_to_bytes(password), hashed.encode("utf-8")))
    except ValueError as exc:
        LOGGER.warning("action=verify_password error=hash_invalido detail=%s", exc)
        return False


__all__ = ["hash_password", "verify_password", "DEFAULT_ROUNDS"]
