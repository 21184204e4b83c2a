# Nombre de archivo: errors.py
# Ubicación de archivo: core/errors.py
# Descripción: Jerarquía de errores de negocio con su código HTTP asociado

"""Errores tipados que lanzan los servicios de PQR.

La capa HTTP traduce cada clase a su ``status_code`` sin exponer detalles
internos; los servicios nunca construyen respuestas por su cuenta.
"""

from __future__ import annotations


class PqrError(Exception):
    """Error base de la aplicación."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(PqrError):
    """Datos de entrada incompletos o inconsistentes."""

    status_code = 400


class UnauthorizedError(PqrError):
    """Credencial ausente, inválida o vencida."""

    status_code = 401


class ForbiddenError(PqrError):
    """Usuario autenticado sin permisos suficientes."""

    status_code = 403


class NotFoundError(PqrError):
    """La entidad referenciada no existe."""

    status_code = 404


class ConflictError(PqrError):
    """Alta duplicada (documento o email ya registrado)."""

    status_code = 409


__all__ = [
    "PqrError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
