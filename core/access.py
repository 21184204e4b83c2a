# Nombre de archivo: access.py
# Ubicación de archivo: core/access.py
# Descripción: Control de acceso declarativo por rol (capacidades requeridas por cada operación)

"""Tabla única de permisos.

Cada operación del dominio declara la capacidad que necesita; tanto las
dependencias HTTP como los servicios consultan :func:`ensure_capability`, de
modo que la regla vive en un solo lugar.
"""

from __future__ import annotations

from enum import Enum

from core.errors import ForbiddenError
from db.models.pqr import Rol

_TODOS = frozenset(Rol)


class Capability(str, Enum):
    CREATE_PQR = "create_pqr"
    LIST_PQR = "list_pqr"
    LIST_ALL = "list_all"
    TRANSITION = "transition"
    MANAGE_CLIENTES = "manage_clientes"
    VIEW_INVENTARIO = "view_inventario"


CAPABILITIES: dict[Capability, frozenset[Rol]] = {
    Capability.CREATE_PQR: _TODOS,
    Capability.LIST_PQR: _TODOS,
    Capability.LIST_ALL: frozenset({Rol.ADMIN}),
    Capability.TRANSITION: frozenset({Rol.ADMIN, Rol.TECHNICIAN}),
    Capability.MANAGE_CLIENTES: _TODOS,
    Capability.VIEW_INVENTARIO: _TODOS,
}


def _as_rol(role: Rol | str) -> Rol | None:
    if isinstance(role, Rol):
        return role
    try:
        return Rol(str(role))
    except ValueError:
        return None


def has_capability(role: Rol | str, capability: Capability) -> bool:
    rol = _as_rol(role)
    return rol is not None and rol in CAPABILITIES[capability]


def ensure_capability(role: Rol | str, capability: Capability) -> None:
    """Lanza ForbiddenError si el rol no tiene la capacidad."""
    if not has_capability(role, capability):
        raise ForbiddenError("No tiene permisos para realizar esta acción")


__all__ = ["Capability", "CAPABILITIES", "has_capability", "ensure_capability"]
