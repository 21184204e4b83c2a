# Nombre de archivo: test_access.py
# Ubicación de archivo: tests/test_access.py
# Descripción: Pruebas de la tabla de capacidades por rol

import pytest

from core.access import CAPABILITIES, Capability, ensure_capability, has_capability
from core.errors import ForbiddenError
from db.models.pqr import Rol


def test_todas_las_capacidades_declaradas() -> None:
    assert set(CAPABILITIES) == set(Capability)


@pytest.mark.parametrize("rol", list(Rol))
def test_todos_crean_y_listan(rol: Rol) -> None:
    assert has_capability(rol, Capability.CREATE_PQR)
    assert has_capability(rol, Capability.LIST_PQR)
    assert has_capability(rol.value, Capability.MANAGE_CLIENTES)


def test_solo_admin_ve_todo() -> None:
    assert has_capability(Rol.ADMIN, Capability.LIST_ALL)
    assert not has_capability(Rol.TECHNICIAN, Capability.LIST_ALL)
    assert not has_capability(Rol.OPERATOR, Capability.LIST_ALL)


def test_transicion_admin_y_tecnico() -> None:
    assert has_capability("ADMIN", Capability.TRANSITION)
    assert has_capability("TECHNICIAN", Capability.TRANSITION)
    with pytest.raises(ForbiddenError):
        ensure_capability("OPERATOR", Capability.TRANSITION)


@pytest.mark.parametrize("rol", ["", "admin", "SUPERUSER"])
def test_rol_desconocido_sin_capacidades(rol: str) -> None:
    assert not any(has_capability(rol, cap) for cap in Capability)
