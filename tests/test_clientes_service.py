# Nombre de archivo: test_clientes_service.py
# Ubicación de archivo: tests/test_clientes_service.py
# Descripción: Pruebas del registro de clientes (búsqueda, alta y edición)

import pytest

from core.errors import ConflictError, NotFoundError, ValidationError
from core.services.clientes import ClienteDatos, ClienteService


def test_search_vacio_devuelve_lista_vacia(session) -> None:
    service = ClienteService(session)
    assert service.search("") == []
    assert service.search("   ") == []
    assert service.search(None) == []


def test_search_nombre_sin_distinguir_mayusculas(session) -> None:
    resultados = ClienteService(session).search("mar")
    assert [c.id for c in resultados] == ["1001"]
    assert [c.id for c in ClienteService(session).search("JORGE")] == ["2002"]


def test_search_por_documento_y_telefono(session) -> None:
    service = ClienteService(session)
    assert [c.id for c in service.search("200")] == ["2002"]
    assert [c.id for c in service.search("987654")] == ["2002"]
    # "300" aparece en el teléfono de María y en ningún otro campo
    assert [c.id for c in service.search("300")] == ["1001"]


def test_search_caracteres_comodin_son_literales(session) -> None:
    assert ClienteService(session).search("%") == []


def test_create_con_opcionales_vacios(session) -> None:
    cliente = ClienteService(session).create(ClienteDatos(id=" 3003 ", nombre="Ana Ruiz", telefono=""))
    assert cliente.id == "3003"
    assert cliente.telefono is None
    assert cliente.correo is None
    assert cliente.observacion is None


def test_create_duplicado_falla(session) -> None:
    with pytest.raises(ConflictError):
        ClienteService(session).create(ClienteDatos(id="1001", nombre="Otra"))


@pytest.mark.parametrize(("doc", "nombre"), [("", "Ana"), ("4004", ""), ("4004", "   ")])
def test_create_requiere_documento_y_nombre(session, doc: str, nombre: str) -> None:
    with pytest.raises(ValidationError):
        ClienteService(session).create(ClienteDatos(id=doc, nombre=nombre))


def test_update_campos_editables(session) -> None:
    service = ClienteService(session)
    cliente = service.update("1001", {"telefono": "3110000000", "observacion": "Vecina del parque"})
    assert cliente.telefono == "3110000000"
    assert cliente.observacion == "Vecina del parque"
    assert cliente.nombre == "María Pérez"
    assert cliente.correo == "maria@example.com"


def test_update_inexistente(session) -> None:
    with pytest.raises(NotFoundError):
        ClienteService(session).update("9999", {"nombre": "Nadie"})


def test_update_no_cambia_documento(session) -> None:
    service = ClienteService(session)
    with pytest.raises(ValidationError):
        service.update("1001", {"id": "5555", "nombre": "María"})
    # Enviar el mismo documento es aceptado
    assert service.update("1001", {"id": "1001", "nombre": "María P."}).nombre == "María P."


def test_update_nombre_vacio_rechazado(session) -> None:
    with pytest.raises(ValidationError):
        ClienteService(session).update("1001", {"nombre": " "})
