# Nombre de archivo: clientes.py
# Ubicación de archivo: core/services/clientes.py
# Descripción: Registro de clientes (búsqueda, alta y edición por número de documento)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from core.errors import ConflictError, NotFoundError, ValidationError
from db.models.pqr import Cliente

logger = logging.getLogger(__name__)

CAMPOS_EDITABLES = ("nombre", "telefono", "correo", "observacion")


@dataclass
class ClienteDatos:
    """Datos de alta de un cliente."""

    id: str
    nombre: str
    telefono: Optional[str] = None
    correo: Optional[str] = None
    observacion: Optional[str] = None


def _limpio(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ClienteService:
    """Operaciones sobre clientes; el caller maneja el ciclo de vida de la sesión."""

    def __init__(self, session: Session):
        self.session = session

    def search(self, query: Optional[str]) -> List[Cliente]:
        """Busca por documento, teléfono o nombre (subcadena, sin distinguir mayúsculas).

        Una consulta vacía devuelve lista vacía para evitar barridos completos.
        """
        q = (query or "").strip()
        if not q:
            return []
        stmt = (
            select(Cliente)
            .where(
                or_(
                    Cliente.id.icontains(q, autoescape=True),
                    Cliente.telefono.icontains(q, autoescape=True),
                    Cliente.nombre.icontains(q, autoescape=True),
                )
            )
            .order_by(Cliente.nombre, Cliente.id)
        )
        return list(self.session.scalars(stmt).all())

    def get(self, cliente_id: str) -> Cliente:
        cliente = self.session.get(Cliente, cliente_id)
        if cliente is None:
            raise NotFoundError("Cliente no encontrado")
        return cliente

    def exists(self, cliente_id: str) -> bool:
        return self.session.get(Cliente, cliente_id) is not None

    def create(self, datos: ClienteDatos) -> Cliente:
        cliente_id = _limpio(datos.id)
        nombre = _limpio(datos.nombre)
        if not cliente_id:
            raise ValidationError("El documento del cliente es obligatorio")
        if not nombre:
            raise ValidationError("El nombre del cliente es obligatorio")
        if self.exists(cliente_id):
            raise ConflictError(f"Ya existe un cliente con documento {cliente_id}")

        cliente = Cliente(
            id=cliente_id,
            nombre=nombre,
            telefono=_limpio(datos.telefono),
            correo=_limpio(datos.correo),
            observacion=_limpio(datos.observacion),
        )
        self.session.add(cliente)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("action=create_cliente cliente_id=%s", cliente_id)
        return cliente

    def update(self, cliente_id: str, cambios: dict[str, Any]) -> Cliente:
        """Actualiza solo los campos editables presentes en ``cambios``.

        El documento es inmutable: enviarlo con otro valor es un error.
        """
        cliente = self.get(cliente_id)
        nuevo_id = cambios.get("id")
        if nuevo_id is not None and str(nuevo_id).strip() != cliente.id:
            raise ValidationError("El documento del cliente no se puede modificar")

        for campo in CAMPOS_EDITABLES:
            if campo not in cambios:
                continue
            valor = _limpio(cambios[campo])
            if campo == "nombre" and not valor:
                raise ValidationError("El nombre del cliente es obligatorio")
            setattr(cliente, campo, valor)

        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("action=update_cliente cliente_id=%s campos=%s", cliente_id, sorted(set(cambios) & set(CAMPOS_EDITABLES)))
        return cliente
