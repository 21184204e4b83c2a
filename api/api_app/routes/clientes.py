# Nombre de archivo: clientes.py
# Ubicación de archivo: api/api_app/routes/clientes.py
# Descripción: Endpoints del registro de clientes (búsqueda, alta y edición)

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.api_app.deps import UsuarioActual, get_session, require_capability
from api.api_app.schemas import ClienteCreate, ClienteOut, ClienteUpdate
from core.access import Capability
from core.services.clientes import ClienteDatos, ClienteService

router = APIRouter(prefix="/api/pqr/clientes", tags=["clientes"])

_gestionar = require_capability(Capability.MANAGE_CLIENTES)


@router.get("/search", response_model=List[ClienteOut])
def search_clientes(
    q: Optional[str] = Query(default=None),
    _: UsuarioActual = Depends(_gestionar),
    session: Session = Depends(get_session),
) -> List[ClienteOut]:
    """Busca por documento, teléfono o nombre; ``q`` vacío devuelve lista vacía."""
    return [ClienteOut.model_validate(c) for c in ClienteService(session).search(q)]


@router.get("/{cliente_id}", response_model=ClienteOut)
def get_cliente(
    cliente_id: str,
    _: UsuarioActual = Depends(_gestionar),
    session: Session = Depends(get_session),
) -> ClienteOut:
    return ClienteOut.model_validate(ClienteService(session).get(cliente_id))


@router.post("", response_model=ClienteOut, status_code=201)
def create_cliente(
    payload: ClienteCreate,
    _: UsuarioActual = Depends(_gestionar),
    session: Session = Depends(get_session),
) -> ClienteOut:
    cliente = ClienteService(session).create(ClienteDatos(**payload.model_dump()))
    return ClienteOut.model_validate(cliente)


@router.put("/{cliente_id}", response_model=ClienteOut)
def update_cliente(
    cliente_id: str,
    payload: ClienteUpdate,
    _: UsuarioActual = Depends(_gestionar),
    session: Session = Depends(get_session),
) -> ClienteOut:
    cambios = payload.model_dump(exclude_unset=True)
    cliente = ClienteService(session).update(cliente_id, cambios)
    return ClienteOut.model_validate(cliente)
