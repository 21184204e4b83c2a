# Nombre de archivo: pqr.py
# Ubicación de archivo: api/api_app/routes/pqr.py
# Descripción: Endpoints de PQR (alta, listado por alcance de rol, detalle y cambio de estado)

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.api_app.deps import UsuarioActual, get_session, require_capability
from api.api_app.schemas import EstadoUpdate, PqrCreate, PqrOut
from core.access import Capability
from core.services.pqr_service import PqrDatos, PqrFiltro, PqrService

router = APIRouter(prefix="/api/pqr", tags=["pqr"])


@router.post("", response_model=PqrOut, status_code=201)
def create_pqr(
    payload: PqrCreate,
    user: UsuarioActual = Depends(require_capability(Capability.CREATE_PQR)),
    session: Session = Depends(get_session),
) -> PqrOut:
    pqr = PqrService(session).crear(PqrDatos(**payload.model_dump()), user.id)
    return PqrOut.model_validate(pqr)


@router.get("", response_model=List[PqrOut])
def list_pqrs(
    estado: Optional[str] = Query(default=None),
    tipo_pqr: Optional[str] = Query(default=None, alias="tipoPqr"),
    q: Optional[str] = Query(default=None),
    creador: Optional[str] = Query(default=None, alias="usuarioCreadorId"),
    user: UsuarioActual = Depends(require_capability(Capability.LIST_PQR)),
    session: Session = Depends(get_session),
) -> List[PqrOut]:
    """El filtro por creador solo se respeta para ADMIN; el resto ve sus propias PQR."""
    filtro = PqrFiltro(estado=estado, tipo_pqr=tipo_pqr, q=q, usuario_creador_id=creador)
    pqrs = PqrService(session).listar(filtro, user.role, user.id)
    return [PqrOut.model_validate(p) for p in pqrs]


@router.get("/{pqr_id}", response_model=PqrOut)
def get_pqr(
    pqr_id: str,
    user: UsuarioActual = Depends(require_capability(Capability.LIST_PQR)),
    session: Session = Depends(get_session),
) -> PqrOut:
    return PqrOut.model_validate(PqrService(session).obtener(pqr_id, user.role, user.id))


@router.patch("/{pqr_id}/estado", response_model=PqrOut)
def update_estado(
    pqr_id: str,
    payload: EstadoUpdate,
    user: UsuarioActual = Depends(require_capability(Capability.TRANSITION)),
    session: Session = Depends(get_session),
) -> PqrOut:
    pqr = PqrService(session).cambiar_estado(
        pqr_id,
        payload.estado,
        user.id,
        user.role,
        payload.comentario,
    )
    return PqrOut.model_validate(pqr)
