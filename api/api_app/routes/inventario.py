# Nombre de archivo: inventario.py
# Ubicación de archivo: api/api_app/routes/inventario.py
# Descripción: Endpoints de consulta del inventario de luminarias (autocompletado por serie)

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.api_app.deps import UsuarioActual, get_session, require_capability
from api.api_app.schemas import LuminariaOut
from core.access import Capability
from core.errors import NotFoundError
from core.services.inventario import InventarioService

router = APIRouter(prefix="/api/pqr/inventario", tags=["inventario"])

_consultar = require_capability(Capability.VIEW_INVENTARIO)


@router.get("", response_model=List[LuminariaOut])
def list_inventario(
    _: UsuarioActual = Depends(_consultar),
    session: Session = Depends(get_session),
) -> List[LuminariaOut]:
    return [LuminariaOut.model_validate(lum) for lum in InventarioService(session).listar()]


@router.get("/{serie}", response_model=LuminariaOut)
def get_luminaria(
    serie: str,
    _: UsuarioActual = Depends(_consultar),
    session: Session = Depends(get_session),
) -> LuminariaOut:
    luminaria = InventarioService(session).buscar_por_serie(serie)
    if luminaria is None:
        raise NotFoundError("Luminaria no encontrada")
    return LuminariaOut.model_validate(luminaria)
