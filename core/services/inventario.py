# Nombre de archivo: inventario.py
# Ubicación de archivo: core/services/inventario.py
# Descripción: Consulta del inventario de luminarias por número de serie (solo lectura)

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.errors import ValidationError
from db.models.pqr import Luminaria

logger = logging.getLogger(__name__)


class InventarioService:
    def __init__(self, session: Session):
        self.session = session

    def listar(self) -> List[Luminaria]:
        return list(self.session.scalars(select(Luminaria).order_by(Luminaria.serie)).all())

    def buscar_por_serie(self, serie: Optional[str]) -> Optional[Luminaria]:
        serie = (serie or "").strip()
        if not serie:
            return None
        return self.session.get(Luminaria, serie)

    def resolver_serie(self, serie: Optional[str]) -> Luminaria:
        """Igual que buscar_por_serie pero una serie inexistente es un error de validación."""
        luminaria = self.buscar_por_serie(serie)
        if luminaria is None:
            logger.info("action=resolver_serie result=no_encontrada serie=%s", serie)
            raise ValidationError("La serie no existe en el inventario")
        return luminaria
