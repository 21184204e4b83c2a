# Nombre de archivo: historial.py
# Ubicación de archivo: core/services/historial.py
# Descripción: Historial de procesos de cada PQR (solo inserciones, orden cronológico)

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.pqr import EstadoPqr, Pqr, PqrHistorial
from db.types import utcnow

PROCESO_REGISTRO = "Registro"
PROCESO_GENERICO = "Cambio de estado"

PROCESO_POR_ESTADO: dict[str, str] = {
    EstadoPqr.ASIGNADA.value: "Asignación",
    EstadoPqr.INTERVENCION.value: "Intervención",
    EstadoPqr.REVISION.value: "Revisión",
    EstadoPqr.CERRADA.value: "Cierre",
}


def proceso_para_estado(estado: EstadoPqr | str) -> str:
    clave = estado.value if isinstance(estado, EstadoPqr) else str(estado)
    return PROCESO_POR_ESTADO.get(clave, PROCESO_GENERICO)


class HistorialService:
    """Registra y consulta entradas del historial.

    ``registrar`` no hace commit: la entrada viaja en la misma transacción que
    el cambio que la origina.
    """

    def __init__(self, session: Session):
        self.session = session

    def registrar(
        self,
        pqr: Pqr,
        proceso: str,
        usuario_id: str,
        comentario: Optional[str] = None,
    ) -> PqrHistorial:
        entrada = PqrHistorial(
            proceso=proceso,
            usuario_id=usuario_id,
            comentario=comentario or "",
            fecha=utcnow(),
        )
        pqr.historial.append(entrada)
        self.session.add(entrada)
        return entrada

    def listar(self, pqr_id: str) -> List[PqrHistorial]:
        stmt = (
            select(PqrHistorial)
            .where(PqrHistorial.pqr_id == pqr_id)
            .order_by(PqrHistorial.fecha, PqrHistorial.id)
        )
        return list(self.session.scalars(stmt).all())
