# Nombre de archivo: plazos.py
# Ubicación de archivo: core/services/plazos.py
# Descripción: Política de plazos legales de respuesta y catálogo de condiciones por tipo de PQR

from __future__ import annotations

from datetime import datetime, timedelta

from db.models.pqr import TipoPqr
from db.types import as_utc

PLAZO_POR_DEFECTO = 10

PLAZOS_DIAS: dict[str, int] = {
    TipoPqr.PETICION.value: 5,
    TipoPqr.QUEJA.value: 15,
    TipoPqr.RECLAMO.value: 15,
    TipoPqr.REPORTE.value: 3,
}

CONDICIONES: dict[str, tuple[str, ...]] = {
    TipoPqr.REPORTE.value: (
        "APAGADA",
        "ENCENDIDA_24H",
        "INTERMITENTE",
        "BAJA_INTENSIDAD",
        "PARPADEO",
        "FALLA_ELECTRICA",
        "FALLA_FOTOCONTROL",
        "LUMINARIA_DAÑADA",
        "LUMINARIA_CAIDA",
        "POSTE_INCLINADO",
        "POSTE_CAIDO",
        "VANDALISMO",
        "HURTO_LUMINARIA",
        "HURTO_CABLEADO",
        "OBSTRUCCION_ARBOL",
        "ACCIDENTE_TRANSITO",
        "LUMINARIA_INEXISTENTE",
        "MANTENIMIENTO_PREVENTIVO",
    ),
    TipoPqr.PETICION.value: (
        "REPOTENCIACION",
        "MODERNIZACION",
        "REUBICACION",
        "REVISION_TECNICA",
        "APOYO_MUNICIPAL",
    ),
    TipoPqr.RECLAMO.value: ("RECLAMO_IMPUESTO", "SERVICIO_AP"),
}


def _clave(tipo: TipoPqr | str) -> str:
    return tipo.value if isinstance(tipo, TipoPqr) else str(tipo)


def plazo_dias(tipo: TipoPqr | str) -> int:
    """Días calendario para responder según el tipo; tipos desconocidos usan el plazo por defecto."""
    return PLAZOS_DIAS.get(_clave(tipo), PLAZO_POR_DEFECTO)


def calcular_fecha_plazo(fecha_pqr: datetime, dias: int) -> datetime:
    return as_utc(fecha_pqr) + timedelta(days=dias)


def condiciones_para(tipo: TipoPqr | str) -> tuple[str, ...]:
    """Condiciones admitidas; una tupla vacía significa texto libre (QUEJA)."""
    return CONDICIONES.get(_clave(tipo), ())


__all__ = [
    "PLAZO_POR_DEFECTO",
    "PLAZOS_DIAS",
    "CONDICIONES",
    "plazo_dias",
    "calcular_fecha_plazo",
    "condiciones_para",
]
