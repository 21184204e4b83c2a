# Nombre de archivo: inventario_sync.py
# Ubicación de archivo: core/services/inventario_sync.py
# Descripción: Carga del inventario de luminarias desde Excel/CSV hacia la base de datos
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pandas as pd
from sqlalchemy.orm import Session

from db.models.pqr import Luminaria

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("serie", "direccion", "sector", "barrio", "lat", "lng")


@dataclass(slots=True)
class InventarioSyncResult:
    processed: int
    created: int
    updated: int
    skipped: int

    def to_response(self) -> dict[str, int | str]:
        return {
            "status": "ok",
            "processed": self.processed,
            "created": self.created,
            "updated": self.updated,
            "skipped": self.skipped,
        }


def leer_archivo(path: str | Path) -> pd.DataFrame:
    """Lee un .xlsx/.xls/.csv y normaliza los nombres de columnas a minúsculas."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".xlsx", ".xlsm", ".xls"):
        frame = pd.read_excel(path, dtype={"serie": str})
    elif suffix == ".csv":
        frame = pd.read_csv(path, dtype={"serie": str})
    else:
        raise ValueError(f"Formato no soportado: {suffix}")
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
    if missing:
        raise ValueError(f"Faltan columnas requeridas: {', '.join(missing)}")
    logger.info("action=inventario_sync fetched_rows=%d path=%s", len(frame), path)
    return frame


def _parse_float(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        logger.warning("action=inventario_sync invalid_float value=%s", value)
        return None


def _text(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def sync_luminarias(session: Session, frame: pd.DataFrame) -> InventarioSyncResult:
    """Inserta o actualiza luminarias por serie; filas incompletas se omiten."""
    created = updated = skipped = 0
    for row in frame.to_dict(orient="records"):
        serie = _text(row.get("serie"))
        lat = _parse_float(row.get("lat"))
        lng = _parse_float(row.get("lng"))
        direccion = _text(row.get("direccion"))
        sector = _text(row.get("sector"))
        barrio = _text(row.get("barrio"))
        if not serie or lat is None or lng is None or not direccion or not sector or not barrio:
            skipped += 1
            logger.warning("action=inventario_sync skipped_row serie=%s", serie or "?")
            continue

        luminaria = session.get(Luminaria, serie)
        if luminaria is None:
            session.add(
                Luminaria(serie=serie, direccion=direccion, sector=sector, barrio=barrio, lat=lat, lng=lng)
            )
            created += 1
        else:
            luminaria.direccion = direccion
            luminaria.sector = sector
            luminaria.barrio = barrio
            luminaria.lat = lat
            luminaria.lng = lng
            updated += 1

    try:
        session.commit()
    except Exception:
        session.rollback()
        raise
    result = InventarioSyncResult(processed=len(frame), created=created, updated=updated, skipped=skipped)
    logger.info(
        "action=inventario_sync processed=%d created=%d updated=%d skipped=%d",
        result.processed,
        created,
        updated,
        skipped,
    )
    return result
