# Nombre de archivo: cargar_inventario.py
# Ubicación de archivo: scripts/cargar_inventario.py
# Descripción: Script para cargar/actualizar el inventario de luminarias desde un Excel o CSV
"""
Carga el inventario de luminarias (serie, direccion, sector, barrio, lat, lng).

Uso:
    python scripts/cargar_inventario.py --archivo inventario.xlsx
"""

from __future__ import annotations

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import get_settings
from core.logging import setup_logging
from core.services.inventario_sync import leer_archivo, sync_luminarias
from db.session import build_engine, build_session_factory


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cargar inventario de luminarias")
    parser.add_argument("--archivo", required=True, help="Ruta al .xlsx o .csv del inventario")
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = setup_logging("scripts", settings.log.level, enable_file=False)
    frame = leer_archivo(args.archivo)
    engine = build_engine(settings.database)
    with build_session_factory(engine)() as session:
        result = sync_luminarias(session, frame)
    logger.info("action=cargar_inventario result=%s", result.to_response())
    return 0


if __name__ == "__main__":
    sys.exit(main())
