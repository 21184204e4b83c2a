# Nombre de archivo: db.py
# Ubicación de archivo: api/app/db.py
# Descripción: Verificación de conectividad con la base de datos configurada
import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def db_health(engine: Engine) -> dict:
    """Realiza un SELECT 1 y devuelve info básica."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("action=db_health result=error error=%s", exc)
        return {"db": "error", "detail": "Base de datos no disponible"}
    return {"db": "ok", "dialect": engine.dialect.name}
