# Nombre de archivo: types.py
# Ubicación de archivo: db/types.py
# Descripción: Tipos SQLAlchemy compartidos (fechas siempre en UTC con zona horaria)

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normaliza a UTC; un datetime naive se interpreta como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime que persiste en UTC y se lee siempre con tzinfo=UTC.

    SQLite descarta la zona horaria; PostgreSQL la conserva. Con este tipo
    ambos backends devuelven el mismo valor.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        value = as_utc(value)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return as_utc(value)
