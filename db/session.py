# Nombre de archivo: session.py
# Ubicación de archivo: db/session.py
# Descripción: Construcción explícita de engine y fábrica de sesiones SQLAlchemy

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.config import DatabaseSettings


def build_engine(settings: DatabaseSettings) -> Engine:
    """Crea el engine para la URL configurada.

    SQLite en memoria comparte una única conexión para que todas las sesiones
    vean el mismo esquema (tests y desarrollo local).
    """
    url = settings.url
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.echo, **kwargs)
    return create_engine(url, echo=settings.echo, pool_pre_ping=True, pool_recycle=1800)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
