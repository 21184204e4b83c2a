# Nombre de archivo: seed_admin.py
# Ubicación de archivo: scripts/seed_admin.py
# Descripción: Crea el usuario administrador inicial si todavía no existe
"""
Uso:
    python scripts/seed_admin.py [--email admin@ilumap.com] [--password ...]

La contraseña por defecto se toma de ADMIN_PASSWORD (o del secreto del mismo
nombre) y, si no existe, de ``admin123``.
"""

from __future__ import annotations

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import get_secret
from core.config import get_settings
from core.logging import setup_logging
from core.services.auth_service import AuthService
from db.base import Base
from db.models.pqr import Rol
from db.session import build_engine, build_session_factory

DEFAULT_EMAIL = "admin@ilumap.com"
DEFAULT_NAME = "Administrador Principal"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Crear administrador inicial")
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    parser.add_argument("--name", default=DEFAULT_NAME)
    parser.add_argument("--password", default=None)
    parser.add_argument("--create-schema", action="store_true", help="Crea las tablas si faltan (desarrollo)")
    args = parser.parse_args(argv)

    settings = get_settings()
    logger = setup_logging("scripts", settings.log.level, enable_file=False)
    password = args.password or get_secret("ADMIN_PASSWORD", "admin123")

    engine = build_engine(settings.database)
    if args.create_schema:
        Base.metadata.create_all(engine)
    with build_session_factory(engine)() as session:
        user, created = AuthService(session, settings.auth).ensure_user(
            name=args.name,
            email=args.email,
            password=password,
            role=Rol.ADMIN,
        )
    if created:
        logger.info("action=seed_admin result=creado email=%s", user.email)
    else:
        logger.info("action=seed_admin result=ya_existe email=%s", user.email)
    return 0


if __name__ == "__main__":
    sys.exit(main())
