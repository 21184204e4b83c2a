# Nombre de archivo: conftest.py
# Ubicación de archivo: tests/conftest.py
# Descripción: Configuraciones comunes para Pytest (PYTHONPATH, SQLite en memoria, usuarios y tokens)

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:  # pragma: no cover - inicialización
    sys.path.insert(0, str(ROOT_DIR))

# Entorno de pruebas: Settings.from_env() lo lee en cada create_app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["JWT_SECRET"] = "secreto-de-pruebas-ilumap-api-hs256-32b"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.config import DatabaseSettings, Settings  # noqa: E402
from core.password import hash_password  # noqa: E402
from core.tokens import TokenClaims, issue_token  # noqa: E402
from db.base import Base  # noqa: E402
from db.models.pqr import Cliente, Luminaria, Rol, Usuario  # noqa: E402
from db.session import build_engine, build_session_factory  # noqa: E402

USUARIOS = {
    "admin": ("u-admin", "admin@ilumap.com", Rol.ADMIN),
    "tecnico": ("u-tecnico", "tecnico@ilumap.com", Rol.TECHNICIAN),
    "operador": ("u-operador", "operador@ilumap.com", Rol.OPERATOR),
    "operador2": ("u-operador2", "operador2@ilumap.com", Rol.OPERATOR),
}
PASSWORD = "clave-segura"


@pytest.fixture
def settings() -> Settings:
    return Settings.from_env()


@pytest.fixture
def engine():
    eng = build_engine(DatabaseSettings(url="sqlite://"))
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def seeded(session_factory) -> None:
    """Usuarios de cada rol, la luminaria LUM-001 y dos clientes."""
    with session_factory() as s:
        hashed = hash_password(PASSWORD, rounds=4)
        for name, (user_id, email, role) in USUARIOS.items():
            s.add(Usuario(id=user_id, name=name, email=email, password=hashed, role=role))
        s.add(
            Luminaria(
                serie="LUM-001",
                direccion="Calle 1",
                sector="CABECERA_MUNICIPAL",
                barrio="Centro",
                lat=6.96,
                lng=-75.41,
            )
        )
        s.add(Cliente(id="1001", nombre="María Pérez", telefono="3001234567", correo="maria@example.com"))
        s.add(Cliente(id="2002", nombre="Jorge Gómez", telefono="3109876543"))
        s.commit()


@pytest.fixture
def session(session_factory, seeded):
    with session_factory() as s:
        yield s


@pytest.fixture
def app(settings, engine, seeded):
    from api.app.main import create_app

    return create_app(settings, engine=engine)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def token_for(settings):
    def _token(alias: str) -> str:
        user_id, email, role = USUARIOS[alias]
        return issue_token(TokenClaims(id=user_id, email=email, role=role.value), secret=settings.auth.jwt_secret)

    return _token


@pytest.fixture
def auth_headers(token_for):
    def _headers(alias: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(alias)}"}

    return _headers
