# Nombre de archivo: deps.py
# Ubicación de archivo: api/api_app/deps.py
# Descripción: Dependencias FastAPI (sesión por request, usuario autenticado y chequeo de capacidades)

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.access import Capability, ensure_capability
from core.config import Settings
from core.errors import UnauthorizedError
from core.tokens import decode_token

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class UsuarioActual:
    id: str
    email: str
    role: str


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_session(request: Request) -> Iterator[Session]:
    """Una sesión por request, tomada de la fábrica que construyó create_app."""
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    settings: Settings = Depends(get_settings_dep),
) -> UsuarioActual:
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise UnauthorizedError("Acceso denegado. Token requerido")
    claims = decode_token(credentials.credentials, secret=settings.auth.jwt_secret)
    return UsuarioActual(id=claims.id, email=claims.email, role=claims.role)


def require_capability(capability: Capability):
    """Dependencia que exige una capacidad al usuario autenticado."""

    def _dep(user: UsuarioActual = Depends(get_current_user)) -> UsuarioActual:
        ensure_capability(user.role, capability)
        return user

    return _dep
