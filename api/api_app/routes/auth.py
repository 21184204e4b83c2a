# Nombre de archivo: auth.py
# Ubicación de archivo: api/api_app/routes/auth.py
# Descripción: Endpoints de registro, login y usuario actual

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.api_app.deps import UsuarioActual, get_current_user, get_session, get_settings_dep
from api.api_app.schemas import AuthResponse, LoginRequest, MeResponse, RegisterRequest, UsuarioOut
from core.config import Settings
from core.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _service(session: Session, settings: Settings) -> AuthService:
    return AuthService(session, settings.auth)


@router.post("/register", response_model=AuthResponse)
def register(
    payload: RegisterRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings_dep),
) -> AuthResponse:
    result = _service(session, settings).register(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return AuthResponse(user=UsuarioOut.model_validate(result.user), token=result.token)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings_dep),
) -> AuthResponse:
    result = _service(session, settings).login(email=payload.email, password=payload.password)
    return AuthResponse(user=UsuarioOut.model_validate(result.user), token=result.token)


@router.get("/me", response_model=MeResponse)
def me(
    user: UsuarioActual = Depends(get_current_user),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings_dep),
) -> MeResponse:
    usuario = _service(session, settings).me(user.id)
    return MeResponse(user=UsuarioOut.model_validate(usuario))
