# Nombre de archivo: auth_service.py
# Ubicación de archivo: core/services/auth_service.py
# Descripción: Registro, login y perfil de usuarios del personal con emisión de token Bearer

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.config import AuthSettings
from core.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from core.password import hash_password, verify_password
from core.tokens import TokenClaims, issue_token
from db.models.pqr import Rol, Usuario

logger = logging.getLogger(__name__)

CREDENCIALES_INVALIDAS = "Credenciales inválidas"


@dataclass
class AuthResult:
    user: Usuario
    token: str


def _normalizar_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(self, session: Session, settings: AuthSettings):
        self.session = session
        self.settings = settings

    def _token_para(self, user: Usuario) -> str:
        claims = TokenClaims(id=user.id, email=user.email, role=user.role.value)
        return issue_token(
            claims,
            secret=self.settings.jwt_secret,
            expires_hours=self.settings.jwt_expires_hours,
        )

    def _por_email(self, email: str) -> Optional[Usuario]:
        return self.session.scalars(select(Usuario).where(func.lower(Usuario.email) == email)).first()

    def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Rol | str | None = None,
    ) -> AuthResult:
        email_norm = _normalizar_email(email)
        if not (name or "").strip() or not email_norm or not password:
            raise ValidationError("Nombre, email y contraseña son obligatorios")
        try:
            rol = Rol(role) if role else Rol.OPERATOR
        except ValueError:
            raise ValidationError(f"Rol inválido: {role}") from None
        if self._por_email(email_norm) is not None:
            raise ConflictError("El email ya está registrado")

        user = Usuario(
            name=name.strip(),
            email=email_norm,
            password=hash_password(password, rounds=self.settings.bcrypt_rounds),
            role=rol,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        logger.info("action=register user_id=%s role=%s", user.id, rol.value)
        return AuthResult(user=user, token=self._token_para(user))

    def login(self, *, email: str, password: str) -> AuthResult:
        user = self._por_email(_normalizar_email(email))
        # Mismo mensaje para email desconocido y contraseña errónea
        if user is None or not verify_password(password or "", user.password):
            logger.info("action=login result=rechazado")
            raise UnauthorizedError(CREDENCIALES_INVALIDAS)
        logger.info("action=login result=ok user_id=%s", user.id)
        return AuthResult(user=user, token=self._token_para(user))

    def me(self, user_id: str) -> Usuario:
        user = self.session.get(Usuario, user_id)
        if user is None:
            raise NotFoundError("Usuario no encontrado")
        return user

    def ensure_user(self, *, name: str, email: str, password: str, role: Rol) -> tuple[Usuario, bool]:
        """Crea el usuario si no existe; devuelve (usuario, creado)."""
        existente = self._por_email(_normalizar_email(email))
        if existente is not None:
            return existente, False
        return self.register(name=name, email=email, password=password, role=role).user, True
