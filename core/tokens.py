# Nombre de archivo: tokens.py
# Ubicación de archivo: core/tokens.py
# Descripción: Emisión y verificación de tokens Bearer (JWT HS256, vigencia 8h)

"""Tokens de acceso de la API.

Payload emitido::

    {"id": <usuario_id>, "email": <email>, "role": <rol>, "iat": ..., "exp": ...}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from core.errors import UnauthorizedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass(frozen=True, slots=True)
class TokenClaims:
    id: str
    email: str
    role: str


def issue_token(claims: TokenClaims, *, secret: str, expires_hours: int = 8, now: datetime | None = None) -> str:
    """Firma un token para el usuario."""
    issued = now or datetime.now(timezone.utc)
    payload = {
        "id": claims.id,
        "email": claims.email,
        "role": claims.role,
        "iat": issued,
        "exp": issued + timedelta(hours=expires_hours),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, *, secret: str) -> TokenClaims:
    """Valida firma y vencimiento; cualquier problema se traduce a UnauthorizedError."""
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM], options={"require": ["exp"]})
    except jwt.ExpiredSignatureError:
        logger.info("action=decode_token result=expirado")
        raise UnauthorizedError("Token inválido o expirado") from None
    except jwt.InvalidTokenError as exc:
        logger.info("action=decode_token result=invalido error=%s", exc)
        raise UnauthorizedError("Token inválido o expirado") from None

    user_id = payload.get("id")
    role = payload.get("role")
    if not user_id or not role:
        raise UnauthorizedError("Token inválido o expirado")
    return TokenClaims(id=str(user_id), email=str(payload.get("email", "")), role=str(role))


__all__ = ["TokenClaims", "issue_token", "decode_token", "ALGORITHM"]
