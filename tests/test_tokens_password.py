# Nombre de archivo: test_tokens_password.py
# Ubicación de archivo: tests/test_tokens_password.py
# Descripción: Pruebas de hashing de contraseñas y de tokens Bearer firmados

import warnings
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from core.errors import UnauthorizedError
from core.password import hash_password, verify_password
from core.tokens import ALGORITHM, TokenClaims, decode_token, issue_token

SECRET = "secreto-unitario-tokens-ilumap-hs256-32b"


def test_hash_y_verificacion() -> None:
    hashed = hash_password("clave123", rounds=4)
    assert hashed != "clave123"
    assert verify_password("clave123", hashed)
    assert not verify_password("clave124", hashed)


def test_hash_corrupto_no_verifica() -> None:
    assert verify_password("clave123", "no-es-un-hash") is False


def test_token_ida_y_vuelta() -> None:
    claims = TokenClaims(id="u-1", email="ana@ilumap.com", role="OPERATOR")
    assert decode_token(issue_token(claims, secret=SECRET), secret=SECRET) == claims


def test_token_vence_a_las_ocho_horas() -> None:
    emitido = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    token = issue_token(TokenClaims("u-1", "a@ilumap.com", "ADMIN"), secret=SECRET, now=emitido)
    payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM], options={"verify_exp": False})
    assert payload["exp"] - payload["iat"] == int(timedelta(hours=8).total_seconds())
    assert {"id", "email", "role"} <= set(payload)


def test_token_vencido() -> None:
    emitido = datetime.now(timezone.utc) - timedelta(hours=9)
    token = issue_token(TokenClaims("u-1", "a@ilumap.com", "ADMIN"), secret=SECRET, now=emitido)
    with pytest.raises(UnauthorizedError):
        decode_token(token, secret=SECRET)


def test_token_con_otra_firma() -> None:
    token = issue_token(TokenClaims("u-1", "a@ilumap.com", "ADMIN"), secret="otro-secreto-distinto-ilumap-hs256-32bytes")
    with pytest.raises(UnauthorizedError):
        decode_token(token, secret=SECRET)


@pytest.mark.parametrize("token", ["", "abc.def.ghi", "no-es-jwt"])
def test_token_malformado(token: str) -> None:
    with pytest.raises(UnauthorizedError):
        decode_token(token, secret=SECRET)


def test_token_sin_rol() -> None:
    token = jwt.encode(
        {"id": "u-1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        SECRET,
        algorithm=ALGORITHM,
    )
    with pytest.raises(UnauthorizedError):
        decode_token(token, secret=SECRET)


def test_secretos_configurados_no_generan_advertencias(settings) -> None:
    claims = TokenClaims("u-1", "a@ilumap.com", "ADMIN")
    for secret in (SECRET, settings.auth.jwt_secret):
        assert len(secret.encode("utf-8")) >= 32
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert decode_token(issue_token(claims, secret=secret), secret=secret) == claims
