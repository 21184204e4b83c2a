# Nombre de archivo: config.py
# Ubicación de archivo: core/config.py
# Descripción: Configuración centralizada (entorno) para la API de PQR de alumbrado público

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from os import getenv

from core.secrets import get_secret

_DEV_JWT_SECRET = "fallback_secret_cambia_esto_en_produccion_ilumap"


def _database_url() -> str:
    url = getenv("DATABASE_URL")
    if url:
        return url
    user = getenv("POSTGRES_USER", "ilumap")
    password = get_secret("POSTGRES_PASSWORD", "superseguro")
    host = getenv("POSTGRES_HOST", "postgres")
    port = getenv("POSTGRES_PORT", "5432")
    name = getenv("POSTGRES_DB", "ilumap")
    return f"postgresql+psycopg://{user}:{password}@{host}:{port}/{name}"


def _split_csv(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(slots=True)
class DatabaseSettings:
    url: str
    echo: bool = False


@dataclass(slots=True)
class AuthSettings:
    """Parámetros de emisión de tokens y hashing de contraseñas."""

    jwt_secret: str
    jwt_expires_hours: int = 8
    bcrypt_rounds: int = 10


@dataclass(slots=True)
class LogSettings:
    level: str = "INFO"
    enable_file: bool | None = None
    logs_dir: str | None = None


@dataclass(slots=True)
class Settings:
    database: DatabaseSettings
    auth: AuthSettings
    log: LogSettings
    cors_origins: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "Settings":
        enable_file_raw = getenv("LOG_TO_FILE")
        return cls(
            database=DatabaseSettings(
                url=_database_url(),
                echo=getenv("SQL_ECHO", "false").lower() in ("true", "1", "yes"),
            ),
            auth=AuthSettings(
                jwt_secret=get_secret("JWT_SECRET", _DEV_JWT_SECRET) or _DEV_JWT_SECRET,
                jwt_expires_hours=int(getenv("JWT_EXPIRES_HOURS", "8")),
                bcrypt_rounds=int(getenv("BCRYPT_ROUNDS", "10")),
            ),
            log=LogSettings(
                level=getenv("LOG_LEVEL", "INFO").upper(),
                enable_file=None if enable_file_raw is None else enable_file_raw.lower() in ("true", "1", "yes"),
                logs_dir=getenv("LOGS_DIR"),
            ),
            cors_origins=_split_csv(getenv("CORS_ORIGINS")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
