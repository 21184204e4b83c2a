# Nombre de archivo: test_config.py
# Ubicación de archivo: tests/test_config.py
# Descripción: Pruebas de configuración por entorno y lectura de secretos

from core import get_secret
from core.config import Settings


def test_settings_desde_entorno(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///pqr.db")
    monkeypatch.setenv("JWT_EXPIRES_HOURS", "2")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://ilumap.example ,")
    settings = Settings.from_env()
    assert settings.database.url == "sqlite:///pqr.db"
    assert settings.auth.jwt_expires_hours == 2
    assert settings.log.level == "DEBUG"
    assert settings.log.enable_file is False
    assert settings.cors_origins == ["http://localhost:5173", "https://ilumap.example"]


def test_url_postgres_por_defecto(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("POSTGRES_PASSWORD", raising=False)
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path))
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_DB", "pqr")
    (tmp_path / "postgres_password").write_text("desde-archivo\n", encoding="utf-8")
    url = Settings.from_env().database.url
    assert url.startswith("postgresql+psycopg://")
    assert ":desde-archivo@db:" in url
    assert url.endswith("/pqr")


def test_jwt_secret_por_defecto(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("JWT_SECRET", raising=False)
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path))
    secret = Settings.from_env().auth.jwt_secret
    assert secret == "fallback_secret_cambia_esto_en_produccion_ilumap"
    # HS256 exige al menos 32 bytes de clave
    assert len(secret.encode("utf-8")) >= 32


def test_get_secret_prioriza_entorno(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SECRETS_DIR", str(tmp_path))
    (tmp_path / "mi_secreto").write_text("archivo", encoding="utf-8")
    assert get_secret("MI_SECRETO") == "archivo"
    monkeypatch.setenv("MI_SECRETO", "entorno")
    assert get_secret("MI_SECRETO") == "entorno"
    assert get_secret("NO_EXISTE", "def") == "def"
