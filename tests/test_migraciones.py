# Nombre de archivo: test_migraciones.py
# Ubicación de archivo: tests/test_migraciones.py
# Descripción: Verifica que la migración Alembic produzca el mismo esquema que los modelos

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from core.config import DatabaseSettings
from db.base import Base
from db.session import build_engine

ROOT_DIR = Path(__file__).resolve().parents[1]


def _alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT_DIR / "db" / "alembic"))
    return cfg


def _esquema(engine) -> dict:
    insp = inspect(engine)
    esquema = {}
    for tabla in sorted(set(insp.get_table_names()) - {"alembic_version"}):
        pk = insp.get_pk_constraint(tabla)
        esquema[tabla] = {
            "columnas": sorted((c["name"], bool(c["nullable"])) for c in insp.get_columns(tabla)),
            "pk": (pk.get("name"), tuple(pk["constrained_columns"])),
            "fks": sorted(
                (fk.get("name"), tuple(fk["constrained_columns"]), fk["referred_table"])
                for fk in insp.get_foreign_keys(tabla)
            ),
            "indices": sorted(
                (ix["name"], tuple(ix["column_names"]), bool(ix["unique"])) for ix in insp.get_indexes(tabla)
            ),
        }
    return esquema


def test_upgrade_coincide_con_modelos(monkeypatch, tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'migrada.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    command.upgrade(_alembic_config(), "head")

    migrada = create_engine(url)
    referencia = build_engine(DatabaseSettings(url="sqlite://"))
    Base.metadata.create_all(referencia)
    try:
        esquema_migrado = _esquema(migrada)
        assert esquema_migrado == _esquema(referencia)
        assert esquema_migrado["pqrs"]["pk"] == ("pk_pqrs", ("id",))
        assert ("fk_pqrs_cliente_id_clientes", ("cliente_id",), "clientes") in esquema_migrado["pqrs"]["fks"]
    finally:
        migrada.dispose()
        referencia.dispose()


def test_downgrade_elimina_tablas(monkeypatch, tmp_path) -> None:
    url = f"sqlite:///{tmp_path / 'ida_y_vuelta.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    cfg = _alembic_config()
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    engine = create_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) - {"alembic_version"} == set()
    finally:
        engine.dispose()
