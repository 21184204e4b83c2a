"""
# Nombre de archivo: 20261019_01_estructura_pqr.py
# Ubicación de archivo: db/alembic/versions/20261019_01_estructura_pqr.py
# Descripción: Crea usuarios, clientes, luminarias, pqrs y pqr_historial
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261019_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_usuarios"),
    )
    op.create_index("ix_usuarios_email", "usuarios", ["email"], unique=True)

    op.create_table(
        "clientes",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("nombre", sa.String(length=255), nullable=False),
        sa.Column("telefono", sa.String(length=32), nullable=True),
        sa.Column("correo", sa.String(length=255), nullable=True),
        sa.Column("observacion", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_clientes"),
    )
    op.create_index("ix_clientes_nombre", "clientes", ["nombre"])
    op.create_index("ix_clientes_telefono", "clientes", ["telefono"])

    op.create_table(
        "luminarias",
        sa.Column("serie", sa.String(length=64), nullable=False),
        sa.Column("direccion", sa.String(length=255), nullable=False),
        sa.Column("sector", sa.String(length=64), nullable=False),
        sa.Column("barrio", sa.String(length=128), nullable=False),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("lng", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("serie", name="pk_luminarias"),
    )

    op.create_table(
        "pqrs",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("cliente_id", sa.String(length=32), nullable=False),
        sa.Column("tipo_pqr", sa.String(length=16), nullable=False),
        sa.Column("condicion", sa.String(length=64), nullable=False),
        sa.Column("prioridad", sa.String(length=16), nullable=False),
        sa.Column("medio_reporte", sa.String(length=16), nullable=False),
        sa.Column("fecha_pqr", sa.DateTime(timezone=True), nullable=False),
        sa.Column("plazo_dias", sa.Integer(), nullable=False),
        sa.Column("fecha_plazo", sa.DateTime(timezone=True), nullable=False),
        sa.Column("estado", sa.String(length=32), nullable=False),
        sa.Column("direccion_pqr", sa.String(length=255), nullable=True),
        sa.Column("sector_pqr", sa.String(length=64), nullable=True),
        sa.Column("barrio", sa.String(length=128), nullable=True),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lng", sa.Float(), nullable=True),
        sa.Column("has_serie", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("serie_luminaria", sa.String(length=64), nullable=True),
        sa.Column("observacion_pqr", sa.Text(), nullable=True),
        sa.Column("usuario_creador_id", sa.String(length=36), nullable=False),
        sa.Column("creado_en", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_pqrs"),
        sa.ForeignKeyConstraint(["cliente_id"], ["clientes.id"], name="fk_pqrs_cliente_id_clientes"),
        sa.ForeignKeyConstraint(["serie_luminaria"], ["luminarias.serie"], name="fk_pqrs_serie_luminaria_luminarias"),
        sa.ForeignKeyConstraint(["usuario_creador_id"], ["usuarios.id"], name="fk_pqrs_usuario_creador_id_usuarios"),
    )
    op.create_index("ix_pqrs_cliente_id", "pqrs", ["cliente_id"])
    op.create_index("ix_pqrs_fecha_pqr", "pqrs", ["fecha_pqr"])
    op.create_index("ix_pqrs_estado", "pqrs", ["estado"])
    op.create_index("ix_pqrs_serie_luminaria", "pqrs", ["serie_luminaria"])
    op.create_index("ix_pqrs_usuario_creador_id", "pqrs", ["usuario_creador_id"])
    op.create_index("ix_pqrs_creador_fecha", "pqrs", ["usuario_creador_id", "fecha_pqr"])

    op.create_table(
        "pqr_historial",
        sa.Column("id", sa.Integer(), nullable=False, autoincrement=True),
        sa.Column("pqr_id", sa.String(length=36), nullable=False),
        sa.Column("proceso", sa.String(length=64), nullable=False),
        sa.Column("usuario_id", sa.String(length=36), nullable=False),
        sa.Column("comentario", sa.Text(), nullable=False, server_default=""),
        sa.Column("fecha", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_pqr_historial"),
        sa.ForeignKeyConstraint(["pqr_id"], ["pqrs.id"], name="fk_pqr_historial_pqr_id_pqrs"),
        sa.ForeignKeyConstraint(["usuario_id"], ["usuarios.id"], name="fk_pqr_historial_usuario_id_usuarios"),
    )
    op.create_index("ix_pqr_historial_pqr_id", "pqr_historial", ["pqr_id"])


def downgrade() -> None:
    op.drop_index("ix_pqr_historial_pqr_id", table_name="pqr_historial")
    op.drop_table("pqr_historial")
    for name in (
        "ix_pqrs_creador_fecha",
        "ix_pqrs_usuario_creador_id",
        "ix_pqrs_serie_luminaria",
        "ix_pqrs_estado",
        "ix_pqrs_fecha_pqr",
        "ix_pqrs_cliente_id",
    ):
        op.drop_index(name, table_name="pqrs")
    op.drop_table("pqrs")
    op.drop_table("luminarias")
    op.drop_index("ix_clientes_telefono", table_name="clientes")
    op.drop_index("ix_clientes_nombre", table_name="clientes")
    op.drop_table("clientes")
    op.drop_index("ix_usuarios_email", table_name="usuarios")
    op.drop_table("usuarios")
