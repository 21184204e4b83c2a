# Nombre de archivo: pqr.py
# Ubicación de archivo: db/models/pqr.py
# Descripción: Modelos SQLAlchemy de PQR de alumbrado público (clientes, inventario, PQR, historial, usuarios)

from __future__ import annotations

import uuid
from enum import Enum

from sqlalchemy import (
    Boolean,
    Column,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from db.base import Base
from db.types import UTCDateTime, utcnow


def _uuid() -> str:
    return str(uuid.uuid4())


class TipoPqr(str, Enum):
    """Categoría legal de la solicitud."""

    PETICION = "PETICION"
    QUEJA = "QUEJA"
    RECLAMO = "RECLAMO"
    REPORTE = "REPORTE"


class Prioridad(str, Enum):
    BAJA = "BAJA"
    MEDIA = "MEDIA"
    ALTA = "ALTA"
    CRITICA = "CRITICA"


class MedioReporte(str, Enum):
    """Canal por el que ingresó la solicitud."""

    PERSONAL = "PERSONAL"
    TELEFONICO = "TELEFONICO"
    EMAIL = "EMAIL"
    APP = "APP"
    ESCRITO = "ESCRITO"
    AUTONOMO = "AUTONOMO"


class EstadoPqr(str, Enum):
    """Etapas del flujo de atención."""

    PENDIENTE = "PENDIENTE"
    ASIGNADA = "ASIGNADA"
    INTERVENCION = "INTERVENCION"
    REVISION = "REVISION"
    CERRADA = "CERRADA"


class Rol(str, Enum):
    ADMIN = "ADMIN"
    TECHNICIAN = "TECHNICIAN"
    OPERATOR = "OPERATOR"


class Usuario(Base):
    """Cuenta de personal (operador, técnico o administrador)."""

    __tablename__ = "usuarios"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(
        SQLEnum(Rol, name="rol_usuario", native_enum=False, length=16),
        nullable=False,
        default=Rol.OPERATOR,
    )
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<Usuario id={self.id} email='{self.email}' role={self.role.value}>"


class Cliente(Base):
    """Ciudadano identificado por su número de documento."""

    __tablename__ = "clientes"

    id = Column(String(32), primary_key=True)
    nombre = Column(String(255), nullable=False, index=True)
    telefono = Column(String(32), nullable=True, index=True)
    correo = Column(String(255), nullable=True)
    observacion = Column(Text, nullable=True)

    pqrs = relationship("Pqr", back_populates="cliente")

    def __repr__(self) -> str:
        return f"<Cliente id={self.id} nombre='{self.nombre}'>"


class Luminaria(Base):
    """Luminaria del inventario (dato de referencia, solo lectura para PQR)."""

    __tablename__ = "luminarias"

    serie = Column(String(64), primary_key=True)
    direccion = Column(String(255), nullable=False)
    sector = Column(String(64), nullable=False)
    barrio = Column(String(128), nullable=False)
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Luminaria serie='{self.serie}' barrio='{self.barrio}'>"


class Pqr(Base):
    """Petición, queja, reclamo o reporte registrado contra un cliente."""

    __tablename__ = "pqrs"
    __table_args__ = (
        Index("ix_pqrs_creador_fecha", "usuario_creador_id", "fecha_pqr"),
    )

    id = Column(String(36), primary_key=True, default=_uuid)
    cliente_id = Column(String(32), ForeignKey("clientes.id"), nullable=False, index=True)
    tipo_pqr = Column(SQLEnum(TipoPqr, name="tipo_pqr", native_enum=False, length=16), nullable=False)
    condicion = Column(String(64), nullable=False)
    prioridad = Column(
        SQLEnum(Prioridad, name="prioridad_pqr", native_enum=False, length=16),
        nullable=False,
        default=Prioridad.MEDIA,
    )
    medio_reporte = Column(
        SQLEnum(MedioReporte, name="medio_reporte", native_enum=False, length=16),
        nullable=False,
        default=MedioReporte.PERSONAL,
    )
    fecha_pqr = Column(UTCDateTime(), nullable=False, index=True)
    plazo_dias = Column(Integer, nullable=False)
    fecha_plazo = Column(UTCDateTime(), nullable=False)
    # Texto libre: el cambio de estado acepta valores fuera de EstadoPqr
    estado = Column(String(32), nullable=False, default=EstadoPqr.PENDIENTE.value, index=True)
    direccion_pqr = Column(String(255), nullable=True)
    sector_pqr = Column(String(64), nullable=True)
    barrio = Column(String(128), nullable=True)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    has_serie = Column(Boolean, nullable=False, default=False)
    serie_luminaria = Column(String(64), ForeignKey("luminarias.serie"), nullable=True, index=True)
    observacion_pqr = Column(Text, nullable=True)
    usuario_creador_id = Column(String(36), ForeignKey("usuarios.id"), nullable=False, index=True)
    creado_en = Column(UTCDateTime(), nullable=False, default=utcnow)

    cliente = relationship("Cliente", back_populates="pqrs", lazy="joined")
    luminaria = relationship("Luminaria", lazy="joined")
    historial = relationship(
        "PqrHistorial",
        back_populates="pqr",
        order_by=lambda: [PqrHistorial.fecha, PqrHistorial.id],
        lazy="selectin",
    )

    @property
    def nombre_cliente(self) -> str | None:
        return self.cliente.nombre if self.cliente else None

    def __repr__(self) -> str:
        return f"<Pqr id={self.id} tipo={self.tipo_pqr.value} estado={self.estado}>"


class PqrHistorial(Base):
    """Entrada del historial de procesos; solo se insertan filas."""

    __tablename__ = "pqr_historial"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pqr_id = Column(String(36), ForeignKey("pqrs.id"), nullable=False, index=True)
    proceso = Column(String(64), nullable=False)
    usuario_id = Column(String(36), ForeignKey("usuarios.id"), nullable=False)
    comentario = Column(Text, nullable=False, default="")
    fecha = Column(UTCDateTime(), nullable=False, default=utcnow)

    pqr = relationship("Pqr", back_populates="historial")

    def __repr__(self) -> str:
        return f"<PqrHistorial id={self.id} pqr_id={self.pqr_id} proceso='{self.proceso}'>"
