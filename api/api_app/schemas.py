# Nombre de archivo: schemas.py
# Ubicación de archivo: api/api_app/schemas.py
# Descripción: Modelos Pydantic de entrada/salida de la API (alias camelCase como el frontend)

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from db.models.pqr import MedioReporte, Prioridad, Rol, TipoPqr


class ApiModel(BaseModel):
    """Base común: acepta snake_case o camelCase y serializa en camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Auth
# ──────────────────────────────────────────────────────────────────────────────


class RegisterRequest(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    role: Optional[Rol] = None


class LoginRequest(ApiModel):
    email: str
    password: str


class UsuarioOut(ApiModel):
    id: str
    name: str
    email: str
    role: Rol


class AuthResponse(ApiModel):
    user: UsuarioOut
    token: str


class MeResponse(ApiModel):
    user: UsuarioOut


# ──────────────────────────────────────────────────────────────────────────────
# Clientes e inventario
# ──────────────────────────────────────────────────────────────────────────────


class ClienteCreate(ApiModel):
    id: str = Field(min_length=1, max_length=32)
    nombre: str = Field(min_length=1, max_length=255)
    telefono: Optional[str] = Field(default=None, max_length=32)
    correo: Optional[EmailStr] = None
    observacion: Optional[str] = None


class ClienteUpdate(ApiModel):
    id: Optional[str] = None
    nombre: Optional[str] = Field(default=None, max_length=255)
    telefono: Optional[str] = Field(default=None, max_length=32)
    correo: Optional[EmailStr] = None
    observacion: Optional[str] = None


class ClienteOut(ApiModel):
    id: str
    nombre: str
    telefono: Optional[str] = None
    correo: Optional[str] = None
    observacion: Optional[str] = None


class LuminariaOut(ApiModel):
    serie: str
    direccion: str
    sector: str
    barrio: str
    lat: float
    lng: float


# ──────────────────────────────────────────────────────────────────────────────
# PQR
# ──────────────────────────────────────────────────────────────────────────────


class PqrCreate(ApiModel):
    cliente_id: Optional[str] = None
    tipo_pqr: TipoPqr
    condicion: Optional[str] = None
    prioridad: Prioridad = Prioridad.MEDIA
    medio_reporte: MedioReporte = MedioReporte.PERSONAL
    fecha_pqr: Optional[datetime] = None
    has_serie: bool = False
    serie_luminaria: Optional[str] = None
    direccion_pqr: Optional[str] = None
    sector_pqr: Optional[str] = None
    barrio: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    observacion_pqr: Optional[str] = None


class EstadoUpdate(ApiModel):
    estado: str = Field(min_length=1, max_length=32)
    comentario: Optional[str] = None


class HistorialOut(ApiModel):
    id: int
    proceso: str
    usuario_id: str
    comentario: str
    fecha: datetime


class PqrOut(ApiModel):
    id: str
    cliente_id: str
    nombre_cliente: Optional[str] = None
    tipo_pqr: TipoPqr
    condicion: str
    prioridad: Prioridad
    medio_reporte: MedioReporte
    fecha_pqr: datetime
    plazo_dias: int
    fecha_plazo: datetime
    estado: str
    direccion_pqr: Optional[str] = None
    sector_pqr: Optional[str] = None
    barrio: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    has_serie: bool
    serie_luminaria: Optional[str] = None
    observacion_pqr: Optional[str] = None
    usuario_creador_id: str
    creado_en: datetime
    cliente: Optional[ClienteOut] = None
    luminaria: Optional[LuminariaOut] = None
    historial: List[HistorialOut] = Field(default_factory=list)
