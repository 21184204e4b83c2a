# Nombre de archivo: pqr_service.py
# Ubicación de archivo: core/services/pqr_service.py
# Descripción: Ciclo de vida de PQR (alta con plazo legal, autocompletado por luminaria, listado y cambio de estado)

"""Servicio de ciclo de vida de PQR.

Reglas principales:
- El plazo legal se calcula una única vez al crear (ver ``core.services.plazos``).
- Si la PQR declara serie de luminaria, la ubicación se copia del inventario y
  reemplaza cualquier valor enviado por el usuario.
- Cada alta y cada cambio de estado agrega una entrada al historial dentro de
  la misma transacción.
- Solo ADMIN ve todas las PQR; el resto ve únicamente las que creó.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import List, Optional, Type, TypeVar

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from core.access import Capability, ensure_capability, has_capability
from core.errors import NotFoundError, ValidationError
from core.services.historial import PROCESO_REGISTRO, HistorialService, proceso_para_estado
from core.services.inventario import InventarioService
from core.services.plazos import calcular_fecha_plazo, condiciones_para, plazo_dias
from db.models.pqr import (
    Cliente,
    EstadoPqr,
    MedioReporte,
    Pqr,
    Prioridad,
    Rol,
    TipoPqr,
)
from db.types import as_utc, utcnow

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass
class PqrDatos:
    """Datos de alta de una PQR tal como llegan de la capa de transporte."""

    cliente_id: Optional[str]
    tipo_pqr: TipoPqr | str
    condicion: Optional[str]
    prioridad: Prioridad | str = Prioridad.MEDIA
    medio_reporte: MedioReporte | str = MedioReporte.PERSONAL
    fecha_pqr: Optional[datetime] = None
    has_serie: bool = False
    serie_luminaria: Optional[str] = None
    direccion_pqr: Optional[str] = None
    sector_pqr: Optional[str] = None
    barrio: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    observacion_pqr: Optional[str] = None


@dataclass(frozen=True)
class PqrFiltro:
    estado: Optional[str] = None
    tipo_pqr: Optional[str] = None
    q: Optional[str] = None
    usuario_creador_id: Optional[str] = None


def _enum(cls: Type[E], value: E | str, etiqueta: str) -> E:
    if isinstance(value, cls):
        return value
    try:
        return cls(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"{etiqueta} inválido: {value}") from None


class PqrService:
    """Motor de ciclo de vida; recibe la sesión ya construida por el caller."""

    def __init__(self, session: Session):
        self.session = session
        self.inventario = InventarioService(session)
        self.historial = HistorialService(session)

    # -------------------------------------------------------------------------
    # ALTA
    # -------------------------------------------------------------------------

    def crear(self, datos: PqrDatos, usuario_id: str) -> Pqr:
        cliente = self._resolver_cliente(datos.cliente_id)
        tipo = _enum(TipoPqr, datos.tipo_pqr, "Tipo de PQR")
        prioridad = _enum(Prioridad, datos.prioridad, "Prioridad")
        medio = _enum(MedioReporte, datos.medio_reporte, "Medio de reporte")
        condicion = self._validar_condicion(tipo, datos.condicion)

        dias = plazo_dias(tipo)
        fecha_pqr = as_utc(datos.fecha_pqr) if datos.fecha_pqr else utcnow()
        fecha_plazo = calcular_fecha_plazo(fecha_pqr, dias)

        pqr = Pqr(
            cliente_id=cliente.id,
            tipo_pqr=tipo,
            condicion=condicion,
            prioridad=prioridad,
            medio_reporte=medio,
            fecha_pqr=fecha_pqr,
            plazo_dias=dias,
            fecha_plazo=fecha_plazo,
            estado=EstadoPqr.PENDIENTE.value,
            direccion_pqr=datos.direccion_pqr,
            sector_pqr=datos.sector_pqr,
            barrio=datos.barrio,
            lat=datos.lat,
            lng=datos.lng,
            has_serie=bool(datos.has_serie),
            serie_luminaria=None,
            observacion_pqr=datos.observacion_pqr,
            usuario_creador_id=usuario_id,
        )

        if datos.has_serie:
            if not (datos.serie_luminaria or "").strip():
                raise ValidationError("Debe indicar la serie de la luminaria")
            luminaria = self.inventario.resolver_serie(datos.serie_luminaria)
            pqr.luminaria = luminaria
            pqr.serie_luminaria = luminaria.serie
            pqr.direccion_pqr = luminaria.direccion
            pqr.sector_pqr = luminaria.sector
            pqr.barrio = luminaria.barrio
            pqr.lat = luminaria.lat
            pqr.lng = luminaria.lng

        try:
            self.session.add(pqr)
            self.historial.registrar(pqr, PROCESO_REGISTRO, usuario_id)
            self.session.flush()
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("action=create_pqr result=rollback cliente_id=%s", cliente.id)
            raise

        logger.info(
            "action=create_pqr pqr_id=%s tipo=%s plazo_dias=%d serie=%s usuario=%s",
            pqr.id,
            tipo.value,
            dias,
            pqr.serie_luminaria or "-",
            usuario_id,
        )
        return pqr

    def _resolver_cliente(self, cliente_id: Optional[str]) -> Cliente:
        cliente_id = (cliente_id or "").strip()
        if not cliente_id:
            raise ValidationError("Debe seleccionar o crear un cliente")
        cliente = self.session.get(Cliente, cliente_id)
        if cliente is None:
            raise ValidationError(f"El cliente {cliente_id} no existe")
        return cliente

    @staticmethod
    def _validar_condicion(tipo: TipoPqr, condicion: Optional[str]) -> str:
        condicion = (condicion or "").strip()
        if not condicion:
            raise ValidationError("La condición es obligatoria")
        permitidas = condiciones_para(tipo)
        if permitidas and condicion not in permitidas:
            raise ValidationError(f"Condición '{condicion}' no válida para {tipo.value}")
        return condicion

    # -------------------------------------------------------------------------
    # CONSULTAS
    # -------------------------------------------------------------------------

    def listar(self, filtro: Optional[PqrFiltro], rol: Rol | str, usuario_id: str) -> List[Pqr]:
        """Lista PQR de la más reciente a la más antigua.

        Un usuario sin ``LIST_ALL`` queda restringido a sus propias PQR sin
        importar el filtro recibido.
        """
        ensure_capability(rol, Capability.LIST_PQR)
        filtro = filtro or PqrFiltro()
        if not has_capability(rol, Capability.LIST_ALL):
            filtro = replace(filtro, usuario_creador_id=usuario_id)

        stmt = select(Pqr)
        if filtro.usuario_creador_id:
            stmt = stmt.where(Pqr.usuario_creador_id == filtro.usuario_creador_id)
        if filtro.estado:
            stmt = stmt.where(Pqr.estado == filtro.estado.strip().upper())
        if filtro.tipo_pqr:
            stmt = stmt.where(Pqr.tipo_pqr == _enum(TipoPqr, filtro.tipo_pqr, "Tipo de PQR"))
        q = (filtro.q or "").strip()
        if q:
            stmt = stmt.join(Cliente, Pqr.cliente_id == Cliente.id).where(
                or_(
                    Cliente.nombre.icontains(q, autoescape=True),
                    Pqr.direccion_pqr.icontains(q, autoescape=True),
                )
            )
        stmt = stmt.order_by(Pqr.fecha_pqr.desc(), Pqr.creado_en.desc(), Pqr.id)
        return list(self.session.scalars(stmt).unique().all())

    def obtener(self, pqr_id: str, rol: Rol | str, usuario_id: str) -> Pqr:
        """Detalle de una PQR dentro del alcance de listado del usuario."""
        ensure_capability(rol, Capability.LIST_PQR)
        pqr = self.session.get(Pqr, pqr_id)
        if pqr is None:
            raise NotFoundError("PQR no encontrada")
        if not has_capability(rol, Capability.LIST_ALL) and pqr.usuario_creador_id != usuario_id:
            raise NotFoundError("PQR no encontrada")
        return pqr

    # -------------------------------------------------------------------------
    # CAMBIO DE ESTADO
    # -------------------------------------------------------------------------

    def cambiar_estado(
        self,
        pqr_id: str,
        nuevo_estado: EstadoPqr | str,
        usuario_id: str,
        rol: Rol | str,
        comentario: Optional[str] = None,
    ) -> Pqr:
        """Aplica el nuevo estado y deja constancia en el historial.

        No se valida el orden de las etapas: cualquier valor no vacío se
        acepta y los desconocidos se registran como "Cambio de estado".
        """
        ensure_capability(rol, Capability.TRANSITION)
        pqr = self.session.get(Pqr, pqr_id)
        if pqr is None:
            raise NotFoundError("PQR no encontrada")

        estado = nuevo_estado.value if isinstance(nuevo_estado, EstadoPqr) else (nuevo_estado or "").strip().upper()
        if not estado:
            raise ValidationError("El estado es obligatorio")

        anterior = pqr.estado
        if anterior == EstadoPqr.CERRADA.value:
            logger.warning("action=update_estado warning=reapertura pqr_id=%s nuevo=%s", pqr_id, estado)

        proceso = proceso_para_estado(estado)
        try:
            pqr.estado = estado
            self.historial.registrar(pqr, proceso, usuario_id, comentario)
            self.session.flush()
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.exception("action=update_estado result=rollback pqr_id=%s", pqr_id)
            raise

        logger.info(
            "action=update_estado pqr_id=%s anterior=%s nuevo=%s proceso=%s usuario=%s",
            pqr_id,
            anterior,
            estado,
            proceso,
            usuario_id,
        )
        return pqr
