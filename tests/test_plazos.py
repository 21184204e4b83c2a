# Nombre de archivo: test_plazos.py
# Ubicación de archivo: tests/test_plazos.py
# Descripción: Pruebas de la política de plazos legales y del catálogo de condiciones

from datetime import datetime, timedelta, timezone

import pytest

from core.services.plazos import (
    PLAZO_POR_DEFECTO,
    calcular_fecha_plazo,
    condiciones_para,
    plazo_dias,
)
from db.models.pqr import TipoPqr


@pytest.mark.parametrize(
    ("tipo", "esperado"),
    [("PETICION", 5), ("QUEJA", 15), ("RECLAMO", 15), ("REPORTE", 3)],
)
def test_plazo_por_tipo(tipo: str, esperado: int) -> None:
    assert plazo_dias(tipo) == esperado
    assert plazo_dias(TipoPqr(tipo)) == esperado


@pytest.mark.parametrize("tipo", ["SUGERENCIA", "", "peticion", "OTRO"])
def test_tipo_desconocido_usa_plazo_por_defecto(tipo: str) -> None:
    assert plazo_dias(tipo) == PLAZO_POR_DEFECTO == 10


def test_fecha_plazo_suma_dias_calendario() -> None:
    base = datetime(2026, 2, 26, 15, 30, tzinfo=timezone.utc)
    assert calcular_fecha_plazo(base, 3) == datetime(2026, 3, 1, 15, 30, tzinfo=timezone.utc)


def test_fecha_plazo_naive_se_interpreta_utc() -> None:
    base = datetime(2026, 1, 1, 8, 0)
    resultado = calcular_fecha_plazo(base, 5)
    assert resultado.tzinfo is not None
    assert resultado - base.replace(tzinfo=timezone.utc) == timedelta(days=5)


def test_condiciones_por_tipo() -> None:
    assert "APAGADA" in condiciones_para(TipoPqr.REPORTE)
    assert "MODERNIZACION" in condiciones_para("PETICION")
    assert condiciones_para("RECLAMO") == ("RECLAMO_IMPUESTO", "SERVICIO_AP")
    assert condiciones_para(TipoPqr.QUEJA) == ()
