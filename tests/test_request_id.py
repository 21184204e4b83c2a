# Nombre de archivo: test_request_id.py
# Ubicación de archivo: tests/test_request_id.py
# Descripción: Verifica que la API genere o propague X-Request-ID y lo exponga al logging

import logging
import uuid

from fastapi.testclient import TestClient

from core.logging import RequestIdFilter, request_id_var


def _assert_request_id(client: TestClient, path: str) -> None:
    resp = client.get(path)
    assert resp.status_code == 200
    header = resp.headers.get("X-Request-ID")
    assert header is not None
    uuid.UUID(header)


def test_request_id_api(client) -> None:
    _assert_request_id(client, "/api/health")


def test_request_id_en_errores_de_negocio(client) -> None:
    resp = client.get("/api/pqr")
    assert resp.status_code == 401
    uuid.UUID(resp.headers["X-Request-ID"])


def test_request_id_propagado(client) -> None:
    resp = client.get("/api/health", headers={"X-Request-ID": "req-externo-42"})
    assert resp.headers["X-Request-ID"] == "req-externo-42"


def test_request_id_en_log_de_acceso(client, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="api.access"):
        client.get("/api/health/version", headers={"X-Request-ID": "req-log-1"})
    registros = [r for r in caplog.records if r.name == "api.access"]
    assert registros
    assert "path=/api/health/version" in registros[-1].getMessage()
    assert "status=200" in registros[-1].getMessage()


def test_filtro_agrega_request_id() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_var.set("abc-123")
    try:
        assert RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "abc-123"
    RequestIdFilter().filter(record)
    assert record.request_id == "-"
