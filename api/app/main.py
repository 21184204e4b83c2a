# Nombre de archivo: main.py
# Ubicación de archivo: api/app/main.py
# Descripción: Fábrica de la aplicación FastAPI de PQR (rutas, middlewares y traducción de errores)
"""
Arranque:
    uvicorn --factory api.app.main:create_app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from api.api_app.routes.auth import router as auth_router
from api.api_app.routes.clientes import router as clientes_router
from api.api_app.routes.health import router as health_router
from api.api_app.routes.inventario import router as inventario_router
from api.api_app.routes.pqr import router as pqr_router
from core.config import Settings, get_settings
from core.errors import PqrError
from core.logging import setup_logging
from core.middlewares import RequestIDMiddleware
from db.session import build_engine, build_session_factory

logger = logging.getLogger("api")


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PqrError)
    async def _pqr_error(request: Request, exc: PqrError) -> JSONResponse:
        logger.info(
            "action=error type=%s status=%s path=%s msg=%s",
            type(exc).__name__,
            exc.status_code,
            request.url.path,
            exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("action=error type=RequestValidationError status=400 path=%s", request.url.path)
        detail = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"error": "Datos inválidos", "detail": detail})

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("action=error type=unhandled path=%s error=%s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "Error interno del servidor"})


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Construye la app con su propio engine y fábrica de sesiones.

    ``engine`` permite inyectar uno ya creado (tests con SQLite en memoria).
    """
    settings = settings or get_settings()
    setup_logging(
        "api",
        settings.log.level,
        enable_file=settings.log.enable_file,
        logs_dir=settings.log.logs_dir,
        filename="api.log",
    )
    engine = engine or build_engine(settings.database)

    app = FastAPI(title="ILUMAP PQR API", version="0.1.0")
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(RequestIDMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(clientes_router)
    # inventario antes que pqr: GET /api/pqr/{pqr_id} capturaría /api/pqr/inventario
    app.include_router(inventario_router)
    app.include_router(pqr_router)
    logger.info("action=create_app dialect=%s cors=%s", engine.dialect.name, len(settings.cors_origins))
    return app
