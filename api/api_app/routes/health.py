# Nombre de archivo: health.py
# Ubicación de archivo: api/api_app/routes/health.py
# Descripción: Endpoints de health, versión de build y verificación de DB
from fastapi import APIRouter, Request
from datetime import datetime, timezone
import os

from api.app.db import db_health

router = APIRouter(prefix="/api")


def _detect_build_version() -> str:
    return os.getenv("API_BUILD_VERSION") or os.getenv("BUILD_VERSION") or "0.1.0"


BUILD_VERSION = _detect_build_version()


@router.get("/health")
def health(request: Request):
    base_response = {
        "status": "ok",
        "service": "ilumap-api",
        "message": "Backend de Gestión de Alumbrado Público funcionando",
        "time": datetime.now(timezone.utc).isoformat(),
    }
    return {**base_response, **db_health(request.app.state.engine)}


@router.get("/health/version")
def health_version():
    return {"status": "ok", "service": "ilumap-api", "version": BUILD_VERSION}
