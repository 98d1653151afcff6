from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from cube_api.core.health_checks import check_mongodb
from cube_api.core.settings import Settings, get_app_settings
from cube_api.db.mongodb import get_database
from cube_api.models.base.health import HealthCheck

router = APIRouter(tags=["Health"])


@router.get(
    "/ping",
    summary="Vérification de santé de l’API",
    description="Retourne un message 'pong' permettant de tester que l’API répond.",
)
async def ping():
    return {"status": "ok", "message": "pong"}


@router.get(
    "/health",
    response_model=HealthCheck,
    summary="Health check de l'API",
    description="Retourne le statut de l'API et de ses dépendances (MongoDB)",
)
async def health(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> JSONResponse:
    """
    Health check endpoint standard

    Returns:
        200 si tout OK, 503 si MongoDB ne répond pas
    """
    checks = {"database": await check_mongodb(db)}

    has_errors = any(check != "ok" for check in checks.values())
    overall_status = "degraded" if has_errors else "ok"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE if has_errors else status.HTTP_200_OK

    response = HealthCheck(status=overall_status, version=settings.api_version, checks=checks)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
