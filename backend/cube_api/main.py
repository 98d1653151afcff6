# backend/cube_api/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cube_api.api.routes import routers
from cube_api.core.exception_handlers import register_exception_handlers
from cube_api.core.logging_config import get_loggers
from cube_api.core.middleware import MaxBodySizeMiddleware
from cube_api.core.settings import Settings, get_settings
from cube_api.db.mongodb import create_client
from cube_api.db.seed_indexes import ensure_indexes


def create_app(settings: Settings | None = None) -> FastAPI:
    """Construit l'application FastAPI.

    Description:
        Le client MongoDB est créé une seule fois dans le lifespan puis partagé via
        `app.state.db` ; les routes y accèdent uniquement par dépendances.

    Args:
        settings (Settings | None): Configuration ; `get_settings()` par défaut.

    Returns:
        FastAPI: Application prête à servir.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- startup ---
        logger, _ = get_loggers()
        client = create_client(settings)
        app.state.mongo_client = client
        app.state.db = client[settings.mongodb_db]

        if settings.ensure_indexes_on_startup:
            report = await ensure_indexes(app.state.db[settings.mongodb_collection])
            logger.info(f"Indexes: {report}")

        logger.info(f"{settings.app_name} started ({settings.environment})")
        yield  # l'app tourne ici

        # --- shutdown ---
        client.close()

    app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings

    # ⚠️ Ordre des middlewares = ordre d’ajout.
    app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.max_body_bytes)
    register_exception_handlers(app)

    for r in routers:
        app.include_router(r)

    return app


app = create_app()
