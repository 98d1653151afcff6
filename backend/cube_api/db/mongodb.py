# backend/cube_api/db/mongodb.py
# Création du client MongoDB (une fois, au démarrage) et dépendances FastAPI d'accès à la base.

from typing import Annotated

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from cube_api.core.settings import Settings, get_app_settings


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Instancie le client Motor à partir des settings.

    Description:
        La connexion réelle est établie paresseusement par le driver à la première opération.

    Args:
        settings (Settings): Configuration (URI MongoDB).

    Returns:
        AsyncIOMotorClient: Client partagé par toutes les requêtes.
    """
    return AsyncIOMotorClient(settings.mongodb_uri)


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Dépendance FastAPI : base ouverte par le lifespan (`app.state.db`)."""
    return request.app.state.db


def get_cube_collection(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AsyncIOMotorCollection:
    """Dépendance FastAPI : collection des cubes configurée dans les settings."""
    return db[settings.mongodb_collection]
