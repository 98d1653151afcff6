# backend/cube_api/models/cube.py
# Représentation d'un cube (puzzle) : payloads d'entrée, document Mongo et accusé d'insertion.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cube_api.core.bson_utils import MongoBaseModel, PyObjectId


class CubeBase(BaseModel):
    """Champs descriptifs d'un cube.

    Description:
        Tous les champs sont écrasés lors d'une mise à jour (remplacement complet du document).

    Attributes:
        name (str): Libellé (clé de recherche secondaire, non unique en base).
        type_ (str): Catégorie (ex. "3x3", "tetrahedron"), partagée par plusieurs cubes.
        pieces (int): Nombre de pièces.
        faces (int): Nombre de faces.
        stickers (int): Nombre de stickers.
        year_created (int): Année de création.
        wr (Any): Record du monde (chaîne libre ou sous-document).
    """

    name: str
    type_: str = Field(..., description="Catégorie du cube")
    pieces: int
    faces: int
    stickers: int
    year_created: int
    wr: Any = None


class CubeCreate(CubeBase):
    """Payload de création d'un cube.

    Description:
        Un éventuel `id` présent dans le corps est ignoré : l'identifiant est généré par Mongo.
    """

    pass


class Cube(MongoBaseModel, CubeBase):
    """Document Mongo d'un cube (et payload complet des mises à jour)."""

    pass


class InsertAck(BaseModel):
    """Accusé de création : identifiant attribué par Mongo."""

    inserted_id: PyObjectId
