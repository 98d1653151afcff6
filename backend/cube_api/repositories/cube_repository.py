# backend/cube_api/repositories/cube_repository.py
# Accès à la collection des cubes : une opération par cas d'usage, sans validation métier.

from __future__ import annotations

from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from cube_api.core.bson_utils import dump_mongo
from cube_api.core.exceptions import CubeNotFoundError, StoreError
from cube_api.models.cube import Cube, CubeBase


class CubeRepository:
    """Adaptateur MongoDB pour les cubes.

    Description:
        Seul point de contact avec la collection. Les identifiants reçus sont déjà des
        `ObjectId` (le parsing est fait par le service). Toute écriture est un remplacement
        complet du document. Les erreurs du driver remontent systématiquement sous forme
        de `StoreError`, jamais masquées.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialiser le repository.

        Args:
            collection: Collection MongoDB des cubes.
        """
        self.collection = collection

    # ------------------------- écriture -------------------------

    async def insert(self, cube: CubeBase) -> InsertOneResult:
        """Insérer un nouveau cube (l'`_id` est généré par Mongo).

        Returns:
            InsertOneResult: Accusé contenant `inserted_id`.

        Raises:
            StoreError: Erreur du driver (clé dupliquée, connexion...).
        """
        doc = dump_mongo(cube)
        doc.pop("_id", None)
        try:
            return await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError(f"Insert failed: {e}") from e

    async def replace_by_id(self, cube_id: ObjectId, cube: Cube) -> UpdateResult:
        """Remplacer intégralement le cube d'identifiant `cube_id`.

        Returns:
            UpdateResult: `matched_count` vaut 0 ou 1.
        """
        try:
            return await self.collection.replace_one({"_id": cube_id}, dump_mongo(cube))
        except PyMongoError as e:
            raise StoreError(f"Replace failed: {e}") from e

    async def replace_by_name(self, name: str, cube: Cube) -> Cube | None:
        """Remplacer intégralement le premier cube nommé `name`.

        Description:
            Les noms n'étant pas uniques, le document effectivement remplacé est renvoyé
            (état après remplacement) pour que l'appelant le relise par son `_id`.

        Returns:
            Cube | None: Document remplacé, ou None si aucun cube ne porte ce nom.
        """
        try:
            doc = await self.collection.find_one_and_replace(
                {"name": name}, dump_mongo(cube), return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StoreError(f"Replace failed: {e}") from e
        return None if doc is None else self._to_model(doc)

    async def delete_by_id(self, cube_id: ObjectId) -> DeleteResult:
        """Supprimer le cube d'identifiant `cube_id`.

        Returns:
            DeleteResult: `deleted_count` vaut 0 ou 1.
        """
        try:
            return await self.collection.delete_one({"_id": cube_id})
        except PyMongoError as e:
            raise StoreError(f"Delete failed: {e}") from e

    # ------------------------- lecture -------------------------

    async def find_by_id(self, cube_id: ObjectId) -> Cube:
        """Lire un cube par identifiant.

        Raises:
            CubeNotFoundError: Aucun document ne correspond.
            StoreError: Erreur du driver ou document illisible.
        """
        return await self._find_one({"_id": cube_id})

    async def find_by_name(self, name: str) -> Cube:
        """Lire un cube par nom (premier trouvé dans l'ordre naturel de la collection)."""
        return await self._find_one({"name": name})

    async def find_by_category(self, category: str) -> list[Cube]:
        """Lister les cubes d'une catégorie (`type_`) ; liste vide si aucun."""
        return await self._find_many({"type_": category})

    async def find_all(self) -> list[Cube]:
        """Lister tous les cubes de la collection."""
        return await self._find_many({})

    async def _find_one(self, query: dict[str, Any]) -> Cube:
        try:
            doc = await self.collection.find_one(query)
        except PyMongoError as e:
            raise StoreError(f"Lookup failed: {e}") from e
        if doc is None:
            raise CubeNotFoundError()
        return self._to_model(doc)

    async def _find_many(self, query: dict[str, Any]) -> list[Cube]:
        try:
            docs = await self.collection.find(query).to_list(length=None)
        except PyMongoError as e:
            raise StoreError(f"Lookup failed: {e}") from e
        return [self._to_model(d) for d in docs]

    @staticmethod
    def _to_model(doc: dict[str, Any]) -> Cube:
        try:
            return Cube.model_validate(doc)
        except ValidationError as e:
            raise StoreError(f"Malformed cube document {doc.get('_id')}: {e}") from e
