# backend/cube_api/services/cube_service.py
# Service de gestion des cubes : validation des paramètres, appel du repository, interprétation des résultats.

from __future__ import annotations

from typing import Annotated, Awaitable, NoReturn

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from cube_api.core.bson_utils import parse_object_id
from cube_api.core.exceptions import CubeNotFoundError, InvalidRequestError, StoreError
from cube_api.core.logging_config import get_loggers
from cube_api.core.settings import Settings, get_app_settings
from cube_api.db.mongodb import get_cube_collection
from cube_api.models.cube import Cube, CubeCreate, InsertAck
from cube_api.repositories.cube_repository import CubeRepository

DELETE_SUCCESS_MESSAGE = "Cube successfully deleted!"


class CubeService:
    """Service de gestion des cubes.

    Description:
        Un appel par cas d'usage, chacun suivant le même pipeline sans état :
        valider les paramètres → convertir → appeler le repository → interpréter le résultat.

        Taxonomie des erreurs levées :
        - `InvalidRequestError` : paramètre vide ou identifiant mal formé (la base n'est pas contactée)
        - `CubeNotFoundError` : aucune correspondance lors d'une mise à jour
        - `StoreError` : toute autre erreur ; par défaut les lectures unitaires et suppressions
          sans correspondance sont aussi rabattues ici (voir `distinct_not_found`)
    """

    def __init__(self, repository: CubeRepository, distinct_not_found: bool = False):
        """Initialiser le service.

        Args:
            repository: Adaptateur vers la collection des cubes.
            distinct_not_found: Si True, lectures/suppressions sans correspondance lèvent
                `CubeNotFoundError` (404) au lieu de `StoreError` (500).
        """
        self.repository = repository
        self.distinct_not_found = distinct_not_found
        self.logger, _ = get_loggers()

    # ------------------------- création -------------------------

    async def create_cube(self, payload: CubeCreate) -> InsertAck:
        """Créer un cube ; renvoie l'identifiant attribué par Mongo."""
        result = await self.repository.insert(payload)
        self.logger.info(f"Cube created: {result.inserted_id} ({payload.name})")
        return InsertAck(inserted_id=result.inserted_id)

    # ------------------------- lecture -------------------------

    async def get_cube(self, cube_id: str) -> Cube:
        """Lire un cube par identifiant (chaîne hex 24)."""
        oid = parse_object_id(cube_id)
        try:
            return await self.repository.find_by_id(oid)
        except CubeNotFoundError as e:
            self._lookup_failed(e)

    async def get_cube_by_name(self, name: str) -> Cube:
        """Lire un cube par nom."""
        _require(name, "name")
        try:
            return await self.repository.find_by_name(name)
        except CubeNotFoundError as e:
            self._lookup_failed(e)

    async def get_cubes_by_type(self, type_: str) -> list[Cube]:
        """Lister les cubes d'une catégorie ; liste vide si aucun."""
        _require(type_, "type_")
        return await self.repository.find_by_category(type_)

    async def list_cubes(self) -> list[Cube]:
        return await self.repository.find_all()

    # ------------------------- mise à jour -------------------------

    async def update_cube(self, cube_id: str, payload: Cube) -> Cube:
        """Remplacer le cube `cube_id` par `payload`.

        Description:
            L'identifiant du document est toujours celui du paramètre de requête,
            quel que soit l'`id` présent dans le corps.
        """
        oid = parse_object_id(cube_id)
        data = payload.model_copy(update={"id": oid})

        result = await self.repository.replace_by_id(oid, data)
        if result.matched_count != 1:
            raise CubeNotFoundError(f"No cube with id {cube_id}")

        self.logger.info(f"Cube updated by id: {oid}")
        return await self._refetch(self.repository.find_by_id(oid))

    async def update_cube_by_name(self, name: str, payload: Cube) -> Cube:
        """Remplacer le cube nommé `name` par `payload`.

        Description:
            Contrairement à `update_cube`, l'`id` du corps est conservé tel quel : absent ou égal
            à l'`_id` stocké, le document garde son `_id` ; différent, Mongo refuse le remplacement
            (`_id` immuable) et l'opération échoue en `StoreError`.
            Le cube renvoyé est relu par l'`_id` du document effectivement remplacé (les noms
            ne sont pas uniques).
        """
        _require(name, "name")

        replaced = await self.repository.replace_by_name(name, payload)
        if replaced is None:
            raise CubeNotFoundError(f"No cube named {name!r}")

        self.logger.info(f"Cube updated by name: {name!r} -> {payload.name!r} ({replaced.id})")
        return await self._refetch(self.repository.find_by_id(replaced.id))

    # ------------------------- suppression -------------------------

    async def delete_cube(self, cube_id: str) -> str:
        """Supprimer un cube ; renvoie un message de confirmation."""
        oid = parse_object_id(cube_id)
        result = await self.repository.delete_by_id(oid)
        if result.deleted_count != 1:
            if self.distinct_not_found:
                raise CubeNotFoundError(f"No cube with id {cube_id}")
            raise StoreError(f"Cube deletion failed (deleted {result.deleted_count})")

        self.logger.info(f"Cube deleted: {oid}")
        return DELETE_SUCCESS_MESSAGE

    # ------------------------- helpers -------------------------

    def _lookup_failed(self, exc: CubeNotFoundError) -> NoReturn:
        if self.distinct_not_found:
            raise exc
        raise StoreError("Cube lookup failed") from exc

    @staticmethod
    async def _refetch(lookup: Awaitable[Cube]) -> Cube:
        # Document modifié puis introuvable (suppression concurrente) => échec générique
        try:
            return await lookup
        except CubeNotFoundError as e:
            raise StoreError("Updated cube could not be read back") from e


def _require(value: str, field: str) -> None:
    """Rejette un paramètre texte vide avant tout accès à la base."""
    if not value:
        raise InvalidRequestError(f"Parameter '{field}' must not be empty")


# ------------------------- dépendances FastAPI -------------------------


def get_cube_repository(
    collection: Annotated[AsyncIOMotorCollection, Depends(get_cube_collection)],
) -> CubeRepository:
    """Obtenir le repository lié à la collection partagée de l'application."""
    return CubeRepository(collection)


def get_cube_service(
    repository: Annotated[CubeRepository, Depends(get_cube_repository)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> CubeService:
    """Obtenir une instance du service pour la requête courante."""
    return CubeService(repository, distinct_not_found=settings.distinct_not_found)


CubeServiceDep = Annotated[CubeService, Depends(get_cube_service)]
