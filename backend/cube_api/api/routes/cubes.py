# backend/cube_api/api/routes/cubes.py
# Routes CRUD des cubes : adaptation HTTP fine au-dessus de CubeService.

from typing import Annotated

from fastapi import APIRouter, Body, Query

from cube_api.models.cube import Cube, CubeCreate, InsertAck
from cube_api.services.cube_service import CubeServiceDep

router = APIRouter(tags=["cubes"])

CubeId = Annotated[str, Query(alias="id", description="Identifiant Mongo (hex 24)")]


@router.post(
    "/add_cube",
    response_model=InsertAck,
    summary="Ajouter un cube",
    description="Insère un nouveau cube ; un éventuel `id` dans le corps est ignoré.",
)
async def insert_cube(
    payload: Annotated[CubeCreate, Body(...)],
    service: CubeServiceDep,
):
    return await service.create_cube(payload)


@router.get(
    "/cube_by_id",
    response_model=Cube,
    response_model_by_alias=False,
    summary="Obtenir un cube par identifiant",
)
async def get_cube(cube_id: CubeId, service: CubeServiceDep):
    return await service.get_cube(cube_id)


@router.get(
    "/cube_by_name",
    response_model=Cube,
    response_model_by_alias=False,
    summary="Obtenir un cube par nom",
)
async def get_cube_by_name(name: Annotated[str, Query()], service: CubeServiceDep):
    return await service.get_cube_by_name(name)


@router.get(
    "/cube_by_type",
    response_model=list[Cube],
    response_model_by_alias=False,
    summary="Lister les cubes d'une catégorie",
)
async def get_cube_by_type(type_: Annotated[str, Query()], service: CubeServiceDep):
    return await service.get_cubes_by_type(type_)


@router.get(
    "/cubes",
    response_model=list[Cube],
    response_model_by_alias=False,
    summary="Lister tous les cubes",
)
async def get_all_cubes(service: CubeServiceDep):
    return await service.list_cubes()


@router.put(
    "/update_cube",
    response_model=Cube,
    response_model_by_alias=False,
    summary="Remplacer un cube par identifiant",
    description="Remplacement complet ; l'identifiant est celui du paramètre `id`.",
)
async def update_cube(
    cube_id: CubeId,
    payload: Annotated[Cube, Body(...)],
    service: CubeServiceDep,
):
    return await service.update_cube(cube_id, payload)


@router.put(
    "/update_by_name",
    response_model=Cube,
    response_model_by_alias=False,
    summary="Remplacer un cube par nom",
    description="Remplacement complet ; l'`id` éventuellement présent dans le corps est conservé.",
)
async def update_cube_by_name(
    name: Annotated[str, Query()],
    payload: Annotated[Cube, Body(...)],
    service: CubeServiceDep,
):
    return await service.update_cube_by_name(name, payload)


@router.delete(
    "/delete_cube",
    response_model=str,
    summary="Supprimer un cube par identifiant",
)
async def delete_cube(cube_id: CubeId, service: CubeServiceDep):
    return await service.delete_cube(cube_id)
