# backend/cube_api/core/bson_utils.py
# ObjectId compatible Pydantic v2 (validation + OpenAPI), base model Mongo et helpers de conversion.
from __future__ import annotations

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler
from pydantic.json_schema import GetJsonSchemaHandler, JsonSchemaValue
from pydantic_core import core_schema

from cube_api.core.exceptions import InvalidRequestError


class PyObjectId(ObjectId):
    """ObjectId utilisable comme type de champ Pydantic v2.

    Description:
        - accepte une chaîne hex de 24 caractères **ou** un `ObjectId`
        - sérialise en chaîne dans les réponses JSON
        - expose `type: string, format: objectid` dans le schéma OpenAPI
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        validator = core_schema.no_info_plain_validator_function(cls._validate)
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema([core_schema.str_schema(), validator]),
            python_schema=validator,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: str(v), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema_obj: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return {
            "type": "string",
            "format": "objectid",
            "pattern": "^[a-fA-F0-9]{24}$",
            "examples": ["507f1f77bcf86cd799439011"],
        }

    @classmethod
    def _validate(cls, v: Any) -> ObjectId:
        """Convertit en ObjectId ; lève `ValueError` (=> erreur de validation Pydantic) sinon."""
        if isinstance(v, ObjectId):
            return v
        if isinstance(v, str) and ObjectId.is_valid(v):
            return ObjectId(v)
        raise ValueError(f"Invalid ObjectId: {v!r}")


class MongoBaseModel(BaseModel):
    """BaseModel Pydantic pour documents Mongo.

    Description:
        Champ `_id` exposé via l'attribut `id` (alias `_id` côté Mongo, `id` accepté en entrée).
    """

    id: Optional[PyObjectId] = Field(default=None, alias="_id")

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


def parse_object_id(value: str, field: str = "id") -> ObjectId:
    """Parse un identifiant reçu en paramètre de requête.

    Args:
        value (str): Chaîne brute (doit être non vide et au format hex 24).
        field (str): Nom du paramètre, repris dans le message d'erreur.

    Returns:
        ObjectId: Identifiant natif Mongo.

    Raises:
        InvalidRequestError: Si la chaîne est vide ou mal formée.
    """
    if not value:
        raise InvalidRequestError(f"Parameter '{field}' must not be empty")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidRequestError(f"Invalid ObjectId for '{field}': {value!r}") from e


def dump_mongo(model: BaseModel, *, exclude_none: bool = False) -> dict:
    """Dump d'un modèle pour Mongo (dict).

    Description:
        Sérialise en dict prêt pour Mongo, en respectant les alias (`_id`). Les `ObjectId`
        restent natifs (mode python). Un `_id` à None n'est jamais émis, pour laisser
        Mongo le générer ou conserver l'existant lors d'un remplacement.

    Args:
        model (BaseModel): Modèle Pydantic à sérialiser.
        exclude_none (bool): Exclure tous les champs None.

    Returns:
        dict: Document sérialisé prêt à insérer/remplacer.
    """
    doc = model.model_dump(by_alias=True, exclude_none=exclude_none)
    if doc.get("_id") is None:
        doc.pop("_id", None)
    return doc
