"""Tests for ObjectId helpers."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from cube_api.core.bson_utils import dump_mongo, parse_object_id
from cube_api.core.exceptions import InvalidRequestError
from cube_api.models.cube import Cube

from conftest import PYRAMINX


def test_parse_object_id_valid():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid


@pytest.mark.parametrize("raw", ["", "abc", "zz" * 12, "507f1f77bcf86cd79943901"])
def test_parse_object_id_rejects(raw):
    with pytest.raises(InvalidRequestError):
        parse_object_id(raw)


def test_cube_accepts_id_or_mongo_alias():
    oid = ObjectId()
    assert Cube(id=str(oid), **PYRAMINX).id == oid
    assert Cube.model_validate({"_id": oid, **PYRAMINX}).id == oid


def test_cube_rejects_malformed_id():
    with pytest.raises(ValidationError):
        Cube(id="not-an-id", **PYRAMINX)


def test_dump_mongo_keeps_native_id_and_drops_empty_one():
    oid = ObjectId()
    assert dump_mongo(Cube(id=oid, **PYRAMINX))["_id"] == oid
    assert "_id" not in dump_mongo(Cube(**PYRAMINX))


def test_json_dump_uses_string_id():
    oid = ObjectId()
    data = Cube(id=oid, **PYRAMINX).model_dump(mode="json")
    assert data["id"] == str(oid)
