# backend/tests/conftest.py
# Fixtures partagées : collection Mongo en mémoire (résultats PyMongo réels) et TestClient câblé dessus.

import copy
import os
import tempfile

# Les logs de test partent dans un dossier temporaire (avant tout import de cube_api)
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="cube_api_logs_"))
os.environ.setdefault("ENSURE_INDEXES_ON_STARTUP", "false")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError, WriteError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from cube_api.core.settings import Settings
from cube_api.db.mongodb import get_cube_collection, get_database
from cube_api.main import create_app


def _matches(doc, query):
    return all(doc.get(k) == v for k, v in query.items())


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]

    def __aiter__(self):
        self._it = iter(self.docs)
        return self

    async def __anext__(self):
        try:
            return next(self._it)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    """Collection Motor minimale en mémoire.

    `calls` trace chaque opération reçue ; `fail=True` simule une base injoignable.
    """

    def __init__(self):
        self.docs = []
        self.indexes = [{"name": "_id_", "key": {"_id": 1}}]
        self.calls = []
        self.fail = False

    def _call(self, op):
        self.calls.append(op)
        if self.fail:
            raise ServerSelectionTimeoutError("fake: no server available")

    async def insert_one(self, doc):
        self._call("insert_one")
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return InsertOneResult(doc["_id"], True)

    async def find_one(self, query):
        self._call("find_one")
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query):
        self._call("find")
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query)])

    def _replace_first(self, query, replacement):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                if "_id" in replacement and replacement["_id"] != doc["_id"]:
                    raise WriteError("Performing an update on the path '_id' would modify the immutable field '_id'", 66, {})
                new_doc = copy.deepcopy(replacement)
                new_doc["_id"] = doc["_id"]
                self.docs[i] = new_doc
                return new_doc
        return None

    async def replace_one(self, query, replacement):
        self._call("replace_one")
        if self._replace_first(query, replacement) is None:
            return UpdateResult({"n": 0, "nModified": 0, "ok": 1.0}, True)
        return UpdateResult({"n": 1, "nModified": 1, "ok": 1.0}, True)

    async def find_one_and_replace(self, query, replacement, return_document=ReturnDocument.BEFORE):
        self._call("find_one_and_replace")
        before = next((copy.deepcopy(d) for d in self.docs if _matches(d, query)), None)
        after = self._replace_first(query, replacement)
        if return_document == ReturnDocument.AFTER:
            return copy.deepcopy(after)
        return before

    async def delete_one(self, query):
        self._call("delete_one")
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return DeleteResult({"n": 1, "ok": 1.0}, True)
        return DeleteResult({"n": 0, "ok": 1.0}, True)

    # --- index management ---

    def list_indexes(self):
        self._call("list_indexes")
        return FakeCursor(copy.deepcopy(self.indexes))

    async def create_indexes(self, models):
        self._call("create_indexes")
        names = []
        for m in models:
            self.indexes.append({"name": m.document["name"], "key": dict(m.document["key"]), **{k: v for k, v in m.document.items() if k not in ("name", "key")}})
            names.append(m.document["name"])
        return names

    async def drop_index(self, name):
        self._call("drop_index")
        self.indexes = [ix for ix in self.indexes if ix["name"] != name]


class FakeDB:
    def __init__(self, collection, ping_ok=True):
        self.collection = collection
        self.ping_ok = ping_ok

    def __getitem__(self, name):
        return self.collection

    async def command(self, name):
        if not self.ping_ok:
            raise ServerSelectionTimeoutError("fake: ping failed")
        return {"ok": 1.0}


PYRAMINX = {
    "name": "Pyraminx",
    "type_": "tetrahedron",
    "pieces": 4,
    "faces": 4,
    "stickers": 0,
    "year_created": 1970,
    "wr": "0.91s",
}

RUBIKS = {
    "name": "Rubik's Cube",
    "type_": "3x3",
    "pieces": 26,
    "faces": 6,
    "stickers": 54,
    "year_created": 1974,
    "wr": {"time": "3.13s", "holder": "Max Park"},
}


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def fake_db(collection):
    return FakeDB(collection)


def build_client(collection, fake_db, **settings_overrides):
    app = create_app(Settings(**settings_overrides))
    app.dependency_overrides[get_cube_collection] = lambda: collection
    app.dependency_overrides[get_database] = lambda: fake_db
    return TestClient(app)


@pytest.fixture
def client(collection, fake_db):
    return build_client(collection, fake_db)
