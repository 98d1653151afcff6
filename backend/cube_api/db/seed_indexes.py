# backend/cube_api/db/seed_indexes.py
"""
Idempotent index seeding for the cube collection.

- Lookups by name and by type_ are served by plain ascending indexes.
- Names are NOT unique: duplicate names are allowed, by-name lookups return the first match.
- An index with the same keys but different options is dropped and recreated.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.operations import IndexModel

KeySpec = List[Tuple[str, int]]

CUBE_INDEXES: List[Tuple[KeySpec, str]] = [
    ([("name", ASCENDING)], "name_1"),
    ([("type_", ASCENDING)], "type__1"),
]


def _normalize_key_from_mongo(key_doc: Dict[str, Any]) -> KeySpec:
    """Mongo returns an OrderedDict-like mapping; convert to list of (field, direction)."""
    return [(k, int(v)) for k, v in key_doc.items()]


async def _find_existing_by_keys(coll: AsyncIOMotorCollection, keys: KeySpec) -> Optional[Dict[str, Any]]:
    async for ix in coll.list_indexes():
        if "key" in ix and _normalize_key_from_mongo(ix["key"]) == keys:
            return ix
    return None


async def ensure_index(coll: AsyncIOMotorCollection, keys: KeySpec, name: str) -> str:
    """Create the non-unique index `name` on `keys`, unless an equivalent one exists.

    Returns:
        str: "kept" | "created" | "recreated"
    """
    existing = await _find_existing_by_keys(coll, keys)
    if existing is not None:
        if not existing.get("unique", False):
            return "kept"
        await coll.drop_index(existing["name"])
        await coll.create_indexes([IndexModel(keys, name=name)])
        return "recreated"

    await coll.create_indexes([IndexModel(keys, name=name)])
    return "created"


async def ensure_indexes(coll: AsyncIOMotorCollection) -> Dict[str, str]:
    """Ensure every cube index exists; returns {index_name: action}."""
    report: Dict[str, str] = {}
    for keys, name in CUBE_INDEXES:
        report[name] = await ensure_index(coll, keys, name)
    return report
