from __future__ import annotations

from pymongo import ReturnDocument
from pymongo.database import Database

from ..core.constants import COUNTERS_COLLECTION


def next_sequence(db: Database, name: str) -> int:
    """Allocate the next sequential id for ``name``.

    A single ``$inc`` on the counter document is atomic, so concurrent writers never share an id.
    """

    counter = db[COUNTERS_COLLECTION].find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(counter["seq"])
